"""JSON file storage for medication requests."""

import json
from pathlib import Path
from typing import Optional

import aiofiles

from medication_requests.exceptions import DataStoreError
from medication_requests.utils import log_operation, logger

from .models import Medication, MedicationRequest
from .repository import MedicationRequestRepository


class JsonMedicationRequestRepository(MedicationRequestRepository):
    """Medication request repository backed by a single JSON file.

    File layout:
        {
            "medications": [{"id": 3, "name": "Amoxicillin", ...}],
            "medication_requests": [{"id": 3, "medication_id": 3, ...}]
        }

    The file is read once and kept in memory. Each medication is loaded
    into a single instance shared by all requests referencing it. Changes
    are written back only by ``save()``, using the atomic write pattern
    (write to temp file, then rename).
    """

    def __init__(self, file_path: str = "data/medication_requests.json"):
        """Initialize repository.

        Args:
            file_path: Path to the JSON data file
        """
        self.file_path = Path(file_path)
        self._medications: dict[int, Medication] = {}
        self._requests: dict[int, MedicationRequest] = {}
        self._loaded = False

    def _get_temp_file_path(self) -> Path:
        """Get path to temporary file for atomic writes."""
        return self.file_path.with_name(self.file_path.name + ".tmp")

    async def load(self) -> None:
        """Load medications and requests from the JSON file.

        A missing file is treated as an empty store.

        Raises:
            DataStoreError: If the file is unreadable, corrupted or references
                unknown medications
        """
        self._medications = {}
        self._requests = {}

        if not self.file_path.exists():
            logger.debug(f"Data file not found, starting empty: {self.file_path}")
            self._loaded = True
            return

        try:
            async with aiofiles.open(self.file_path, mode="r", encoding="utf-8") as f:
                content = await f.read()
            data = json.loads(content)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Corrupted data file {self.file_path}: {e}")
            raise DataStoreError(f"Corrupted data file {self.file_path}: {e}") from e
        except OSError as e:
            logger.error(f"Cannot read data file {self.file_path}: {e}")
            raise DataStoreError(f"Cannot read data file {self.file_path}: {e}") from e

        try:
            for med_data in data.get("medications", []):
                medication = Medication.from_dict(med_data)
                self._medications[medication.id] = medication

            for request_data in data.get("medication_requests", []):
                medication = self._medications.get(request_data["medication_id"])
                if medication is None:
                    raise DataStoreError(
                        f"Medication request {request_data['id']} references "
                        f"unknown medication {request_data['medication_id']}"
                    )
                request = MedicationRequest.from_dict(request_data, medication=medication)
                self._requests[request.id] = request
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error(f"Invalid record in data file {self.file_path}: {e}")
            raise DataStoreError(f"Invalid record in data file {self.file_path}: {e}") from e

        self._loaded = True
        logger.debug(
            f"Loaded {len(self._medications)} medication(s) and "
            f"{len(self._requests)} request(s) from {self.file_path}"
        )

    async def _ensure_loaded(self) -> None:
        if not self._loaded:
            await self.load()

    async def get_one(self, request_id: int) -> Optional[MedicationRequest]:
        """Get medication request by ID.

        Args:
            request_id: Medication request ID

        Returns:
            Live MedicationRequest instance or None if not found
        """
        await self._ensure_loaded()
        request = self._requests.get(request_id)
        if request is None:
            logger.debug(f"Medication request not found: {request_id}")
        return request

    async def get_medication(self, medication_id: int) -> Optional[Medication]:
        """Get medication by ID.

        Args:
            medication_id: Medication ID

        Returns:
            Live Medication instance or None if not found
        """
        await self._ensure_loaded()
        return self._medications.get(medication_id)

    async def add_medication(self, medication: Medication) -> Medication:
        """Register a medication in the store.

        Args:
            medication: Medication to add or replace

        Returns:
            The stored medication instance
        """
        await self._ensure_loaded()
        self._medications[medication.id] = medication
        return medication

    async def add_request(self, request: MedicationRequest) -> MedicationRequest:
        """Register a medication request in the store.

        The request is attached to the stored medication instance.

        Args:
            request: Medication request to add or replace

        Returns:
            The stored request

        Raises:
            DataStoreError: If the referenced medication is not in the store
        """
        await self._ensure_loaded()
        medication = self._medications.get(request.medication_id)
        if medication is None:
            raise DataStoreError(
                f"Medication request {request.id} references "
                f"unknown medication {request.medication_id}"
            )
        request.medication = medication
        self._requests[request.id] = request
        return request

    async def save(self) -> None:
        """Write the store back to the JSON file with atomic write.

        Raises:
            Exception: If save operation fails (temp file is removed)
        """
        await self._ensure_loaded()
        temp_path = self._get_temp_file_path()

        try:
            data = {
                "medications": [
                    med.to_dict() for med in self._medications.values()
                ],
                "medication_requests": [
                    req.to_dict() for req in self._requests.values()
                ],
            }
            json_content = json.dumps(data, ensure_ascii=False, indent=2)

            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(temp_path, mode="w", encoding="utf-8") as f:
                await f.write(json_content)

            # Atomic rename (replaces existing file)
            temp_path.replace(self.file_path)

            log_operation(
                "data_file_saved",
                medications_count=len(self._medications),
                requests_count=len(self._requests),
            )

        except Exception as e:
            logger.error(f"Error saving data file {self.file_path}: {type(e).__name__}: {e}")
            if temp_path.exists():
                try:
                    temp_path.unlink()
                except OSError as unlink_error:
                    logger.error(f"Failed to remove temp file {temp_path}: {unlink_error}")
            raise
