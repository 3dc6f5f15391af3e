"""Shared fixtures for tests."""

import copy
import json
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from fixtures.medication_request_samples import SAMPLE_DATA_FILE
from medication_requests.data.models import Medication, MedicationRequest
from medication_requests.data.repository import MedicationRequestRepository
from medication_requests.data.storage import JsonMedicationRequestRepository
from medication_requests.services.email_sender import EmailSender, LoggingEmailSender
from medication_requests.services.medication_request_service import MedicationRequestService


@pytest.fixture
def temp_data_dir():
    """Create temporary directory for test data.
    
    Yields:
        Path: Path to temporary directory
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_data():
    """Deep copy of the sample data file contents."""
    return copy.deepcopy(SAMPLE_DATA_FILE)


@pytest.fixture
def medication_requests(sample_data):
    """Build sample requests with their medications attached.
    
    Returns:
        dict: Request ID -> MedicationRequest
    """
    medications = {
        med["id"]: Medication.from_dict(med) for med in sample_data["medications"]
    }
    return {
        req["id"]: MedicationRequest.from_dict(req, medication=medications[req["medication_id"]])
        for req in sample_data["medication_requests"]
    }


@pytest.fixture
def stub_repository(medication_requests):
    """Create repository stub returning the sample requests.
    
    Returns:
        MagicMock: Repository with get_one looking up sample requests
    """
    repository = MagicMock(spec=MedicationRequestRepository)
    
    async def get_one(request_id):
        return medication_requests.get(request_id)
    
    repository.get_one = AsyncMock(side_effect=get_one)
    return repository


@pytest.fixture
def email_mock():
    """Create mock EmailSender.
    
    Returns:
        MagicMock: EmailSender with async send_email
    """
    sender = MagicMock(spec=EmailSender)
    sender.send_email = AsyncMock(return_value=None)
    return sender


@pytest.fixture
def service(stub_repository, email_mock):
    """Create MedicationRequestService with stub repository and email mock."""
    return MedicationRequestService(stub_repository, email_mock)


@pytest.fixture
def data_file(temp_data_dir, sample_data):
    """Write sample data to a JSON file.
    
    Returns:
        Path: Path to the data file
    """
    path = temp_data_dir / "medication_requests.json"
    path.write_text(json.dumps(sample_data, ensure_ascii=False), encoding="utf-8")
    return path


@pytest.fixture
def json_repository(data_file):
    """Create JsonMedicationRequestRepository over the sample data file."""
    return JsonMedicationRequestRepository(str(data_file))


@pytest.fixture
def logging_email_sender():
    """Create LoggingEmailSender."""
    return LoggingEmailSender()
