"""Command-line entry point for processing a medication request."""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from medication_requests.config import get_settings
from medication_requests.data import JsonMedicationRequestRepository
from medication_requests.exceptions import (
    DataStoreError,
    EmailDeliveryError,
    MedicationRequestError,
)
from medication_requests.services import MedicationRequestService, create_email_sender
from medication_requests.utils import format_error_for_user, setup_logger

EXIT_OK = 0
EXIT_REQUEST_FAILED = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Process a medication request.")
    parser.add_argument("request_id", type=int, help="Medication request ID")
    parser.add_argument(
        "--data-file",
        type=Path,
        default=None,
        help="JSON data file (default: DATA_FILE setting)",
    )
    return parser.parse_args(argv)


async def save_store(repository: JsonMedicationRequestRepository) -> bool:
    """Persist the store, reporting a failure instead of raising.

    Returns:
        True if the data file was written
    """
    try:
        await repository.save()
    except OSError as e:
        logger.error(f"Failed to save data file {repository.file_path}: {e}")
        print(format_error_for_user(DataStoreError(str(e))), file=sys.stderr)
        return False
    return True


async def main(argv: Optional[list[str]] = None) -> int:
    """Application entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    try:
        settings = get_settings()
        setup_logger(console_level=settings.log_level, serialize=settings.log_json)
        logger.debug(f"Loaded {settings!r}")
        email_sender = create_email_sender(settings)
    except ValueError as e:
        # pydantic ValidationError from the mail config is a ValueError too
        setup_logger()
        logger.error(f"Invalid configuration: {e}")
        print(format_error_for_user(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    data_file = args.data_file or settings.data_file
    repository = JsonMedicationRequestRepository(str(data_file))
    service = MedicationRequestService(
        repository=repository,
        email_sender=email_sender,
    )

    try:
        result = await service.process_medication_request(args.request_id)
    except MedicationRequestError as e:
        print(format_error_for_user(e), file=sys.stderr)
        return EXIT_REQUEST_FAILED
    except EmailDeliveryError as e:
        # Stock was already decremented before the notification failed.
        print(format_error_for_user(e), file=sys.stderr)
        if not await save_store(repository):
            return EXIT_CONFIG_ERROR
        return EXIT_REQUEST_FAILED
    except DataStoreError as e:
        print(format_error_for_user(e), file=sys.stderr)
        return EXIT_CONFIG_ERROR

    if not await save_store(repository):
        return EXIT_CONFIG_ERROR

    print(f"{result.medication_name}: {result.message}")
    return EXIT_OK


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        logger.info("Received KeyboardInterrupt, exiting...")
