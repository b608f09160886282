"""
Seed Service Module

Replaces the product transaction collection with the dataset served by the
remote seed URL. Used by the ``/initialize`` endpoint and the ``seed`` CLI
command.
"""

import logging
from typing import Any, List

import httpx
from pydantic import TypeAdapter

from ...core.config import SEED_DATA_URL
from ...core.exceptions import ReportingError
from ..transactions.models import ProductTransaction
from ..transactions.repository import TransactionRepository
from ..transactions.schemas import ProductTransactionSchema

logger = logging.getLogger(__name__)

SEED_SUCCESS_MESSAGE = "Database initialized with seed data."
SEED_ERROR_MESSAGE = "Error initializing database."

_seed_payload_adapter = TypeAdapter(List[ProductTransactionSchema])


async def fetch_seed_data(client: httpx.AsyncClient, url: str = SEED_DATA_URL) -> List[ProductTransactionSchema]:
    """
    Downloads the seed dataset and coerces it into transaction schemas.

    Raises:
        httpx.HTTPError: The request failed or returned a non-2xx status.
        ValidationError: The payload is not an array of transaction objects.
    """
    logger.info(f"Fetching seed data from {url}")
    response = await client.get(url)
    response.raise_for_status()
    payload: Any = response.json()
    return _seed_payload_adapter.validate_python(payload)


async def initialize_database(
    repository: TransactionRepository,
    client: httpx.AsyncClient,
    url: str = SEED_DATA_URL,
) -> int:
    """
    Fetches the seed dataset and replaces every stored transaction with it.

    The previous contents are deleted before the insert runs and nothing is
    rolled back, so a failing insert leaves the collection empty.

    Returns:
        int: Number of records inserted.

    Raises:
        ReportingError: The fetch, the payload or the store failed.
    """
    try:
        records = await fetch_seed_data(client, url)
    except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:  # includes bad JSON and ValidationError
        logger.error(f"Error fetching seed data: {e}", exc_info=True)
        raise ReportingError(SEED_ERROR_MESSAGE) from e

    try:
        inserted = await repository.replace_all(
            [ProductTransaction(**record.model_dump()) for record in records]
        )
    except Exception as e:
        logger.error(f"Error initializing database: {e}", exc_info=True)
        raise ReportingError(SEED_ERROR_MESSAGE) from e

    logger.info(f"Seeded {inserted} product transactions")
    return inserted
