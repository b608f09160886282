"""
Root conftest for the pytest test suite.

This file contains the main fixtures that are used across the entire test suite.

Each test runs against a fresh, isolated in-memory SQLite database. Requests
go through ``httpx.AsyncClient`` over ``ASGITransport`` so the app runs on the
test's own event loop, the same loop that owns the Tortoise connection.

Key Fixtures:
- `anyio_backend`: Specifies the asyncio backend.
- `initialize_test_db`: (autouse) Creates a fresh DB schema for each test.
- `seed_records`: The JSON array served by the fake seed endpoint; tests may mutate it.
- `seed_transport`: An httpx MockTransport answering the seed URL from `seed_records`.
- `repository`: The TransactionRepository used by the app under test.
- `app_for_testing`: The FastAPI application with its production lifespan
  disabled and test clients installed on `app.state`.
- `client`: An httpx.AsyncClient talking to `app_for_testing`.
- `transaction_factory`: Creates ProductTransaction rows directly.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Generator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from tortoise import Tortoise

from transaction_reports.core.config import SEED_DATA_URL
from transaction_reports.features.transactions.models import ProductTransaction
from transaction_reports.features.transactions.repository import TransactionRepository

# Import the app
from transaction_reports.main import app as actual_app


SAMPLE_SEED_RECORDS = [
    {
        "id": 1,
        "title": "Fjallraven Backpack",
        "price": 50,
        "description": "Fits 15 inch laptops",
        "category": "men's clothing",
        "image": "https://example.com/1.jpg",
        "sold": True,
        "dateOfSale": "2024-03-05T20:29:54+05:30",
    },
    {
        "id": 2,
        "title": "Mens Casual T-Shirt",
        "price": 150,
        "description": "Slim-fitting style",
        "category": "men's clothing",
        "image": "https://example.com/2.jpg",
        "sold": False,
        "dateOfSale": "2024-3-15T20:29:54+05:30",
    },
    {
        "id": 3,
        "title": "Solid Gold Bracelet",
        "price": 999,
        "description": "Dragon station chain",
        "category": "jewelery",
        "image": "https://example.com/3.jpg",
        "sold": True,
        "dateOfSale": "2024-04-01T20:29:54+05:30",
    },
]


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """
    Specifies the asyncio backend.
    """
    return "asyncio"


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """
    Initializes the database for each test function.

    This async, autouse fixture creates a fresh in-memory database and schema
    for each test and tears it down afterwards.
    """
    test_db_config = {
        "connections": {"default": "sqlite://:memory:"},
        "apps": {
            "models": {
                "models": ["transaction_reports.features.transactions.models"],
                "default_connection": "default",
            }
        },
    }
    await Tortoise.init(config=test_db_config)
    await Tortoise.generate_schemas()

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def seed_records() -> list[dict[str, Any]]:
    return [dict(record) for record in SAMPLE_SEED_RECORDS]


@pytest.fixture(scope="function")
def seed_transport(seed_records: list[dict[str, Any]]) -> httpx.MockTransport:
    """
    Serves `seed_records` at the configured seed URL and 404 everywhere else.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        if str(request.url) == SEED_DATA_URL:
            return httpx.Response(200, json=seed_records)
        return httpx.Response(404, text="Not Found")

    return httpx.MockTransport(handler)


@pytest.fixture(scope="function")
def repository() -> TransactionRepository:
    return TransactionRepository()


@pytest_asyncio.fixture(scope="function")
async def seed_http_client(seed_transport: httpx.MockTransport) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=seed_transport) as http_client:
        yield http_client


@pytest.fixture(scope="function")
def app_for_testing(
    repository: TransactionRepository, seed_http_client: httpx.AsyncClient
) -> Generator[FastAPI, Any, None]:
    """
    Provides the FastAPI application instance for testing, with its
    production lifespan manager disabled to allow the test DB fixture
    to manage the database connection.
    """
    original_lifespan = actual_app.router.lifespan_context

    @asynccontextmanager
    async def dummy_lifespan(app: FastAPI):
        yield

    actual_app.router.lifespan_context = dummy_lifespan
    actual_app.state.repository = repository
    actual_app.state.http_client = seed_http_client

    yield actual_app

    # Restore the original lifespan context after the test
    actual_app.router.lifespan_context = original_lifespan


@pytest_asyncio.fixture(scope="function")
async def client(app_for_testing: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    transport = httpx.ASGITransport(app=app_for_testing)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest_asyncio.fixture
async def transaction_factory():
    """A factory to create product transactions."""

    async def _factory(
        title: str = "Sample Product",
        price: float = 100.0,
        date_of_sale: str = "2024-03-10T10:00:00+05:30",
        sold: bool = True,
        category: str = "electronics",
        description: str = "A sample product",
        product_id: int = 1,
    ) -> ProductTransaction:
        return await ProductTransaction.create(
            product_id=product_id,
            title=title,
            price=price,
            description=description,
            category=category,
            image="https://example.com/image.jpg",
            sold=sold,
            date_of_sale=date_of_sale,
        )

    return _factory


@pytest_asyncio.fixture
async def seeded_transactions(seed_records) -> list[ProductTransaction]:
    """Stores `seed_records` directly, bypassing the seed endpoint."""
    return [
        await ProductTransaction.create(
            product_id=r["id"], title=r["title"], price=r["price"], description=r["description"],
            category=r["category"], image=r["image"], sold=r["sold"], date_of_sale=r["dateOfSale"],
        )
        for r in seed_records
    ]
