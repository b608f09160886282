import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from tortoise import Tortoise

from .core.config import TORTOISE_ORM_CONFIG, GENERATE_SCHEMAS, SEED_FETCH_TIMEOUT
from .core.exceptions import ReportingError, reporting_error_handler
from .core.logging_config import configure_logging
from .features.transactions.repository import TransactionRepository
from .features.transactions.router import router as transactions_router
from .features.seed.router import router as seed_router
from .features.reports.router import router as reports_router

configure_logging()
logger = logging.getLogger(__name__)  # This logger will inherit from 'transaction_reports'


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Connects the store and builds the clients that request handlers receive
    through dependencies, then closes them on shutdown.
    """
    logger.info("Starting application...")
    await Tortoise.init(config=TORTOISE_ORM_CONFIG)
    if GENERATE_SCHEMAS:
        await Tortoise.generate_schemas(safe=True)
    logger.info("Tortoise-ORM has been initialized.")

    app.state.repository = TransactionRepository()
    app.state.http_client = httpx.AsyncClient(timeout=SEED_FETCH_TIMEOUT)

    yield

    await app.state.http_client.aclose()
    await Tortoise.close_connections()
    logger.info("Tortoise-ORM connections have been closed.")


app = FastAPI(
    title="Transaction Reports API",
    description="Monthly listings, statistics and charts over product transactions.",
    version="0.1.0",
    exception_handlers={ReportingError: reporting_error_handler},
    lifespan=lifespan,
)


@app.get("/")
async def read_root(request: Request):
    """
    Root endpoint for the API.
    """
    client_host = request.client.host if request.client else "unknown client"
    logger.info(f"Root endpoint '/' accessed by {client_host}")
    return {
        "message": "Welcome to the Transaction Reports API!",
        "endpoints": [
            "/initialize",
            "/transactions?month=",
            "/statistics?month=",
            "/bar_chart?month=",
            "/pie_chart?month=",
            "/combined_data?month=",
        ],
    }


app.include_router(seed_router)
app.include_router(transactions_router)
app.include_router(reports_router)
