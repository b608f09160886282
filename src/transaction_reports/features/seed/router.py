import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ...core.dependencies import get_http_client, get_repository
from ..transactions.repository import TransactionRepository
from . import service as seed_service

router = APIRouter(tags=["Seed"])


@router.get("/initialize", response_class=PlainTextResponse, summary="Replace all transactions with the seed dataset")
async def initialize(
    repository: TransactionRepository = Depends(get_repository),
    client: httpx.AsyncClient = Depends(get_http_client),
):
    await seed_service.initialize_database(repository, client)
    return seed_service.SEED_SUCCESS_MESSAGE
