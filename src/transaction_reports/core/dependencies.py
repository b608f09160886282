"""FastAPI dependencies for the clients built in the application lifespan."""

import httpx
from fastapi import Request

from ..features.transactions.repository import TransactionRepository


def get_repository(request: Request) -> TransactionRepository:
    return request.app.state.repository


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client
