"""
Dependency wiring for the FastAPI app.

Handles are built once by the app factory and kept on `app.state`; these
functions hand them to request handlers.
"""

from __future__ import annotations

import logging

from fastapi import Request

from recordbook.config import Settings
from recordbook.db import DocumentStore, InMemoryDocumentStore, PostgresDocumentStore
from recordbook.repositories import Repositories
from recordbook.upc import UpcClient

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> DocumentStore:
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory document store")
        return InMemoryDocumentStore()
    logger.info("Using SQL document store")
    return PostgresDocumentStore(
        settings.database_url, timeout_seconds=settings.store_timeout_seconds
    )


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_repositories(request: Request) -> Repositories:
    return request.app.state.repositories


def get_upc_client(request: Request) -> UpcClient:
    return request.app.state.upc_client
