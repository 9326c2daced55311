"""
API routes for the record book backend.
"""

from __future__ import annotations

from fastapi import APIRouter

from recordbook.routes import (
    bookmarks,
    events,
    finance,
    livestock,
    projects,
    resume,
    sections,
    upc,
    users,
)
from recordbook.schemas import MessageResponse

router = APIRouter()


@router.get("/ping", response_model=MessageResponse, tags=["Ping"])
def ping():
    return MessageResponse(message="hello")


for module in (
    users,
    bookmarks,
    projects,
    livestock,
    finance,
    events,
    sections,
    resume,
    upc,
):
    router.include_router(module.router)
