"""
Full resume route.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.records import SECTION_KINDS
from recordbook.repositories import Repositories

router = APIRouter(tags=["Resume"])


@router.get("/resume")
def get_resume(
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Every section entry the user has, grouped by section kind."""
    resume = {}
    for kind in SECTION_KINDS.values():
        sections = repos.sections.list_kind(claims.id, kind)
        resume[kind.data_key] = [section.model_dump() for section in sections]
    return {"resume": resume}
