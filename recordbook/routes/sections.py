"""
Resume section routes.

All fourteen section kinds are served by one set of handlers; the number in
the path (`/section1` through `/section14`) selects the schema from
SECTION_KINDS.
"""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.errors import NotFoundError
from recordbook.records import SECTION_KINDS, SectionFields, SectionKind
from recordbook.repositories import Repositories

router = APIRouter(tags=["Resume Section"])


def _kind_for_path(section_number: int) -> SectionKind:
    kind = SECTION_KINDS.get(section_number)
    if kind is None:
        raise NotFoundError()
    return kind


def _parse_fields(kind: SectionKind, payload: dict) -> SectionFields:
    try:
        return kind.fields_model.model_validate(payload)
    except PydanticValidationError as exc:
        raise RequestValidationError(exc.errors(), body=payload) from exc


@router.get("/section{section_number:int}")
def get_sections(
    section_number: int,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    kind = _kind_for_path(section_number)
    sections = repos.sections.list_kind(claims.id, kind)
    return {kind.data_key: [section.model_dump() for section in sections]}


@router.get("/section{section_number:int}/{section_id}")
def get_section(
    section_number: int,
    section_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    kind = _kind_for_path(section_number)
    section = repos.sections.fetch(claims.id, kind, section_id)
    return {kind.item_key: section.model_dump()}


@router.post("/section{section_number:int}", status_code=201)
def add_section(
    section_number: int,
    payload: dict = Body(...),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    kind = _kind_for_path(section_number)
    fields = _parse_fields(kind, payload)
    section = kind.record_model.create(claims.id, **fields.model_dump())
    repos.sections.upsert(section)
    return {kind.item_key: section.model_dump()}


@router.put("/section{section_number:int}/{section_id}", status_code=204)
def update_section(
    section_number: int,
    section_id: str,
    payload: dict = Body(...),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    kind = _kind_for_path(section_number)
    fields = _parse_fields(kind, payload)
    section = repos.sections.fetch(claims.id, kind, section_id)
    repos.sections.upsert(section.revise(**fields.model_dump()))
    return Response(status_code=204)


@router.delete("/section{section_number:int}/{section_id}", status_code=204)
def delete_section(
    section_number: int,
    section_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    kind = _kind_for_path(section_number)
    repos.sections.fetch(claims.id, kind, section_id)
    repos.sections.delete(claims.id, section_id)
    return Response(status_code=204)


@router.delete("/section/{section_id}", status_code=204)
def delete_any_section(
    section_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Delete a section of any kind, along with its links to events."""
    repos.sections.delete(claims.id, section_id)
    return Response(status_code=204)
