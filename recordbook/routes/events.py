"""
Event routes, including linking resume sections to events.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, Response

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.errors import NotFoundError
from recordbook.pagination import Pagination, get_pagination, next_url
from recordbook.records import Event, EventSection, section_kind
from recordbook.repositories import Repositories
from recordbook.schemas import (
    EventDetailResponse,
    EventPayload,
    EventResponse,
    EventSectionDetailResponse,
    EventSectionPayload,
    EventSectionResponse,
    EventsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/event", tags=["Event"])


def _linked_section(repos: Repositories, user_id: str, event_section: EventSection):
    kind = section_kind(event_section.section_number)
    return repos.sections.fetch(user_id, kind, event_section.section_id)


@router.get("", response_model=EventsResponse)
def get_events(
    request: Request,
    pagination: Pagination = Depends(get_pagination),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    events = repos.events.list(claims.id, pagination=pagination)
    return EventsResponse(events=events, next=next_url(request, pagination, len(events)))


@router.get("/{event_id}", response_model=EventDetailResponse)
def get_event(
    event_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Return the event together with every section linked to it."""
    event = repos.events.get(claims.id, event_id)
    sections = [
        _linked_section(repos, claims.id, event_section).model_dump()
        for event_section in repos.event_sections.list(claims.id, event_id=event_id)
    ]
    return EventDetailResponse(event=event, sections=sections)


@router.post("", response_model=EventResponse, status_code=201)
def add_event(
    payload: EventPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    event = Event.create(claims.id, **payload.model_dump())
    return EventResponse(event=repos.events.upsert(event))


@router.put("/{event_id}", status_code=204)
def update_event(
    event_id: str,
    payload: EventPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    event = repos.events.get(claims.id, event_id)
    repos.events.upsert(event.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/{event_id}", status_code=204)
def delete_event(
    event_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.events.delete(claims.id, event_id)
    return Response(status_code=204)


@router.post("/{event_id}", response_model=EventSectionResponse, status_code=201)
def add_section_to_event(
    event_id: str,
    payload: EventSectionPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """
    Link an existing resume section to an event.

    The section number must name one of the fourteen section kinds, and both
    the event and a section of that kind must already exist. Linking the
    same section to the same event twice is a conflict.
    """
    kind = section_kind(payload.section_number)
    repos.events.get(claims.id, event_id)
    repos.sections.fetch(claims.id, kind, payload.section_id)
    event_section = EventSection.create(
        claims.id,
        event_id=event_id,
        section_number=kind.number,
        section_id=payload.section_id,
    )
    return EventSectionResponse(event_section=repos.event_sections.upsert(event_section))


def _find_event_section(
    repos: Repositories, user_id: str, event_id: str, section_id: str
) -> EventSection:
    event_section = repos.event_sections.find_one(
        user_id, event_id=event_id, section_id=section_id
    )
    if event_section is None:
        raise NotFoundError()
    return event_section


@router.get("/{event_id}/{section_id}", response_model=EventSectionDetailResponse)
def get_event_section(
    event_id: str,
    section_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    event_section = _find_event_section(repos, claims.id, event_id, section_id)
    section = _linked_section(repos, claims.id, event_section)
    return EventSectionDetailResponse(
        event_section=event_section, section=section.model_dump()
    )


@router.delete("/{event_id}/{section_id}", status_code=204)
def delete_section_from_event(
    event_id: str,
    section_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    event_section = _find_event_section(repos, claims.id, event_id, section_id)
    logger.info("Unlinking section %s from event %s", section_id, event_id)
    repos.event_sections.delete(claims.id, event_section.id)
    return Response(status_code=204)
