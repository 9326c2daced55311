"""
Per-entity data access on top of the document store.

One generic Repository serves every entity type. Store errors propagate
unchanged, except unique-key violations on entities that name their own
conflict message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from recordbook.db import DocumentStore
from recordbook.errors import ConflictError, NotFoundError, StoreError
from recordbook.pagination import Pagination
from recordbook.records import (
    Animal,
    Bookmark,
    DailyFeed,
    Event,
    EventSection,
    Expense,
    Feed,
    FeedPurchase,
    Project,
    Record,
    SectionKind,
    SectionRecord,
    Supply,
    User,
    section_adapter,
)

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class Repository(Generic[R]):
    def __init__(self, store: DocumentStore, model: type[R]):
        self.store = store
        self.model = model
        self.container = model.container

    def list(
        self, user_id: str, *, pagination: Optional[Pagination] = None, **filters
    ) -> list[R]:
        """
        Return the caller's records matching every filter, oldest first.

        With pagination, returns one page in creation order (newest first
        when requested).
        """
        logger.info("Getting %s", self.container)
        if pagination is None:
            documents = self.store.query(self.container, user_id, filters)
        else:
            documents = self.store.query(
                self.container,
                user_id,
                filters,
                newest_first=pagination.sort_by_newest,
                offset=pagination.offset,
                limit=pagination.per_page,
            )
        return [self.model.model_validate(document) for document in documents]

    def get(self, user_id: str, item_id: str) -> R:
        logger.info("Getting %s %s", self.container, item_id)
        return self.model.model_validate(
            self.store.read(self.container, user_id, item_id)
        )

    def find_one(self, user_id: str, **filters) -> Optional[R]:
        documents = self.store.query(self.container, user_id, filters, limit=1)
        return self.model.model_validate(documents[0]) if documents else None

    def upsert(self, record: R) -> R:
        logger.info("Upserting %s %s", self.container, record.id)
        try:
            self.store.upsert(
                self.container, record.model_dump(), unique_key=record.unique_key()
            )
        except StoreError as exc:
            if exc.status_code == 409 and self.model.conflict_message:
                raise ConflictError(self.model.conflict_message) from exc
            raise
        return record

    def delete(self, user_id: str, item_id: str) -> None:
        logger.info("Removing %s %s", self.container, item_id)
        self.store.delete(self.container, user_id, item_id)


class EventRepository(Repository[Event]):
    """Events own their event sections; removing an event removes them too."""

    def __init__(self, store: DocumentStore, event_sections: Repository[EventSection]):
        super().__init__(store, Event)
        self.event_sections = event_sections

    def delete(self, user_id: str, item_id: str) -> None:
        super().delete(user_id, item_id)
        for event_section in self.event_sections.list(user_id, event_id=item_id):
            self.event_sections.delete(user_id, event_section.id)


class SectionRepository(Repository[SectionRecord]):
    """
    All fourteen resume section kinds share one container, told apart by
    their `section` tag.
    """

    def __init__(self, store: DocumentStore, event_sections: Repository[EventSection]):
        super().__init__(store, SectionRecord)
        self.event_sections = event_sections

    def list_kind(
        self, user_id: str, kind: SectionKind, *, pagination: Optional[Pagination] = None
    ) -> list[SectionRecord]:
        logger.info("Getting section %d entries", kind.number)
        documents = self.store.query(
            self.container,
            user_id,
            {"section": kind.number},
            newest_first=pagination.sort_by_newest if pagination else False,
            offset=pagination.offset if pagination else 0,
            limit=pagination.per_page if pagination else None,
        )
        return [kind.record_model.model_validate(document) for document in documents]

    def get(self, user_id: str, item_id: str) -> SectionRecord:
        logger.info("Getting section %s", item_id)
        return section_adapter.validate_python(
            self.store.read(self.container, user_id, item_id)
        )

    def fetch(self, user_id: str, kind: SectionKind, item_id: str) -> SectionRecord:
        """Fetch a section of the given kind; a section of another kind is not found."""
        section = self.get(user_id, item_id)
        if section.section != kind.number:
            raise NotFoundError()
        return section

    def delete(self, user_id: str, item_id: str) -> None:
        super().delete(user_id, item_id)
        for event_section in self.event_sections.list(user_id, section_id=item_id):
            self.event_sections.delete(user_id, event_section.id)


@dataclass
class Repositories:
    users: Repository[User]
    bookmarks: Repository[Bookmark]
    projects: Repository[Project]
    animals: Repository[Animal]
    feeds: Repository[Feed]
    feed_purchases: Repository[FeedPurchase]
    daily_feeds: Repository[DailyFeed]
    expenses: Repository[Expense]
    supplies: Repository[Supply]
    events: EventRepository
    event_sections: Repository[EventSection]
    sections: SectionRepository


def build_repositories(store: DocumentStore) -> Repositories:
    event_sections = Repository(store, EventSection)
    return Repositories(
        users=Repository(store, User),
        bookmarks=Repository(store, Bookmark),
        projects=Repository(store, Project),
        animals=Repository(store, Animal),
        feeds=Repository(store, Feed),
        feed_purchases=Repository(store, FeedPurchase),
        daily_feeds=Repository(store, DailyFeed),
        expenses=Repository(store, Expense),
        supplies=Repository(store, Supply),
        events=EventRepository(store, event_sections),
        event_sections=event_sections,
        sections=SectionRepository(store, event_sections),
    )
