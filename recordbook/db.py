"""
Partitioned document store for Postgres and an in-memory test implementation.

Documents live in named containers and are keyed by (user_id, id); the
user id is the partition key and every operation is scoped to one
partition. A document may carry a unique key, and the store rejects a
second document in the same container and partition with the same key.
"""

from __future__ import annotations

import copy
import itertools
import threading
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Protocol

from sqlalchemy import (
    JSON,
    BigInteger,
    Column,
    Float,
    Integer,
    String,
    UniqueConstraint,
    create_engine,
    select,
)
from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from recordbook.errors import StoreError
from recordbook.timestamps import parse_timestamp


class DocumentStore(Protocol):
    """Interface for partitioned document access."""

    def query(
        self,
        container: str,
        user_id: str,
        filters: Optional[dict] = None,
        *,
        newest_first: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[dict]:
        ...

    def read(self, container: str, user_id: str, item_id: str) -> dict:
        ...

    def upsert(
        self, container: str, document: dict, *, unique_key: Optional[str] = None
    ) -> dict:
        ...

    def delete(self, container: str, user_id: str, item_id: str) -> None:
        ...


def _created_at(document: dict) -> float:
    return parse_timestamp(document["created"]).timestamp()


def _matches(document: dict, filters: dict) -> bool:
    return all(document.get(key) == value for key, value in filters.items())


@dataclass
class StoredDocument:
    body: dict
    unique_key: Optional[str]
    created_at: float
    seq: int


class InMemoryDocumentStore:
    """Simple in-memory document store for development and tests."""

    def __init__(self):
        self.containers: Dict[str, Dict[tuple[str, str], StoredDocument]] = {}
        self._lock = threading.Lock()
        self._seq = itertools.count()

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        with self._lock:
            self.containers.clear()

    def query(
        self,
        container: str,
        user_id: str,
        filters: Optional[dict] = None,
        *,
        newest_first: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[dict]:
        with self._lock:
            stored = [
                item
                for (owner, _), item in self.containers.get(container, {}).items()
                if owner == user_id and _matches(item.body, filters or {})
            ]
        stored.sort(key=lambda item: (item.created_at, item.seq), reverse=newest_first)
        end = None if limit is None else offset + limit
        return [copy.deepcopy(item.body) for item in stored[offset:end]]

    def read(self, container: str, user_id: str, item_id: str) -> dict:
        with self._lock:
            item = self.containers.get(container, {}).get((user_id, item_id))
            if item is None:
                raise StoreError(404, f"{container}/{item_id}")
            return copy.deepcopy(item.body)

    def upsert(
        self, container: str, document: dict, *, unique_key: Optional[str] = None
    ) -> dict:
        key = (document["user_id"], document["id"])
        with self._lock:
            items = self.containers.setdefault(container, {})
            if unique_key is not None:
                for (owner, item_id), item in items.items():
                    if (
                        owner == key[0]
                        and item_id != key[1]
                        and item.unique_key == unique_key
                    ):
                        raise StoreError(409, f"{container} unique key {unique_key}")
            existing = items.get(key)
            items[key] = StoredDocument(
                body=copy.deepcopy(document),
                unique_key=unique_key,
                created_at=_created_at(document),
                seq=existing.seq if existing else next(self._seq),
            )
        return document

    def delete(self, container: str, user_id: str, item_id: str) -> None:
        with self._lock:
            items = self.containers.get(container, {})
            if (user_id, item_id) not in items:
                raise StoreError(404, f"{container}/{item_id}")
            del items[(user_id, item_id)]


def with_default_driver(database_url: str) -> URL:
    """Point bare postgres URLs at the psycopg 3 driver."""
    url = make_url(database_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername="postgresql+psycopg")
    return url


class PostgresDocumentStore:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str, timeout_seconds: float = 10.0):
        if not database_url:
            raise ValueError("DATABASE_URL is required for PostgresDocumentStore")
        url = with_default_driver(database_url)
        backend = url.get_backend_name()
        engine_kwargs: dict[str, Any] = {"future": True}
        connect_args: dict[str, Any] = {}
        if backend == "sqlite":
            connect_args["timeout"] = timeout_seconds
            if url.database in (None, "", ":memory:"):
                # A single shared connection keeps one in-memory database across threads.
                engine_kwargs["poolclass"] = StaticPool
                connect_args["check_same_thread"] = False
        else:
            engine_kwargs.update(
                pool_pre_ping=True,
                pool_recycle=1800,
                pool_timeout=timeout_seconds,
            )
            if backend == "postgresql":
                connect_args["connect_timeout"] = max(int(timeout_seconds), 1)
                connect_args["options"] = (
                    f"-c statement_timeout={int(timeout_seconds * 1000)}"
                )
        self.engine = create_engine(
            url, connect_args=connect_args, **engine_kwargs
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)

    @contextmanager
    def _session(self) -> Iterator[Session]:
        session = self.Session()
        try:
            yield session
        except IntegrityError as exc:
            session.rollback()
            raise StoreError(409, str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            session.rollback()
            raise StoreError(500, str(exc)) from exc
        finally:
            session.close()

    def query(
        self,
        container: str,
        user_id: str,
        filters: Optional[dict] = None,
        *,
        newest_first: bool = False,
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[dict]:
        stmt = select(DocumentRow).where(
            DocumentRow.container == container,
            DocumentRow.user_id == user_id,
        )
        for key, value in (filters or {}).items():
            element = DocumentRow.body[key]
            if isinstance(value, int) and not isinstance(value, bool):
                stmt = stmt.where(element.as_integer() == value)
            else:
                stmt = stmt.where(element.as_string() == str(value))
        if newest_first:
            stmt = stmt.order_by(DocumentRow.created_at.desc(), DocumentRow.seq.desc())
        else:
            stmt = stmt.order_by(DocumentRow.created_at.asc(), DocumentRow.seq.asc())
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        with self._session() as session:
            rows = session.execute(stmt).scalars().all()
            return [dict(row.body) for row in rows]

    @staticmethod
    def _find(
        session: Session, container: str, user_id: str, item_id: str
    ) -> Optional[DocumentRow]:
        stmt = select(DocumentRow).where(
            DocumentRow.container == container,
            DocumentRow.user_id == user_id,
            DocumentRow.id == item_id,
        )
        return session.execute(stmt).scalar_one_or_none()

    def read(self, container: str, user_id: str, item_id: str) -> dict:
        with self._session() as session:
            row = self._find(session, container, user_id, item_id)
            if not row:
                raise StoreError(404, f"{container}/{item_id}")
            return dict(row.body)

    def upsert(
        self, container: str, document: dict, *, unique_key: Optional[str] = None
    ) -> dict:
        with self._session() as session:
            row = self._find(session, container, document["user_id"], document["id"])
            if row:
                row.body = document
                row.unique_key = unique_key
                row.created_at = _created_at(document)
            else:
                session.add(
                    DocumentRow(
                        container=container,
                        user_id=document["user_id"],
                        id=document["id"],
                        body=document,
                        unique_key=unique_key,
                        created_at=_created_at(document),
                    )
                )
            session.commit()
        return document

    def delete(self, container: str, user_id: str, item_id: str) -> None:
        with self._session() as session:
            row = self._find(session, container, user_id, item_id)
            if not row:
                raise StoreError(404, f"{container}/{item_id}")
            session.delete(row)
            session.commit()


Base = declarative_base()


class DocumentRow(Base):
    __tablename__ = "documents"
    __table_args__ = (
        UniqueConstraint("container", "user_id", "id", name="uq_documents_key"),
        UniqueConstraint(
            "container", "user_id", "unique_key", name="uq_documents_unique_key"
        ),
    )

    # Insertion order, used to break ties between equal created_at values.
    seq = Column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    container = Column(String, nullable=False)
    user_id = Column(String, nullable=False)
    id = Column(String, nullable=False)
    body = Column(JSON, nullable=False)
    unique_key = Column(String, nullable=True)
    created_at = Column(Float, nullable=False, index=True)
