"""
Offset pagination for list endpoints.

A page that comes back full is taken to mean more items may follow, so the
response carries a link to the next page. That guess is imprecise: when the
last page is exactly full, the next link leads to an empty page.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Query, Request

PAGE_DEFAULT = 0
PER_PAGE_DEFAULT = 100
PER_PAGE_MIN = 1
PER_PAGE_MAX = 200
# Keeps page * per_page within a signed 64-bit SQL OFFSET.
PAGE_MAX = (2**63 - 1) // PER_PAGE_MAX


@dataclass(frozen=True)
class Pagination:
    page: int = PAGE_DEFAULT
    per_page: int = PER_PAGE_DEFAULT
    sort_by_newest: bool = False

    @property
    def offset(self) -> int:
        return self.page * self.per_page


def get_pagination(
    page: int = Query(PAGE_DEFAULT, description="Page number, starting at 0"),
    per_page: int = Query(
        PER_PAGE_DEFAULT,
        description=f"Items per page, clamped to [{PER_PAGE_MIN}, {PER_PAGE_MAX}]",
    ),
    sort_by_newest: bool = Query(False),
) -> Pagination:
    return Pagination(
        page=min(max(page, PAGE_DEFAULT), PAGE_MAX),
        per_page=min(max(per_page, PER_PAGE_MIN), PER_PAGE_MAX),
        sort_by_newest=sort_by_newest,
    )


def next_url(request: Request, pagination: Pagination, returned: int) -> Optional[str]:
    if returned < pagination.per_page:
        return None
    url = request.url.include_query_params(
        page=pagination.page + 1,
        per_page=pagination.per_page,
        sort_by_newest=str(pagination.sort_by_newest).lower(),
    )
    return str(url)
