"""
Bookmark routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request, Response

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.pagination import Pagination, get_pagination, next_url
from recordbook.records import Bookmark
from recordbook.repositories import Repositories
from recordbook.schemas import BookmarkPayload, BookmarkResponse, BookmarksResponse

router = APIRouter(prefix="/bookmarks", tags=["User Bookmarks"])


@router.get("", response_model=BookmarksResponse)
def get_bookmarks(
    request: Request,
    pagination: Pagination = Depends(get_pagination),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    bookmarks = repos.bookmarks.list(claims.id, pagination=pagination)
    return BookmarksResponse(
        bookmarks=bookmarks, next=next_url(request, pagination, len(bookmarks))
    )


@router.get("/{bookmark_id}", response_model=BookmarkResponse)
def get_bookmark(
    bookmark_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return BookmarkResponse(bookmark=repos.bookmarks.get(claims.id, bookmark_id))


@router.post("", response_model=BookmarkResponse, status_code=201)
def add_bookmark(
    payload: BookmarkPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Add a bookmark; a second bookmark with the same link is a conflict."""
    bookmark = Bookmark.create(claims.id, **payload.model_dump())
    return BookmarkResponse(bookmark=repos.bookmarks.upsert(bookmark))


@router.put("/{bookmark_id}", status_code=204)
def update_bookmark(
    bookmark_id: str,
    payload: BookmarkPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    bookmark = repos.bookmarks.get(claims.id, bookmark_id)
    repos.bookmarks.upsert(bookmark.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/{bookmark_id}", status_code=204)
def remove_bookmark(
    bookmark_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.bookmarks.delete(claims.id, bookmark_id)
    return Response(status_code=204)
