"""
Project routes.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, Response

from recordbook.auth import Claims, get_claims
from recordbook.dependencies import get_repositories
from recordbook.pagination import Pagination, get_pagination, next_url
from recordbook.records import Project
from recordbook.repositories import Repositories
from recordbook.schemas import ProjectPayload, ProjectResponse, ProjectsResponse

router = APIRouter(tags=["Project"])


@router.get("/projects", response_model=ProjectsResponse)
def get_current_projects(
    request: Request,
    pagination: Pagination = Depends(get_pagination),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    """Projects whose year is the current calendar year."""
    year = str(datetime.now(timezone.utc).year)
    projects = repos.projects.list(claims.id, pagination=pagination, year=year)
    return ProjectsResponse(
        projects=projects, next=next_url(request, pagination, len(projects))
    )


@router.get("/project", response_model=ProjectsResponse)
def get_projects(
    request: Request,
    pagination: Pagination = Depends(get_pagination),
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    projects = repos.projects.list(claims.id, pagination=pagination)
    return ProjectsResponse(
        projects=projects, next=next_url(request, pagination, len(projects))
    )


@router.get("/project/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    return ProjectResponse(project=repos.projects.get(claims.id, project_id))


@router.post("/project", response_model=ProjectResponse, status_code=201)
def add_project(
    payload: ProjectPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    project = Project.create(claims.id, **payload.model_dump())
    return ProjectResponse(project=repos.projects.upsert(project))


@router.put("/project/{project_id}", status_code=204)
def update_project(
    project_id: str,
    payload: ProjectPayload,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    project = repos.projects.get(claims.id, project_id)
    repos.projects.upsert(project.revise(**payload.model_dump()))
    return Response(status_code=204)


@router.delete("/project/{project_id}", status_code=204)
def delete_project(
    project_id: str,
    claims: Claims = Depends(get_claims),
    repos: Repositories = Depends(get_repositories),
):
    repos.projects.delete(claims.id, project_id)
    return Response(status_code=204)
