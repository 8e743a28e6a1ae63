"""
Project API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db, resources

from .repository import PostgresProjectRepository, ProjectRepository
from .schemas import Project

LABEL = "Project"

router = APIRouter()


def get_repository(conn: asyncpg.Connection = Depends(db.get_connection)) -> ProjectRepository:
    return PostgresProjectRepository(conn)


@router.get("/projects", response_model=list[Project])
async def list_projects(repository: ProjectRepository = Depends(get_repository)) -> list[Project]:
    return await repository.find_all()


# Declared before /projects/{project_id} so the literal segment wins.
@router.get("/projects/spring-boot", response_model=list[Project])
async def list_spring_boot_projects(
    repository: ProjectRepository = Depends(get_repository),
) -> list[Project]:
    return await repository.find_spring_boot()


@router.get("/projects/{project_id}", response_model=Project)
async def get_project(
    project_id: int,
    repository: ProjectRepository = Depends(get_repository),
) -> Project:
    return await resources.get_or_404(repository, project_id, label=LABEL)


@router.post("/projects", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    project: Project,
    repository: ProjectRepository = Depends(get_repository),
) -> Project:
    return await resources.create(repository, project, label=LABEL)


@router.put("/projects/{project_id}", response_model=Project)
async def update_project(
    project_id: int,
    project: Project,
    repository: ProjectRepository = Depends(get_repository),
) -> Project:
    return await resources.replace_or_404(repository, project_id, project, label=LABEL)


@router.delete("/projects/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: int,
    repository: ProjectRepository = Depends(get_repository),
) -> Response:
    await resources.delete_or_404(repository, project_id, label=LABEL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
