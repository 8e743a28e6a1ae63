"""
Project persistence (raw SQL).
"""

from __future__ import annotations

from typing import Protocol

from core.repository import Repository, TableRepository

from .schemas import Project


class ProjectRepository(Repository[Project], Protocol):
    async def find_spring_boot(self) -> list[Project]: ...


class PostgresProjectRepository(TableRepository[Project]):
    table = "projects"
    columns = ("title", "description", "github_link", "spring_boot")
    entity = Project

    async def find_spring_boot(self) -> list[Project]:
        return await self._fetch_entities(f"{self._select()} WHERE spring_boot = true ORDER BY id")
