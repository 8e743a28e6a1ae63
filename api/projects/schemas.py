"""
Project entity.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Project(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    title: str = Field(..., min_length=1)
    description: str | None = None
    github_link: str | None = Field(default=None, alias="githubLink")
    # Built with Spring Boot.
    spring_boot: bool = Field(default=False, alias="springBoot")
