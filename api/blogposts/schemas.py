"""
Blog post entity.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BlogPost(BaseModel):
    id: int | None = None
    title: str = Field(..., min_length=1)
    content: str | None = None
