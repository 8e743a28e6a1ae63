"""
Contact information entity.
"""

from __future__ import annotations

from pydantic import BaseModel


class ContactInfo(BaseModel):
    id: int | None = None
    email: str | None = None
    phone: str | None = None
    linkedin: str | None = None
    github: str | None = None
