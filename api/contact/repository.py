"""
Contact information persistence (raw SQL).
"""

from __future__ import annotations

from core.repository import Repository, TableRepository

from .schemas import ContactInfo

ContactInfoRepository = Repository[ContactInfo]


class PostgresContactInfoRepository(TableRepository[ContactInfo]):
    table = "contact_info"
    columns = ("email", "phone", "linkedin", "github")
    entity = ContactInfo
