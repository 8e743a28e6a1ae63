"""
Contact information API endpoints.
"""

from __future__ import annotations

import asyncpg
from fastapi import APIRouter, Depends, Response, status

from core import db, resources

from .repository import ContactInfoRepository, PostgresContactInfoRepository
from .schemas import ContactInfo

LABEL = "Contact info"

router = APIRouter()


def get_repository(conn: asyncpg.Connection = Depends(db.get_connection)) -> ContactInfoRepository:
    return PostgresContactInfoRepository(conn)


@router.get("/contact", response_model=list[ContactInfo])
async def list_contact_info(
    repository: ContactInfoRepository = Depends(get_repository),
) -> list[ContactInfo]:
    return await repository.find_all()


@router.get("/contact/{contact_id}", response_model=ContactInfo)
async def get_contact_info(
    contact_id: int,
    repository: ContactInfoRepository = Depends(get_repository),
) -> ContactInfo:
    return await resources.get_or_404(repository, contact_id, label=LABEL)


@router.post("/contact", response_model=ContactInfo, status_code=status.HTTP_201_CREATED)
async def create_contact_info(
    contact: ContactInfo,
    repository: ContactInfoRepository = Depends(get_repository),
) -> ContactInfo:
    return await resources.create(repository, contact, label=LABEL)


@router.put("/contact/{contact_id}", response_model=ContactInfo)
async def update_contact_info(
    contact_id: int,
    contact: ContactInfo,
    repository: ContactInfoRepository = Depends(get_repository),
) -> ContactInfo:
    return await resources.replace_or_404(repository, contact_id, contact, label=LABEL)


@router.delete("/contact/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_contact_info(
    contact_id: int,
    repository: ContactInfoRepository = Depends(get_repository),
) -> Response:
    await resources.delete_or_404(repository, contact_id, label=LABEL)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
