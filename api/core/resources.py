"""
Handler helpers shared by the resource routers.

They hold the rules every resource follows: a client-supplied id is dropped on
create, the path id wins on replace, and id-keyed operations on a missing row
end in 404.
"""

from __future__ import annotations

import logging
from typing import TypeVar

from fastapi import HTTPException, status
from pydantic import BaseModel

from .repository import Repository

EntityT = TypeVar("EntityT", bound=BaseModel)

# Ids live in BIGSERIAL columns; anything outside int8 cannot name a row.
MIN_ID = -(2**63)
MAX_ID = 2**63 - 1

logger = logging.getLogger(__name__)


def not_found(label: str, entity_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{label} with id {entity_id} not found.",
    )


def _require_storable_id(entity_id: int, label: str) -> None:
    if not MIN_ID <= entity_id <= MAX_ID:
        raise not_found(label, entity_id)


async def get_or_404(repository: Repository[EntityT], entity_id: int, *, label: str) -> EntityT:
    _require_storable_id(entity_id, label)
    entity = await repository.find_by_id(entity_id)
    if entity is None:
        raise not_found(label, entity_id)
    return entity


async def create(repository: Repository[EntityT], entity: EntityT, *, label: str) -> EntityT:
    saved = await repository.save(entity.model_copy(update={"id": None}))
    logger.info("record_created kind=%s id=%s", label, getattr(saved, "id", None))
    return saved


async def replace_or_404(
    repository: Repository[EntityT],
    entity_id: int,
    entity: EntityT,
    *,
    label: str,
) -> EntityT:
    _require_storable_id(entity_id, label)
    if not await repository.exists_by_id(entity_id):
        raise not_found(label, entity_id)
    saved = await repository.save(entity.model_copy(update={"id": entity_id}))
    logger.info("record_replaced kind=%s id=%s", label, entity_id)
    return saved


async def delete_or_404(repository: Repository[EntityT], entity_id: int, *, label: str) -> None:
    _require_storable_id(entity_id, label)
    if not await repository.exists_by_id(entity_id):
        raise not_found(label, entity_id)
    await repository.delete_by_id(entity_id)
    logger.info("record_deleted kind=%s id=%s", label, entity_id)
