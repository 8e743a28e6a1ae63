"""
Generic single-table repository.

Each resource package declares a subclass naming its table, its columns and
its entity model; the five CRUD operations are the same SQL for all of them.
Table and column names come from class attributes, never from request data,
so building the statements with f-strings is safe. Values always go through
asyncpg placeholders.
"""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Protocol, TypeVar

import asyncpg
from pydantic import BaseModel

from . import db

EntityT = TypeVar("EntityT", bound=BaseModel)


class Repository(Protocol[EntityT]):
    """
    Data access for one entity type.
    """

    async def find_all(self) -> list[EntityT]: ...

    async def find_by_id(self, entity_id: int) -> EntityT | None: ...

    async def exists_by_id(self, entity_id: int) -> bool: ...

    async def save(self, entity: EntityT) -> EntityT: ...

    async def delete_by_id(self, entity_id: int) -> None: ...


class TableRepository(Generic[EntityT]):
    table: ClassVar[str]
    columns: ClassVar[tuple[str, ...]]
    entity: ClassVar[type[BaseModel]]

    def __init__(self, conn: asyncpg.Connection) -> None:
        self.conn = conn

    def _returning(self) -> str:
        return ", ".join(("id", *self.columns))

    def _select(self) -> str:
        return f"SELECT {self._returning()} FROM {self.table}"

    def _to_entity(self, row: dict[str, Any]) -> EntityT:
        return self.entity.model_validate(row)  # type: ignore[return-value]

    async def _fetch_entities(self, sql: str, *args: Any) -> list[EntityT]:
        rows = await db.fetch_all(sql, *args, conn=self.conn)
        return [self._to_entity(row) for row in rows]

    async def find_all(self) -> list[EntityT]:
        return await self._fetch_entities(f"{self._select()} ORDER BY id")

    async def find_by_id(self, entity_id: int) -> EntityT | None:
        row = await db.fetch_one(f"{self._select()} WHERE id = $1", entity_id, conn=self.conn)
        return self._to_entity(row) if row is not None else None

    async def exists_by_id(self, entity_id: int) -> bool:
        row = await db.fetch_one(
            f"SELECT EXISTS (SELECT 1 FROM {self.table} WHERE id = $1) AS found",
            entity_id,
            conn=self.conn,
        )
        return bool(row and row["found"])

    async def save(self, entity: EntityT) -> EntityT:
        """
        Insert when the entity has no id, otherwise upsert the full row.
        """
        values = entity.model_dump(include=set(self.columns))
        args = [values.get(column) for column in self.columns]
        column_list = ", ".join(self.columns)

        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            placeholders = ", ".join(f"${i}" for i in range(1, len(self.columns) + 1))
            sql = f"""
                INSERT INTO {self.table} ({column_list})
                VALUES ({placeholders})
                RETURNING {self._returning()}
                """
        else:
            placeholders = ", ".join(f"${i}" for i in range(1, len(self.columns) + 2))
            assignments = ", ".join(f"{column} = EXCLUDED.{column}" for column in self.columns)
            sql = f"""
                INSERT INTO {self.table} (id, {column_list})
                VALUES ({placeholders})
                ON CONFLICT (id) DO UPDATE
                SET {assignments}
                RETURNING {self._returning()}
                """
            args = [entity_id, *args]

        row = await db.fetch_one(sql, *args, conn=self.conn)
        if row is None:
            raise RuntimeError(f"Failed to save row in {self.table}.")
        return self._to_entity(row)

    async def delete_by_id(self, entity_id: int) -> None:
        await db.execute(f"DELETE FROM {self.table} WHERE id = $1", entity_id, conn=self.conn)
