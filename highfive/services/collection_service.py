"""
Collection Service
Shared CRUD queries for the content tables
"""

from typing import Any, Dict, List, Optional, Sequence
from uuid import UUID, uuid4
from fastapi import HTTPException, status
from highfive.database import database


class CollectionService:
    """
    Base class for one content table.

    Subclasses name the table, the writable columns and the list ordering.
    Column names are interpolated into SQL, so only names from ``columns``
    ever reach a query; values always go through bind parameters.
    """

    table: str = ""
    columns: Sequence[str] = ()
    order_by: str = "created_at DESC"
    list_limit: Optional[int] = None
    label: str = "Record"
    has_updated_at: bool = False

    @classmethod
    def encode(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        """Convert request values into column values (override per table)"""
        return values

    @classmethod
    def decode(cls, row) -> dict:
        """Convert a database row into a response dict (override per table)"""
        return dict(row)

    @classmethod
    def _not_found(cls) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{cls.label} not found"
        )

    @classmethod
    def _writable(cls, values: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in values.items() if k in cls.columns}

    @classmethod
    async def list_all(
        cls,
        where: Optional[str] = None,
        params: Optional[dict] = None,
        order_by: Optional[str] = None
    ) -> List[dict]:
        """List rows, newest first unless the table says otherwise"""

        query = f"SELECT * FROM {cls.table}"
        if where:
            query += f" WHERE {where}"
        query += f" ORDER BY {order_by or cls.order_by}"
        if cls.list_limit:
            query += f" LIMIT {int(cls.list_limit)}"

        rows = await database.fetch_all(query, params or {})
        return [cls.decode(row) for row in rows]

    @classmethod
    async def get(cls, record_id: UUID) -> dict:
        """Get a single row by ID"""

        row = await database.fetch_one(
            f"SELECT * FROM {cls.table} WHERE id = :id",
            {"id": str(record_id)}
        )

        if not row:
            raise cls._not_found()

        return cls.decode(row)

    @classmethod
    async def create(cls, values: Dict[str, Any]) -> dict:
        """Insert a row and return it as stored"""

        data = cls._writable(cls.encode(values))
        data["id"] = str(uuid4())

        names = ", ".join(data.keys())
        binds = ", ".join(f":{name}" for name in data.keys())

        row = await database.fetch_one(
            f"INSERT INTO {cls.table} ({names}) VALUES ({binds}) RETURNING *",
            data
        )

        return cls.decode(row) if row else None

    @classmethod
    async def update(cls, record_id: UUID, values: Dict[str, Any]) -> dict:
        """Update the provided columns of a row"""

        data = cls._writable(cls.encode(values))

        if not data:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No fields provided to update"
            )

        assignments = ", ".join(f"{name} = :{name}" for name in data.keys())
        if cls.has_updated_at:
            assignments += ", updated_at = NOW()"
        data["id"] = str(record_id)

        row = await database.fetch_one(
            f"UPDATE {cls.table} SET {assignments} WHERE id = :id RETURNING *",
            data
        )

        if not row:
            raise cls._not_found()

        return cls.decode(row)

    @classmethod
    async def delete(cls, record_id: UUID) -> None:
        """Delete a row"""

        deleted = await database.fetch_one(
            f"DELETE FROM {cls.table} WHERE id = :id RETURNING id",
            {"id": str(record_id)}
        )

        if not deleted:
            raise cls._not_found()
