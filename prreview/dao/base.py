"""Generic base DAO — single-key CRUD over the ORM."""

from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy import exists as sa_exists
from sqlalchemy.ext.asyncio import AsyncSession

from prreview.core.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseDAO(Generic[ModelT]):
    """Base data-access object. Subclasses set ``model`` class attribute.

    DAOs never commit: the caller owns the transaction (one per request).
    Absence is reported as ``None`` / ``False``; translating that into a
    domain error is the service layer's job.
    """

    model: type[ModelT]

    @classmethod
    def _pk_column(cls):
        return cls.model.__mapper__.primary_key[0]

    @staticmethod
    def _require_pk(pk: Any) -> None:
        """Raise ValueError if *pk* is None or an empty string."""
        if pk is None or pk == "":
            raise ValueError("pk must not be empty")

    async def get_by_id(self, session: AsyncSession, pk: Any) -> ModelT | None:
        self._require_pk(pk)
        return await session.get(self.model, pk)

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        obj = self.model(**values)
        session.add(obj)
        await session.flush()
        await session.refresh(obj)
        return obj

    async def update(self, session: AsyncSession, pk: Any, **values: Any) -> ModelT | None:
        self._require_pk(pk)
        obj = await session.get(self.model, pk)
        if obj is None:
            return None
        mapper = self.model.__mapper__
        immutable = {"created_at", "updated_at"} | {c.key for c in mapper.primary_key}
        column_keys = set(mapper.column_attrs.keys())
        for key in values:
            if key in immutable:
                raise AttributeError(f"'{key}' is immutable and cannot be updated")
            if key not in column_keys:
                raise AttributeError(f"{self.model.__name__} has no column '{key}'")
        for key, val in values.items():
            setattr(obj, key, val)
        if "updated_at" in column_keys:
            obj.updated_at = func.now()
        await session.flush()
        await session.refresh(obj)
        return obj

    async def exists(self, session: AsyncSession, pk: Any) -> bool:
        """Check existence without loading the full ORM object."""
        self._require_pk(pk)
        stmt = select(sa_exists().where(self._pk_column() == pk))
        result = await session.execute(stmt)
        return result.scalar_one()
