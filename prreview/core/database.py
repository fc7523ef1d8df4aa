"""Declarative base, timestamp mixins and schema bootstrap."""

from datetime import datetime

from sqlalchemy import DateTime, MetaData, func
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncEngine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Constraint names are deterministic so create_all output is stable across runs.
NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(AsyncAttrs, DeclarativeBase):
    """Base class for all ORM models."""

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def _db_clock_column() -> Mapped[datetime]:
    return mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)


class CreatedAtMixin:
    """``created_at`` only, for append-only tables."""

    created_at: Mapped[datetime] = _db_clock_column()


class TimestampMixin(CreatedAtMixin):
    """``created_at`` + ``updated_at``, both from the database clock.

    ``updated_at`` is bumped by the DAOs on every write; there is no trigger.
    """

    updated_at: Mapped[datetime] = _db_clock_column()


async def create_schema(engine: AsyncEngine, *, drop_first: bool = False) -> list[str]:
    """Create every mapped table (and its enum types). Returns the table names.

    Existing tables are left alone unless *drop_first* is set.
    """
    # model modules register their tables on Base.metadata when imported
    import prreview.models  # noqa: F401

    async with engine.begin() as conn:
        if drop_first:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    return sorted(Base.metadata.tables)
