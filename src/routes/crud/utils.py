import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from database.models.base import Base
from exceptions import DuplicateEntryError

logger = logging.getLogger(__name__)


async def commit_or_raise_duplicate(
        db: AsyncSession, entity: str, message: str | None = None
) -> None:
    """
    Commit the pending unit of work, translating a unique-constraint
    violation into DuplicateEntryError.

    The session is rolled back before the error propagates, so it stays
    usable for the caller.
    """
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.info(f"Rejected duplicate {entity}: {e.orig}")
        raise DuplicateEntryError(entity, message) from e


async def insert_unique(
        db: AsyncSession,
        instance: Base,
        entity: str,
        message: str | None = None
) -> Base:
    db.add(instance)
    await commit_or_raise_duplicate(db, entity, message)
    await db.refresh(instance)
    return instance
