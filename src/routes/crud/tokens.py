from datetime import datetime, UTC

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from database import RefreshTokenModel


async def save_refresh_token(
        db: AsyncSession, user_id: int, token: str, days_valid: int
) -> RefreshTokenModel:
    refresh_token = RefreshTokenModel.create(
        user_id=user_id, days_valid=days_valid, token=token
    )
    db.add(refresh_token)
    await db.commit()
    return refresh_token


async def get_refresh_token(
        db: AsyncSession, token: str
) -> RefreshTokenModel | None:
    stmt = select(RefreshTokenModel).where(RefreshTokenModel.token == token)
    result = await db.execute(stmt)
    return result.scalars().first()


async def delete_refresh_token(db: AsyncSession, token: str) -> None:
    await db.execute(
        delete(RefreshTokenModel).where(RefreshTokenModel.token == token)
    )
    await db.commit()


def remove_expired_refresh_tokens(db: Session) -> int:
    """Synchronous cleanup used by the celery worker; returns deleted rows."""
    stmt = delete(RefreshTokenModel).where(
        RefreshTokenModel.expires_at < datetime.now(UTC)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount
