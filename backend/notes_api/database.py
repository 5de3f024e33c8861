"""Async SQLAlchemy engine and session factory.

The engine is built by the application lifespan and kept on ``app.state``;
nothing here is created at import time.

Usage in routes:
    from notes_api.database import get_db

    @router.get("/items")
    async def list_items(db: AsyncSession = Depends(get_db)):
        result = await db.execute(select(Item))
        return result.scalars().all()
"""
from fastapi import Request
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)


def build_engine(database_url: str) -> AsyncEngine:
    """Create the async engine for the configured database URL."""
    return create_async_engine(database_url, echo=False, pool_pre_ping=True)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_db(request: Request):
    """FastAPI dependency that yields an async DB session."""
    async with request.app.state.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
