from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.platform.config import Settings
from app.platform.db.base import Base


class Database:
    """
    Async engine plus session factory for one application instance.

    Created by create_app() and kept on app.state so that each app (and each
    test) owns its connections instead of sharing a module-level engine.
    """

    def __init__(self, settings: Settings):
        engine_kwargs = {"echo": settings.DB_ECHO, "pool_pre_ping": True}
        if not settings.DATABASE_URL.startswith("sqlite"):
            engine_kwargs.update(pool_recycle=1800, pool_size=20, max_overflow=30, pool_timeout=30)

        self.engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)
        self.sessionmaker = async_sessionmaker(
            self.engine, expire_on_commit=False, autoflush=False, autocommit=False
        )

    async def create_schema(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.database
    async with database.sessionmaker() as session:
        yield session
