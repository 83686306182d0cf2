"""Async engine lifecycle and request-scoped sessions."""
from collections.abc import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def is_memory_sqlite(url: str) -> bool:
    return url.startswith("sqlite") and (":memory:" in url or "mode=memory" in url or url.rstrip("/").endswith(":"))


class Database:
    """Owns the engine; opened at startup and disposed at shutdown."""

    def __init__(self, url: str) -> None:
        self.url = url
        self._engine: AsyncEngine | None = None
        self._sessionmaker: async_sessionmaker[AsyncSession] | None = None

    async def connect(self) -> None:
        if self._engine is not None:
            return
        if is_memory_sqlite(self.url):
            # one shared connection so the database survives across sessions;
            # sessions then share a transaction, so in-memory is for tests only
            self._engine = create_async_engine(
                self.url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        elif self.url.startswith("sqlite"):
            # pooled connections, each waiting up to 30s on the file write lock
            self._engine = create_async_engine(self.url, connect_args={"timeout": 30})
        else:
            self._engine = create_async_engine(self.url, pool_pre_ping=True)
        self._sessionmaker = async_sessionmaker(self._engine, expire_on_commit=False)

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    def session(self) -> AsyncSession:
        if self._sessionmaker is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._sessionmaker()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency: one session per request from the app's Database."""
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session
