"""
Database engine and sessions for the translation tables.

Sessions keep rows loaded after commit (expire_on_commit=False): the CRUD
layer commits after every single write and the worker, the backfill and the
routes go on reading the returned rows.
"""

from typing import Any, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from portal_translations.core.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Keyword arguments for create_async_engine, per driver"""
    options: dict[str, Any] = {"echo": settings.db_echo}
    if database_url.startswith("sqlite"):
        return options

    options.update(
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_recycle=settings.db_pool_recycle_seconds,
        pool_pre_ping=True,
    )
    if database_url.startswith("postgresql+asyncpg"):
        options["connect_args"] = {
            "command_timeout": settings.db_command_timeout,
            "server_settings": {"application_name": settings.db_application_name},
        }
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings.database_url))

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Request-scoped session; work left uncommitted by a failing route is rolled back"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    await engine.dispose()
