from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import NullPool

from carecompanion.config import get_settings
from carecompanion.models import Base


settings = get_settings()
database_url = settings.get_database_url

engine_kwargs = {"echo": False, "future": True}
if database_url.startswith("postgresql"):
    # NullPool for PgBouncer-style poolers in transaction mode
    engine_kwargs["poolclass"] = NullPool
    engine_kwargs["connect_args"] = {
        "timeout": 60,
        "command_timeout": 60,
        "server_settings": {
            "statement_timeout": "60000",
        },
    }

engine = create_async_engine(database_url, **engine_kwargs)

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    async with async_session_maker() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Create any missing tables."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
