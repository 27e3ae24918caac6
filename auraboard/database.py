from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from auraboard.config import DATABASE_URL

engine = create_async_engine(DATABASE_URL, future=True, pool_pre_ping=True)
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def init_models(bind=engine):
    # Schema migrations live outside this service; this is for local runs and tests.
    from auraboard import models  # noqa: F401  registers the tables on Base

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
