from sqlalchemy.orm import declarative_base
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, async_sessionmaker

from app.core.config import settings

engine = create_async_engine(settings.database_url, echo=settings.sqlalchemy_echo)
SessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)
Base = declarative_base()


def make_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    if bind is engine:
        return SessionLocal
    return async_sessionmaker(bind=bind, expire_on_commit=False)


async def create_tables(bind: AsyncEngine = engine) -> None:
    # Sem migrations: cria as tabelas registradas no Base
    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
