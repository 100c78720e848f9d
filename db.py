# db.py
import logging

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from models import Base

logger = logging.getLogger(__name__)


class Database:
    """
    Владеет движком SQLite и фабрикой сессий.
    Экземпляр создаётся контейнером и передаётся в репозитории явно.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, future=True)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def init_db(self) -> None:
        # CREATE TABLE IF NOT EXISTS: повторный запуск на заполненной базе ничего не трогает
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ready at %s", self.url)

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connection closed")
