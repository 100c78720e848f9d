# repositories/base.py
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from exceptions import DuplicateKey, StoreUnavailable

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_session(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """
    Открывает сессию на одну операцию хранилища и переводит ошибки
    SQLAlchemy в DuplicateKey / StoreUnavailable. Повторов нет.
    """
    async with session_factory() as session:
        try:
            yield session
        except IntegrityError as e:
            if "UNIQUE" in str(e.orig).upper():
                raise DuplicateKey() from e
            logger.exception("Integrity error in store operation")
            raise StoreUnavailable() from e
        except (SQLAlchemyError, OSError) as e:
            logger.exception("Store operation failed")
            raise StoreUnavailable() from e


class BaseRepository:
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    def session(self):
        return store_session(self.session_factory)
