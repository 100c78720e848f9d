# repositories/settings_repo.py
from sqlalchemy import select
from sqlalchemy.dialects.sqlite import insert
from models import UserSettings, utcnow
from typing import Optional

from repositories.base import BaseRepository


class SettingsRepository(BaseRepository):
    async def get_settings(self, user_id: int) -> UserSettings:
        """Настройки пользователя или объект по умолчанию с пустым ключом."""
        async with self.session() as session:
            q = await session.execute(select(UserSettings).where(UserSettings.user_id == user_id))
            settings = q.scalars().first()
        if settings is None:
            return UserSettings(user_id=user_id, openai_api_key=None)
        return settings

    async def upsert_settings(self, user_id: int, openai_api_key: Optional[str]) -> None:
        # Один оператор INSERT .. ON CONFLICT: при гонке побеждает последний писатель
        stmt = insert(UserSettings).values(
            user_id=user_id,
            openai_api_key=openai_api_key,
            updated_at=utcnow(),
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=[UserSettings.user_id],
            set_={
                "openai_api_key": stmt.excluded.openai_api_key,
                "updated_at": stmt.excluded.updated_at,
            },
        )
        async with self.session() as session:
            await session.execute(stmt)
            await session.commit()
