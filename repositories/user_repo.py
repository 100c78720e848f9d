# repositories/user_repo.py
from sqlalchemy import select
from models import User
from typing import Optional

from repositories.base import BaseRepository


class UserRepository(BaseRepository):
    async def create_user(self, username: str, password_hash: str) -> int:
        """Создаёт пользователя. DuplicateKey, если имя занято."""
        async with self.session() as session:
            user = User(username=username, password=password_hash)
            session.add(user)
            await session.commit()
            return user.id

    async def get_by_username(self, username: str) -> Optional[User]:
        async with self.session() as session:
            q = await session.execute(select(User).where(User.username == username))
            return q.scalars().first()
