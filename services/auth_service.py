# services/auth_service.py
import asyncio
import logging
from typing import Optional

from exceptions import DuplicateKey, InvalidCredentials, InvalidInput
from models import User
from repositories.user_repo import UserRepository
from security import PasswordHasher

logger = logging.getLogger(__name__)


class AuthService:
    """
    Регистрация и вход пользователей.
    """

    def __init__(self, user_repo: UserRepository, hasher: PasswordHasher):
        self.user_repo = user_repo
        self.hasher = hasher

    async def register(self, username: Optional[str], password: Optional[str]) -> int:
        if not username or not password:
            raise InvalidInput("Username and password required")

        # bcrypt блокирует, выносим из event loop
        password_hash = await asyncio.to_thread(self.hasher.hash, password)
        try:
            user_id = await self.user_repo.create_user(username, password_hash)
        except DuplicateKey as e:
            raise DuplicateKey("Username already exists") from e

        logger.info("Registered user %s (id=%s)", username, user_id)
        return user_id

    async def login(self, username: Optional[str], password: Optional[str]) -> User:
        """
        Проверяет пароль. Неизвестный пользователь и неверный пароль
        дают одинаковый InvalidCredentials.
        """
        if not username or not password:
            raise InvalidCredentials()

        user = await self.user_repo.get_by_username(username)
        if user is None:
            # та же стоимость bcrypt, что и при неверном пароле
            await asyncio.to_thread(self.hasher.verify_dummy, password)
            raise InvalidCredentials()

        if not await asyncio.to_thread(self.hasher.verify, password, user.password):
            raise InvalidCredentials()

        return user
