# repositories/message_repo.py
from sqlalchemy import select
from models import Message
from typing import List

from repositories.base import BaseRepository


class MessageRepository(BaseRepository):
    """
    Репозиторий для сообщений в беседах.
    """

    async def add_message(self, conversation_id: int, role: str, content: str) -> int:
        """Сохраняет новое сообщение. Наличие беседы не проверяется."""
        async with self.session() as session:
            message = Message(conversation_id=conversation_id, role=role, content=content)
            session.add(message)
            await session.commit()
            return message.id

    async def list_for_conversation(self, conversation_id: int) -> List[Message]:
        """
        Все сообщения беседы в порядке добавления.
        Сортируем по AUTOINCREMENT id: часы могут уйти назад, id нет.
        """
        async with self.session() as session:
            q = await session.execute(
                select(Message)
                .where(Message.conversation_id == conversation_id)
                .order_by(Message.id)
            )
            return list(q.scalars().all())
