# repositories/conversation_repo.py
from sqlalchemy import select, delete, update
from models import Conversation, Message, DEFAULT_CONVERSATION_TITLE
from typing import List, Optional

from repositories.base import BaseRepository


class ConversationRepository(BaseRepository):
    async def create_conversation(self, user_id: int, title: Optional[str] = None) -> int:
        async with self.session() as session:
            conversation = Conversation(user_id=user_id, title=title or DEFAULT_CONVERSATION_TITLE)
            session.add(conversation)
            await session.commit()
            return conversation.id

    async def list_for_user(self, user_id: int) -> List[Conversation]:
        """Беседы пользователя, новые первыми."""
        async with self.session() as session:
            q = await session.execute(
                select(Conversation)
                .where(Conversation.user_id == user_id)
                .order_by(Conversation.created_at.desc(), Conversation.id.desc())
            )
            return list(q.scalars().all())

    async def update_title(self, conversation_id: int, title: str) -> None:
        # Существование беседы не проверяется: для неизвестного id это просто no-op
        async with self.session() as session:
            await session.execute(
                update(Conversation).where(Conversation.id == conversation_id).values(title=title)
            )
            await session.commit()

    async def delete_conversation(self, conversation_id: int) -> None:
        """
        Удаляет сообщения беседы, затем саму беседу.
        Сообщения идут первыми, чтобы не оставалось сообщений без беседы.
        """
        async with self.session() as session:
            await session.execute(delete(Message).where(Message.conversation_id == conversation_id))
            await session.execute(delete(Conversation).where(Conversation.id == conversation_id))
            await session.commit()
