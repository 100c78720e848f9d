# endpoints/api_messages.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import inject, Provide

from dtos import (
    MessageCreateDTO,
    MessageCreatedDTO,
    MessageDTO,
)
from containers import Container
from repositories.message_repo import MessageRepository

router = APIRouter(prefix="/api/messages")


@router.get("/{conversation_id}", response_model=list[MessageDTO])
@inject
async def get_messages(
    conversation_id: int,
    mr: MessageRepository = Depends(Provide[Container.message_repo])
):
    msgs = await mr.list_for_conversation(conversation_id)
    return [MessageDTO.model_validate(m) for m in msgs]


@router.post("", response_model=MessageCreatedDTO)
@inject
async def add_message(
    payload: MessageCreateDTO,
    mr: MessageRepository = Depends(Provide[Container.message_repo])
):
    message_id = await mr.add_message(payload.conversation_id, payload.role, payload.content)
    return MessageCreatedDTO(message_id=message_id)
