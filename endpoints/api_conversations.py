# endpoints/api_conversations.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import inject, Provide

from dtos import (
    ConversationCreateDTO,
    ConversationCreatedDTO,
    ConversationDTO,
    ConversationUpdateDTO,
    SuccessDTO,
)
from containers import Container
from repositories.conversation_repo import ConversationRepository

router = APIRouter(prefix="/api/conversations")


@router.get("/{user_id}", response_model=list[ConversationDTO])
@inject
async def list_conversations(
    user_id: int,
    cr: ConversationRepository = Depends(Provide[Container.conversation_repo])
):
    conversations = await cr.list_for_user(user_id)
    return [ConversationDTO.model_validate(c) for c in conversations]


@router.post("", response_model=ConversationCreatedDTO)
@inject
async def create_conversation(
    payload: ConversationCreateDTO,
    cr: ConversationRepository = Depends(Provide[Container.conversation_repo])
):
    conversation_id = await cr.create_conversation(payload.user_id, payload.title)
    return ConversationCreatedDTO(conversation_id=conversation_id)


@router.put("/{conversation_id}", response_model=SuccessDTO)
@inject
async def update_conversation_title(
    conversation_id: int,
    payload: ConversationUpdateDTO,
    cr: ConversationRepository = Depends(Provide[Container.conversation_repo])
):
    await cr.update_title(conversation_id, payload.title)
    return SuccessDTO()


@router.delete("/{conversation_id}", response_model=SuccessDTO)
@inject
async def delete_conversation(
    conversation_id: int,
    cr: ConversationRepository = Depends(Provide[Container.conversation_repo])
):
    await cr.delete_conversation(conversation_id)
    return SuccessDTO()
