# endpoints/api_auth.py
from fastapi import APIRouter, Body, Depends
from dependency_injector.wiring import inject, Provide

from dtos import CredentialsDTO, RegisteredDTO, LoggedInDTO
from containers import Container
from services.auth_service import AuthService

router = APIRouter(prefix="/api")


@router.post("/register", response_model=RegisteredDTO)
@inject
async def register(
    payload: CredentialsDTO = Body(default_factory=CredentialsDTO),
    auth: AuthService = Depends(Provide[Container.auth_service])
):
    user_id = await auth.register(payload.username, payload.password)
    return RegisteredDTO(user_id=user_id)


@router.post("/login", response_model=LoggedInDTO)
@inject
async def login(
    payload: CredentialsDTO = Body(default_factory=CredentialsDTO),
    auth: AuthService = Depends(Provide[Container.auth_service])
):
    user = await auth.login(payload.username, payload.password)
    return LoggedInDTO(user_id=user.id, username=user.username)
