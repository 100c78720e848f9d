# endpoints/api_settings.py
from fastapi import APIRouter, Depends
from dependency_injector.wiring import inject, Provide

from dtos import SettingsDTO, SettingsSaveDTO, SuccessDTO
from containers import Container
from repositories.settings_repo import SettingsRepository

router = APIRouter(prefix="/api/settings")


@router.get("/{user_id}", response_model=SettingsDTO)
@inject
async def get_settings(
    user_id: int,
    sr: SettingsRepository = Depends(Provide[Container.settings_repo])
):
    settings = await sr.get_settings(user_id)
    return SettingsDTO.model_validate(settings)


@router.post("", response_model=SuccessDTO)
@inject
async def save_settings(
    payload: SettingsSaveDTO,
    sr: SettingsRepository = Depends(Provide[Container.settings_repo])
):
    await sr.upsert_settings(payload.user_id, payload.openai_api_key)
    return SuccessDTO()
