from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime

# Клиент шлёт camelCase (userId, conversationId), поля в Python остаются snake_case.
# Ответы сериализуются по алиасам, так что форма JSON совпадает с запросами.

class AliasedDTO(BaseModel):
    model_config = {"populate_by_name": True}

# ======================
# Input DTOs
# ======================

class CredentialsDTO(BaseModel):
    # пустые и отсутствующие поля проверяет AuthService, а не pydantic
    username: Optional[str] = None
    password: Optional[str] = None

class SettingsSaveDTO(AliasedDTO):
    user_id: int = Field(..., alias="userId")
    openai_api_key: Optional[str] = None

class ConversationCreateDTO(AliasedDTO):
    user_id: int = Field(..., alias="userId")
    title: Optional[str] = None

class ConversationUpdateDTO(BaseModel):
    title: str

class MessageCreateDTO(AliasedDTO):
    conversation_id: int = Field(..., alias="conversationId")
    role: str
    content: str = Field(..., min_length=1)

# ======================
# Output DTOs
# ======================

class SuccessDTO(BaseModel):
    success: bool = True

class RegisteredDTO(SuccessDTO, AliasedDTO):
    user_id: int = Field(..., alias="userId")

class LoggedInDTO(SuccessDTO, AliasedDTO):
    user_id: int = Field(..., alias="userId")
    username: str

class ConversationCreatedDTO(SuccessDTO, AliasedDTO):
    conversation_id: int = Field(..., alias="conversationId")

class MessageCreatedDTO(SuccessDTO, AliasedDTO):
    message_id: int = Field(..., alias="messageId")

class SettingsDTO(BaseModel):
    openai_api_key: Optional[str] = None

    model_config = {"from_attributes": True}

class ConversationDTO(BaseModel):
    id: int
    user_id: int
    title: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}

class MessageDTO(BaseModel):
    id: int
    conversation_id: int
    role: str
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}

class HealthDTO(BaseModel):
    status: str
    message: str
    version: str
    timestamp: datetime
