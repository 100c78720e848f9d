from dependency_injector import containers, providers
from config import Settings
from db import Database
from security import PasswordHasher
from repositories.user_repo import UserRepository
from repositories.conversation_repo import ConversationRepository
from repositories.message_repo import MessageRepository
from repositories.settings_repo import SettingsRepository
from services.auth_service import AuthService


class Container(containers.DeclarativeContainer):
    """
    Контейнер зависимостей приложения.
    """
    # Модули, в которые внедряются зависимости через @inject
    wiring_config = containers.WiringConfiguration(modules=[
        "endpoints.api_auth",
        "endpoints.api_settings",
        "endpoints.api_conversations",
        "endpoints.api_messages",
    ])

    # --- Провайдеры ---

    # 1. Настройки. В тестах переопределяются через settings.override(...)
    settings = providers.Singleton(Settings)

    # 2. База данных: один движок на процесс, сессия на каждую операцию
    database = providers.Singleton(
        Database,
        url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    # 3. Репозитории. Factory создаёт новый экземпляр на каждый запрос,
    # все они делят фабрику сессий одной базы.
    user_repo: providers.Factory[UserRepository] = providers.Factory(
        UserRepository,
        session_factory=database.provided.session_factory,
    )

    conversation_repo: providers.Factory[ConversationRepository] = providers.Factory(
        ConversationRepository,
        session_factory=database.provided.session_factory,
    )

    message_repo: providers.Factory[MessageRepository] = providers.Factory(
        MessageRepository,
        session_factory=database.provided.session_factory,
    )

    settings_repo: providers.Factory[SettingsRepository] = providers.Factory(
        SettingsRepository,
        session_factory=database.provided.session_factory,
    )

    # 4. Сервисы
    password_hasher = providers.Singleton(
        PasswordHasher,
        rounds=settings.provided.bcrypt_rounds,
    )

    auth_service: providers.Factory[AuthService] = providers.Factory(
        AuthService,
        user_repo=user_repo,
        hasher=password_hasher,
    )
