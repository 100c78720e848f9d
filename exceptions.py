# exceptions.py
"""Ошибки хранилища и API-слоя.

Каждая ошибка знает свой HTTP-статус и код, обработчик в main.py
превращает их в JSON-ответ вида {"error": ..., "error_code": ...}.
"""


class ChatAppError(Exception):
    status_code = 500
    error_code = "INTERNAL_ERROR"
    default_message = "Server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidInput(ChatAppError):
    """Некорректный запрос, обнаруженный до обращения к хранилищу."""

    status_code = 400
    error_code = "INVALID_INPUT"
    default_message = "Invalid input"


class DuplicateKey(ChatAppError):
    """Нарушено ограничение уникальности."""

    status_code = 400
    error_code = "DUPLICATE_KEY"
    default_message = "Duplicate key"


class InvalidCredentials(ChatAppError):
    """Неверное имя пользователя или пароль (намеренно не различаются)."""

    status_code = 401
    error_code = "INVALID_CREDENTIALS"
    default_message = "Invalid credentials"


class StoreUnavailable(ChatAppError):
    """Сбой базы данных: соединение, ввод-вывод, повреждение файла."""

    status_code = 500
    error_code = "STORE_UNAVAILABLE"
    default_message = "Server error"
