# security.py
import bcrypt

# bcrypt учитывает только первые 72 байта пароля
BCRYPT_MAX_BYTES = 72


def _encode(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """
    Солёные bcrypt-хэши паролей.
    checkpw сравнивает хэши за постоянное время.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds
        # хэш-пустышка для проверки, когда пользователь не найден
        self._dummy_hash = self.hash("dummy-password")

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_encode(password), salt).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("utf-8"))
        except ValueError:
            # повреждённый хэш в базе
            return False

    def verify_dummy(self, password: str) -> bool:
        self.verify(password, self._dummy_hash)
        return False
