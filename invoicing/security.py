# invoicing/security.py

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


class PasswordHasher:
    """One-way salted hashing; plaintext is only ever compared, never stored."""

    def __init__(self, context: CryptContext = pwd_context):
        self.context = context

    def hash(self, password: str) -> str:
        result: str = self.context.hash(password)
        return result

    def verify(self, password: str, hashed: str) -> bool:
        result: bool = self.context.verify(password, hashed)
        return result


def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()
