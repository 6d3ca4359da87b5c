from __future__ import annotations

import secrets
import string
from typing import Protocol, cast

from passlib.context import CryptContext

TOKEN_ALPHABET = string.ascii_letters + string.digits
API_TOKEN_LENGTH = 80


class PasswordHasher(Protocol):
    def hash(self, raw: str) -> str: ...

    def verify(self, raw: str, hashed: str) -> bool: ...


class TokenGenerator(Protocol):
    def __call__(self, length: int) -> str: ...


class CryptContextHasher:
    """One-way password hashing backed by a passlib CryptContext."""

    def __init__(self, context: CryptContext | None = None) -> None:
        self._context = context or CryptContext(
            schemes=["argon2"],
            default="argon2",
            deprecated="auto",
        )

    def hash(self, raw: str) -> str:
        return cast(str, self._context.hash(raw))

    def verify(self, raw: str, hashed: str) -> bool:
        return cast(bool, self._context.verify(raw, hashed))


class RandomTokenGenerator:
    """Bearer-token strings drawn from the OS CSPRNG."""

    def __init__(self, alphabet: str = TOKEN_ALPHABET) -> None:
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self.alphabet = alphabet

    def __call__(self, length: int) -> str:
        if length < 1:
            raise ValueError(f"token length must be positive, got {length}")
        return "".join(secrets.choice(self.alphabet) for _ in range(length))


default_hasher = CryptContextHasher()
random_token = RandomTokenGenerator()


def hash_password(raw: str) -> str:
    return default_hasher.hash(raw)


def verify_password(raw: str, hashed: str) -> bool:
    return default_hasher.verify(raw, hashed)
