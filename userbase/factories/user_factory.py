from __future__ import annotations

import logging
import random
from collections.abc import Mapping
from typing import Any

from sqlmodel import Session

from userbase.core.clock import Clock, utcnow
from userbase.core.security import (
    API_TOKEN_LENGTH,
    PasswordHasher,
    TokenGenerator,
    default_hasher,
    random_token,
)
from userbase.models.user import User

logger = logging.getLogger(__name__)

FIRST_NAMES = (
    "Ada", "Alan", "Barbara", "Claude", "Donald", "Edsger", "Frances",
    "Grace", "Guido", "Hedy", "Ivan", "John", "Ken", "Linus", "Margaret",
    "Niklaus", "Radia", "Sophie", "Tim", "Yukihiro",
)
LAST_NAMES = (
    "Allen", "Backus", "Cerf", "Dijkstra", "Hamilton", "Hopper", "Kay",
    "Knuth", "Lamarr", "Liskov", "Lovelace", "Perlman", "Ritchie",
    "Rossum", "Shannon", "Sutherland", "Thompson", "Torvalds", "Turing",
    "Wirth",
)
EMAIL_DOMAINS = ("example.com", "example.org", "example.net")
DEFAULT_PASSWORD = "password"
REMEMBER_TOKEN_LENGTH = 10

_USER_FIELDS = frozenset(User.model_fields)


class UserFactory:
    """Builds ``User`` rows with plausible randomized attributes.

    Generated emails are unique per factory instance. The default password
    is hashed once and shared by every generated user.
    """

    def __init__(
        self,
        *,
        hasher: PasswordHasher = default_hasher,
        token_generator: TokenGenerator = random_token,
        clock: Clock = utcnow,
        rng: random.Random | None = None,
        password: str | None = None,
    ) -> None:
        self.hasher = hasher
        self.token_generator = token_generator
        self.clock = clock
        self.rng = rng or random.Random()
        self.password = password or DEFAULT_PASSWORD
        self._password_hash: str | None = None
        self._issued_emails: set[str] = set()

    def _hashed_password(self) -> str:
        if self._password_hash is None:
            self._password_hash = self.hasher.hash(self.password)
        return self._password_hash

    def _unique_email(self, name: str) -> str:
        local = ".".join(name.lower().split())
        while True:
            suffix = f"{self.rng.getrandbits(32):08x}"
            domain = self.rng.choice(EMAIL_DOMAINS)
            email = f"{local}.{suffix}@{domain}"
            if email not in self._issued_emails:
                self._issued_emails.add(email)
                return email

    def definition(self) -> dict[str, Any]:
        name = f"{self.rng.choice(FIRST_NAMES)} {self.rng.choice(LAST_NAMES)}"
        return {
            "name": name,
            "email": self._unique_email(name),
            "email_verified_at": self.clock(),
            "password": self._hashed_password(),
            "api_token": self.token_generator(API_TOKEN_LENGTH),
            "remember_token": self.token_generator(REMEMBER_TOKEN_LENGTH),
        }

    def make(
        self,
        count: int = 1,
        overrides: Mapping[str, Any] | None = None,
    ) -> list[User]:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        overrides = dict(overrides or {})
        unknown = set(overrides) - _USER_FIELDS
        if unknown:
            raise ValueError(f"unknown User fields: {', '.join(sorted(unknown))}")

        users: list[User] = []
        for _ in range(count):
            attrs = self.definition()
            attrs.update(overrides)
            users.append(User(**attrs))
        return users

    def create(
        self,
        session: Session,
        count: int = 1,
        overrides: Mapping[str, Any] | None = None,
    ) -> list[User]:
        users = self.make(count, overrides)
        if not users:
            return users

        session.add_all(users)
        session.commit()
        for user in users:
            session.refresh(user)
        logger.debug("factory persisted %d users", len(users))
        return users
