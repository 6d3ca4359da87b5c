from __future__ import annotations

import logging

from sqlmodel import Session

from userbase.core.clock import Clock, utcnow
from userbase.core.security import (
    API_TOKEN_LENGTH,
    PasswordHasher,
    TokenGenerator,
    default_hasher,
    random_token,
)
from userbase.factories import UserFactory
from userbase.models.user import User

logger = logging.getLogger(__name__)


class UsersSeeder:
    """Seeds the administrator account followed by factory-generated users.

    Nothing is caught here: a duplicate email on a second run surfaces as
    ``sqlalchemy.exc.IntegrityError`` to whoever invoked the seeder.
    """

    ADMIN_NAME = "super-king"
    ADMIN_EMAIL = "king@example.com"
    ADMIN_PASSWORD = "test_pass"
    USER_COUNT = 10

    def __init__(
        self,
        *,
        hasher: PasswordHasher = default_hasher,
        token_generator: TokenGenerator = random_token,
        clock: Clock = utcnow,
        factory: UserFactory | None = None,
        count: int = USER_COUNT,
    ) -> None:
        self.hasher = hasher
        self.token_generator = token_generator
        self.clock = clock
        self.factory = factory or UserFactory(
            hasher=hasher,
            token_generator=token_generator,
            clock=clock,
        )
        self.count = count

    def build_admin(self) -> User:
        return User(
            name=self.ADMIN_NAME,
            password=self.hasher.hash(self.ADMIN_PASSWORD),
            api_token=self.token_generator(API_TOKEN_LENGTH),
            email=self.ADMIN_EMAIL,
            email_verified_at=self.clock(),
        )

    def run(self, session: Session) -> list[User]:
        admin = self.build_admin()
        session.add(admin)
        session.commit()
        session.refresh(admin)
        logger.info("created admin user %s (id=%s)", admin.email, admin.id)

        users = self.factory.create(session, self.count)
        logger.info("created %d factory users", len(users))
        return [admin, *users]
