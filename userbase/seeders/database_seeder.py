from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Protocol

from sqlmodel import Session

from userbase.seeders.users_seeder import UsersSeeder

logger = logging.getLogger(__name__)


class Seeder(Protocol):
    def run(self, session: Session) -> Any: ...


class DatabaseSeeder:
    """Runs each registered seeder in order on one session."""

    def __init__(self, seeders: Sequence[Seeder] | None = None) -> None:
        self.seeders: list[Seeder] = (
            list(seeders) if seeders is not None else [UsersSeeder()]
        )

    def run(self, session: Session) -> None:
        for seeder in self.seeders:
            name = type(seeder).__name__
            logger.info("seeding: %s", name)
            seeder.run(session)
            logger.info("seeded: %s", name)
