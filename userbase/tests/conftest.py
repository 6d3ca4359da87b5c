from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

import userbase.core.db as db_module
from userbase.models import user  # noqa: F401
from userbase.tests.fakes import CountingTokens, FakeHasher


@pytest.fixture()
def engine(tmp_path: Path) -> Iterator[Engine]:
    test_engine = db_module.make_engine(f"sqlite:///{tmp_path / 'test.db'}")
    SQLModel.metadata.create_all(test_engine)
    yield test_engine
    SQLModel.metadata.drop_all(test_engine)
    test_engine.dispose()


@pytest.fixture()
def session(engine: Engine) -> Iterator[Session]:
    with Session(engine) as s:
        yield s


@pytest.fixture()
def hasher() -> FakeHasher:
    return FakeHasher()


@pytest.fixture()
def tokens() -> CountingTokens:
    return CountingTokens()
