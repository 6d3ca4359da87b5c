from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from userbase.core.config import settings
from userbase.models import user  # noqa: F401


def _connect_args(url: str) -> dict[str, Any]:
    # sqlite connections are shared with the TestClient worker thread
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


def make_engine(url: str) -> Engine:
    return create_engine(url, connect_args=_connect_args(url))


engine = make_engine(settings.database_url)


def init_db() -> None:
    """Create tables for every registered model on the current engine."""
    SQLModel.metadata.create_all(engine)


def get_session() -> Iterator[Session]:
    with Session(engine) as session:
        yield session
