from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    # timezone-aware; sqlmodel rejects naive datetimes on bind
    return datetime.now(UTC)
