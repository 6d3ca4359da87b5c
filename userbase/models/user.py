from __future__ import annotations

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

from userbase.core.clock import utcnow
from userbase.core.security import API_TOKEN_LENGTH


class User(SQLModel, table=True):
    __tablename__ = "users"
    __table_args__ = (
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("api_token", name="uq_users_api_token"),
    )

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(max_length=255, index=True)
    email_verified_at: datetime | None = None
    # always a hash, never the raw password
    password: str = Field(max_length=255)
    api_token: str | None = Field(default=None, max_length=API_TOKEN_LENGTH)
    remember_token: str | None = Field(default=None, max_length=100)
    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )


class UserRead(SQLModel):
    id: int
    name: str
    email: str
    email_verified_at: datetime | None = None
    created_at: datetime

    model_config = {"from_attributes": True}
