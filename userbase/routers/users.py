from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlmodel import Session, select

from userbase.core.db import get_session
from userbase.models.user import User, UserRead

router = APIRouter(tags=["users"])
bearer = HTTPBearer()

SessionDep = Annotated[Session, Depends(get_session)]
CredentialsDep = Annotated[HTTPAuthorizationCredentials, Depends(bearer)]


def get_current_user(creds: CredentialsDep, session: SessionDep) -> User:
    statement = select(User).where(User.api_token == creds.credentials)
    user = session.exec(statement).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
    return user


CurrentUserDep = Annotated[User, Depends(get_current_user)]


@router.get("/user", response_model=UserRead)
def read_current_user(current: CurrentUserDep) -> User:
    return current
