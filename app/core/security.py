from datetime import datetime, timedelta
from typing import Optional

import jwt
from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User


ALGORITHM = "HS256"


def _unauthorized() -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")


def create_jwt(payload: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = payload.copy()
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.SESSION_TTL_HOURS)
    exp = datetime.utcnow() + expires_delta
    to_encode.update({"exp": exp})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=ALGORITHM)


def decode_jwt(token: str) -> dict:
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[ALGORITHM])
    except jwt.PyJWTError as exc:
        raise _unauthorized() from exc


def create_session_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    return create_jwt({"sub": user_id}, expires_delta)


def _session_token(request: Request, authorization: Optional[str]) -> Optional[str]:
    token = request.cookies.get(settings.SESSION_COOKIE_NAME)
    if token:
        return token
    # Bearer header for non-browser clients
    if authorization and authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip() or None
    return None


def get_current_user(
    request: Request,
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
) -> User:
    token = _session_token(request, authorization)
    if not token:
        raise _unauthorized()
    payload = decode_jwt(token)
    uid = payload.get("sub")
    if not uid:
        raise _unauthorized()
    user = db.get(User, str(uid))
    if user is None:
        raise _unauthorized()
    return user
