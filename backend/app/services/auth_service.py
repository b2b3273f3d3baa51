"""Admin credential check and session token issuing."""

import secrets
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, status
from jose import jwt

from app.config import settings

ALGORITHM = "HS256"
ADMIN_SUBJECT = "admin"


def create_access_token(subject: str = ADMIN_SUBJECT) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": subject, "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=ALGORITHM)


def verify_admin_password(password: str) -> None:
    expected = settings.ADMIN_PASSWORD or ""
    if not expected or not secrets.compare_digest((password or "").encode(), expected.encode()):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )


def admin_profile() -> dict:
    return {"name": settings.ADMIN_NAME, "email": settings.ADMIN_EMAIL}
