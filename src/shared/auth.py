"""Admin authentication: HS256 bearer tokens issued at login.

The signing secret and token lifetime come from ``JWT_SECRET`` and
``JWT_EXPIRES_MINUTES``. Protected routes depend on ``require_admin``.
"""

import os
from datetime import UTC, datetime, timedelta

import jwt
import structlog
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

logger = structlog.get_logger(__name__)

ALGORITHM = "HS256"
DEFAULT_EXPIRES_MINUTES = 24 * 60
_DEVELOPMENT_SECRET = "handmade-development-secret"

bearer_scheme = HTTPBearer(auto_error=False)


def jwt_secret() -> str:
    secret = os.getenv("JWT_SECRET")
    if secret:
        return secret
    if os.getenv("PROTEAN_ENV") == "production":
        raise RuntimeError("JWT_SECRET must be set in production")
    return _DEVELOPMENT_SECRET


def token_lifetime() -> timedelta:
    return timedelta(minutes=int(os.getenv("JWT_EXPIRES_MINUTES") or DEFAULT_EXPIRES_MINUTES))


def issue_token(user_id: str, username: str, now: datetime | None = None) -> str:
    now = now or datetime.now(UTC)
    payload = {
        "sub": str(user_id),
        "userId": str(user_id),
        "username": username,
        "iat": now,
        "exp": now + token_lifetime(),
    }
    return jwt.encode(payload, jwt_secret(), algorithm=ALGORITHM)


def decode_token(token: str) -> dict:
    """Return the token claims. Raises ``jwt.PyJWTError`` when invalid or expired."""
    return jwt.decode(token, jwt_secret(), algorithms=[ALGORITHM])


def require_admin(credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme)) -> dict:
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return decode_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        logger.info("Rejected admin token", error=str(exc))
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token") from exc
