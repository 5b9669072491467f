"""
Bearer token handling.

Operators sign in with the external identity provider; this service only
checks the token signature and expiry and reads the operator id from `sub`.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import jwt

from app.core.config import settings

logger = logging.getLogger(__name__)


def create_access_token(operator_id: str, email: Optional[str] = None, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a token for an operator. Used by dev scripts and tests."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))
    payload = {"sub": operator_id, "iat": now, "exp": expire}
    if email:
        payload["email"] = email
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.AUTH_ALGORITHM)


def decode_access_token(token: str) -> Optional[dict]:
    """Return the token claims, or None if the token is invalid or expired."""
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.AUTH_ALGORITHM])
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
        return None
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected invalid access token: {e}")
        return None
