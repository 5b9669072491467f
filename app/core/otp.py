"""
One-time code generation and expiry.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional
import secrets

from app.core.config import settings

OTP_LENGTH = 6
OTP_MIN = 10 ** (OTP_LENGTH - 1)  # 100000
OTP_MAX = 10 ** OTP_LENGTH - 1    # 999999


def utcnow() -> datetime:
    """Naive UTC timestamp, matching how DateTime columns are stored."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_otp() -> str:
    """Uniformly pick a code in [100000, 999999]; always exactly six digits."""
    return str(OTP_MIN + secrets.randbelow(OTP_MAX - OTP_MIN + 1))


def otp_expiry(issued_at: Optional[datetime] = None) -> datetime:
    issued_at = issued_at or utcnow()
    return issued_at + timedelta(minutes=settings.OTP_EXPIRY_MINUTES)


def is_expired(expires_at: datetime, now: Optional[datetime] = None) -> bool:
    """A code is still valid at exactly its expiry instant."""
    now = now or utcnow()
    return now > expires_at


def codes_match(submitted: str, stored: str) -> bool:
    """Exact comparison, no normalization. Constant time."""
    return secrets.compare_digest(submitted.encode("utf-8"), stored.encode("utf-8"))
