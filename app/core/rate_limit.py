"""
Simple in-memory rate limiting for OTP verification attempts
"""
from fastapi import HTTPException, status
from datetime import datetime, timedelta
from collections import defaultdict
from typing import Optional
import logging
import threading

from app.core.otp import utcnow

logger = logging.getLogger(__name__)

# In-memory store for rate limiting
# Format: {identifier: [timestamp, ...]}
_rate_limit_store = defaultdict(list)
_rate_limit_lock = threading.Lock()

# Cleanup old entries every 5 minutes
_last_cleanup = utcnow()
_cleanup_interval = timedelta(minutes=5)


def _cleanup_old_entries(now: datetime):
    """Remove entries older than the time window"""
    global _last_cleanup

    if now - _last_cleanup < _cleanup_interval:
        return

    with _rate_limit_lock:
        _last_cleanup = now
        cutoff_time = now - timedelta(hours=1)  # Keep last hour of data

        for key in list(_rate_limit_store.keys()):
            _rate_limit_store[key] = [ts for ts in _rate_limit_store[key] if ts > cutoff_time]
            if not _rate_limit_store[key]:
                del _rate_limit_store[key]


def check_rate_limit(identifier: str, max_requests: int, window_seconds: int, now: Optional[datetime] = None):
    """
    Record an attempt for `identifier` and raise 429 once more than
    `max_requests` attempts fall inside the trailing window.

    Usage:
        check_rate_limit(f"verify:{operator.id}:{campaign_id}:{phone}", 5, 300)
    """
    now = now or utcnow()
    _cleanup_old_entries(now)
    window_start = now - timedelta(seconds=window_seconds)

    with _rate_limit_lock:
        recent_requests = [ts for ts in _rate_limit_store[identifier] if ts > window_start]
        _rate_limit_store[identifier] = recent_requests

        if len(recent_requests) >= max_requests:
            logger.warning(f"Rate limit exceeded for {identifier}: {len(recent_requests)} attempts in {window_seconds}s")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Too many attempts: {max_requests} per {window_seconds} seconds. Please try again later."
            )

        _rate_limit_store[identifier].append(now)


def reset_rate_limits():
    with _rate_limit_lock:
        _rate_limit_store.clear()
