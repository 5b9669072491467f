#!/usr/bin/env python3
"""
Debug script to check if environment variables are loaded correctly.
Run this inside the backend container to verify .env file is being read.
"""
import os
import sys

# Add parent directory to path to import app modules
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.config import settings
from app.services.otp_delivery import TwilioSmsSender, get_otp_sender


def _mask(value):
    return '***' + value[-4:] if value else '(not set)'


print("=" * 60)
print("Environment Variables Check")
print("=" * 60)
print()

print("Database:")
print(f"  DATABASE_URL: {settings.DATABASE_URL.split('@')[-1]}")
print()

print("Auth:")
print(f"  AUTH_ALGORITHM: {settings.AUTH_ALGORITHM}")
print(f"  SECRET_KEY: {_mask(settings.SECRET_KEY)}")
if settings.SECRET_KEY == "supersecret_jwt_key_change_in_production":
    print("  ⚠️  WARNING: SECRET_KEY is the built-in default")
print()

print("OTP:")
print(f"  OTP_EXPIRY_MINUTES: {settings.OTP_EXPIRY_MINUTES}")
print(f"  OTP_VERIFY_MAX_ATTEMPTS: {settings.OTP_VERIFY_MAX_ATTEMPTS} per {settings.OTP_VERIFY_WINDOW_SECONDS}s")
print()

raw_twilio_sid = os.environ.get('TWILIO_ACCOUNT_SID', '')
print("Twilio SMS Configuration:")
print(f"  TWILIO_ACCOUNT_SID (raw env): '{raw_twilio_sid}'")
print(f"  TWILIO_ACCOUNT_SID (settings): {settings.TWILIO_ACCOUNT_SID or '(not set)'}")
print(f"  TWILIO_AUTH_TOKEN: {_mask(settings.TWILIO_AUTH_TOKEN)}")
print(f"  TWILIO_FROM_NUMBER: {settings.TWILIO_FROM_NUMBER or '(not set)'}")
print()

if isinstance(get_otp_sender(), TwilioSmsSender):
    print("✅ OTP codes will be sent by SMS")
else:
    print("⚠️  WARNING: Twilio is not fully configured; OTP codes are only written to the log")
