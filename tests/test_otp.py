"""One-time code generation and expiry"""
from datetime import datetime, timedelta

from app.core.otp import codes_match, generate_otp, is_expired, otp_expiry

ISSUED = datetime(2026, 10, 19, 12, 0, 0)


def test_generated_codes_are_six_digits_in_range():
    for _ in range(2000):
        code = generate_otp()
        assert len(code) == 6
        assert code.isdigit()
        assert 100000 <= int(code) <= 999999


def test_generated_codes_vary():
    assert len({generate_otp() for _ in range(50)}) > 1


def test_expiry_is_ten_minutes_after_issue():
    assert otp_expiry(ISSUED) == ISSUED + timedelta(minutes=10)


def test_expiry_boundary():
    expires_at = otp_expiry(ISSUED)
    assert not is_expired(expires_at, expires_at - timedelta(seconds=1))
    assert not is_expired(expires_at, expires_at)
    assert is_expired(expires_at, expires_at + timedelta(seconds=1))


def test_codes_match_is_exact():
    assert codes_match("123456", "123456")
    assert not codes_match("123457", "123456")
    assert not codes_match(" 123456", "123456")
    assert not codes_match("12345", "123456")
