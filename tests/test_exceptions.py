"""Error taxonomy"""
from app.core.exceptions import CodeExpired, InternalFailure, NotAuthenticated, NotFound


def test_default_detail_and_status():
    assert NotFound().detail == "Not found"
    assert NotFound().status_code == 404
    assert NotAuthenticated().status_code == 401
    assert CodeExpired().detail == "OTP has expired"
    assert InternalFailure().status_code == 500


def test_explicit_detail_overrides_default():
    assert NotFound("Campaign not found").detail == "Campaign not found"
    assert str(NotFound("Campaign not found")) == "Campaign not found"
    assert NotFound(None).detail == "Not found"
