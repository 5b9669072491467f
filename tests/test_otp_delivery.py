"""OTP delivery channels"""
import logging

import httpx
import pytest

from app.core.config import settings
from app.services.otp_delivery import (
    LogOtpSender,
    OtpDeliveryError,
    TwilioSmsSender,
    deliver_otp,
    get_otp_sender,
)


def test_log_sender_writes_code(caplog):
    with caplog.at_level(logging.INFO, logger="app.services.otp_delivery"):
        LogOtpSender().send("8130626713", "123456")
    assert "OTP for 8130626713: 123456" in caplog.text


def test_twilio_sender_posts_message():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["body"] = request.content.decode()
        seen["auth"] = request.headers.get("authorization")
        return httpx.Response(201, json={"sid": "SM123"})

    client = httpx.Client(transport=httpx.MockTransport(handler))
    TwilioSmsSender("AC123", "token", "+15550000000", client=client).send("+18130626713", "654321")

    assert seen["url"] == "https://api.twilio.com/2010-04-01/Accounts/AC123/Messages.json"
    assert "654321" in httpx.QueryParams(seen["body"])["Body"]
    assert httpx.QueryParams(seen["body"])["To"] == "+18130626713"
    assert seen["auth"].startswith("Basic ")


def test_twilio_sender_raises_on_error_status():
    client = httpx.Client(transport=httpx.MockTransport(lambda request: httpx.Response(400, text="bad number")))
    sender = TwilioSmsSender("AC123", "token", "+15550000000", client=client)
    with pytest.raises(OtpDeliveryError):
        sender.send("not-a-number", "654321")


def test_deliver_otp_reports_failure():
    class FailingSender:
        def send(self, phone, code):
            raise OtpDeliveryError("down")

    assert deliver_otp(FailingSender(), "8130626713", "123456") is False
    assert deliver_otp(LogOtpSender(), "8130626713", "123456") is True


def test_sender_selection(monkeypatch):
    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", None)
    assert isinstance(get_otp_sender(), LogOtpSender)

    monkeypatch.setattr(settings, "TWILIO_ACCOUNT_SID", "AC123")
    monkeypatch.setattr(settings, "TWILIO_AUTH_TOKEN", "token")
    monkeypatch.setattr(settings, "TWILIO_FROM_NUMBER", "+15550000000")
    assert isinstance(get_otp_sender(), TwilioSmsSender)


def test_twilio_sender_wraps_transport_errors():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = httpx.Client(transport=httpx.MockTransport(handler))
    sender = TwilioSmsSender("AC123", "token", "+15550000000", client=client)
    with pytest.raises(OtpDeliveryError):
        sender.send("+18130626713", "654321")


def test_twilio_sender_wraps_invalid_url():
    class InvalidUrlClient:
        def post(self, *args, **kwargs):
            raise httpx.InvalidURL("Invalid non-printable ASCII character in URL")

    sender = TwilioSmsSender("AC\x00123", "token", "+15550000000", client=InvalidUrlClient())
    with pytest.raises(OtpDeliveryError):
        sender.send("+18130626713", "654321")


def test_deliver_otp_contains_unexpected_errors(caplog):
    class BrokenSender:
        def send(self, phone, code):
            raise ValueError("unexpected")

    with caplog.at_level(logging.ERROR, logger="app.services.otp_delivery"):
        assert deliver_otp(BrokenSender(), "8130626713", "123456") is False
    assert "Unexpected error delivering OTP to 8130626713" in caplog.text
