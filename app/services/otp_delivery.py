"""
Deliver one-time codes to customers out of band.

Twilio SMS is used when TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_FROM_NUMBER
are all set. Otherwise codes are written to the application log, which is only
suitable for local development.
"""
from typing import Optional, Protocol
import logging
import httpx
from app.core.config import settings

logger = logging.getLogger(__name__)

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"


class OtpDeliveryError(Exception):
    pass


class OtpSender(Protocol):
    def send(self, phone: str, code: str) -> None:
        ...


def _otp_message(code: str) -> str:
    return f"Your verification code is {code}. It expires in {settings.OTP_EXPIRY_MINUTES} minutes."


class LogOtpSender:
    def send(self, phone: str, code: str) -> None:
        logger.info(f"OTP for {phone}: {code}")


class TwilioSmsSender:
    def __init__(self, account_sid: str, auth_token: str, from_number: str, *, client: Optional[httpx.Client] = None):
        self.account_sid = account_sid
        self.auth_token = auth_token
        self.from_number = from_number
        self._client = client

    def send(self, phone: str, code: str) -> None:
        data = {
            "To": phone,
            "From": self.from_number,
            "Body": _otp_message(code),
        }
        url = TWILIO_MESSAGES_URL.format(sid=self.account_sid)
        auth = (self.account_sid, self.auth_token)
        try:
            if self._client is not None:
                resp = self._client.post(url, data=data, auth=auth, timeout=15.0)
            else:
                resp = httpx.post(url, data=data, auth=auth, timeout=15.0)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise OtpDeliveryError(f"SMS request failed: {e}") from e

        if resp.status_code not in (200, 201):
            raise OtpDeliveryError(f"SMS provider returned {resp.status_code}: {resp.text}")
        logger.info(f"OTP SMS queued for {phone}")


def get_otp_sender() -> OtpSender:
    sid = (settings.TWILIO_ACCOUNT_SID or "").strip()
    token = (settings.TWILIO_AUTH_TOKEN or "").strip()
    from_number = (settings.TWILIO_FROM_NUMBER or "").strip()
    if sid and token and from_number:
        return TwilioSmsSender(sid, token, from_number)
    return LogOtpSender()


def deliver_otp(sender: OtpSender, phone: str, code: str) -> bool:
    """
    Hand a code to the delivery channel. Returns False on failure; the
    registration stays in place and the code can be reissued.
    """
    try:
        sender.send(phone, code)
        return True
    except OtpDeliveryError as e:
        logger.error(f"Failed to deliver OTP to {phone}: {e}")
        return False
    except Exception:
        # The registration is already committed; a sender bug must not turn it into a 500
        logger.exception(f"Unexpected error delivering OTP to {phone}")
        return False
