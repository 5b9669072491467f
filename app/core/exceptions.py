"""
Error taxonomy for campaign and customer operations.

Services raise these; app.main turns them into JSON responses with the
status code carried on the class. Anything else reaching the app is treated
as an internal failure and reported without detail.
"""
from fastapi import status
from typing import Optional


class CampaignServiceError(Exception):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request"

    def __init__(self, detail: Optional[str] = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class NotAuthenticated(CampaignServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"


class ValidationError(CampaignServiceError):
    default_detail = "Invalid request"


class DuplicateRegistration(CampaignServiceError):
    default_detail = "Customer already registered for this campaign"


class NotFound(CampaignServiceError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found"


class AlreadyVerified(CampaignServiceError):
    default_detail = "Customer already verified"


class CodeExpired(CampaignServiceError):
    default_detail = "OTP has expired"


class InvalidCode(CampaignServiceError):
    default_detail = "Invalid OTP"


class InternalFailure(CampaignServiceError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Internal server error"
