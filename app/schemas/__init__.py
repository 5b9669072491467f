from app.schemas.campaign import Campaign, CampaignCreate
from app.schemas.customer import (
    Customer, CustomerRegister, CustomerVerify, CustomerResend,
    VerifiedCustomer, RegistrationResponse, VerificationResponse
)
from app.schemas.operator import Operator

__all__ = [
    "Campaign", "CampaignCreate",
    "Customer", "CustomerRegister", "CustomerVerify", "CustomerResend",
    "VerifiedCustomer", "RegistrationResponse", "VerificationResponse",
    "Operator"
]
