from pydantic import BaseModel
from datetime import datetime
from typing import Optional
import uuid


class CustomerRegister(BaseModel):
    phone: Optional[str] = None
    name: Optional[str] = None


class CustomerVerify(BaseModel):
    phone: Optional[str] = None
    otp: Optional[str] = None


class CustomerResend(BaseModel):
    phone: Optional[str] = None


class Customer(BaseModel):
    """Customer as listed to the operator. The stored code is never exposed."""
    id: uuid.UUID
    campaign_id: uuid.UUID
    phone: str
    name: Optional[str] = None
    is_verified: bool
    otp_expires_at: datetime
    created_at: datetime
    verified_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class VerifiedCustomer(BaseModel):
    id: uuid.UUID
    phone: str
    name: Optional[str] = None
    is_verified: bool
    verified_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class RegistrationResponse(BaseModel):
    message: str
    customer_id: uuid.UUID


class VerificationResponse(BaseModel):
    message: str
    customer: VerifiedCustomer
