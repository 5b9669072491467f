"""
Campaigns API
Campaign CRUD, customer registration and OTP verification, all scoped to the calling operator.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from app.db.session import get_db
from app.api.deps import get_current_operator
from app.core.config import settings
from app.core.rate_limit import check_rate_limit
from app.schemas.operator import Operator
from app.schemas.campaign import Campaign as CampaignSchema, CampaignCreate
from app.schemas.customer import (
    Customer as CustomerSchema,
    CustomerRegister,
    CustomerResend,
    CustomerVerify,
    RegistrationResponse,
    VerificationResponse,
    VerifiedCustomer,
)
from app.services import campaigns as campaign_service
from app.services.registration import register_customer, reissue_code
from app.services.verification import verify_customer
from app.utils.text import clean_str

router = APIRouter()


@router.get("", response_model=List[CampaignSchema])
def list_campaigns(
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """List the operator's campaigns, newest first"""
    return campaign_service.list_campaigns(db, current_operator.id)


@router.post("", response_model=CampaignSchema, status_code=status.HTTP_201_CREATED)
def create_campaign(
    campaign_data: CampaignCreate,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """Create a new campaign"""
    return campaign_service.create_campaign(db, campaign_data.name, current_operator.id)


@router.get("/{campaign_id}", response_model=CampaignSchema)
def get_campaign(
    campaign_id: str,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    return campaign_service.get_campaign(db, campaign_id, current_operator.id)


@router.get("/{campaign_id}/customers", response_model=List[CustomerSchema])
def list_customers(
    campaign_id: str,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """List customers registered for a campaign, newest first"""
    return campaign_service.list_customers(db, campaign_id, current_operator.id)


@router.post("/{campaign_id}/customers", response_model=RegistrationResponse, status_code=status.HTTP_201_CREATED)
def register(
    campaign_id: str,
    body: CustomerRegister,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """Register a phone number for a campaign and send it a one-time code"""
    customer = register_customer(db, campaign_id, body.phone, body.name, current_operator.id)
    return RegistrationResponse(
        message="Customer registered successfully. OTP sent.",
        customer_id=customer.id,
    )


@router.post("/{campaign_id}/customers/verify", response_model=VerificationResponse)
def verify(
    campaign_id: str,
    body: CustomerVerify,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """Verify a customer's one-time code"""
    phone = clean_str(body.phone)
    # Requests missing phone or code are rejected by the service without using up an attempt
    if phone and body.otp:
        check_rate_limit(
            f"verify:{current_operator.id}:{campaign_id}:{phone}",
            max_requests=settings.OTP_VERIFY_MAX_ATTEMPTS,
            window_seconds=settings.OTP_VERIFY_WINDOW_SECONDS,
        )
    customer = verify_customer(db, campaign_id, body.phone, body.otp, current_operator.id)
    return VerificationResponse(
        message="Customer verified successfully",
        customer=VerifiedCustomer.model_validate(customer, from_attributes=True),
    )


@router.post("/{campaign_id}/customers/resend", response_model=RegistrationResponse)
def resend(
    campaign_id: str,
    body: CustomerResend,
    db: Session = Depends(get_db),
    current_operator: Operator = Depends(get_current_operator)
):
    """Issue a fresh code to a customer who has not verified yet"""
    customer = reissue_code(db, campaign_id, body.phone, current_operator.id)
    return RegistrationResponse(
        message="A new OTP has been sent.",
        customer_id=customer.id,
    )
