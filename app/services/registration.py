"""
Customer registration and code reissue.

A registration stores a fresh six-digit code with a ten minute expiry and hands
the code to the delivery channel. A phone number registers at most once per
campaign; an unverified customer whose code expired gets a new code through
reissue_code rather than a second registration.
"""
from datetime import datetime
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import Optional, Union
import logging
import uuid

from app.core.exceptions import AlreadyVerified, DuplicateRegistration, NotFound, ValidationError
from app.core.otp import generate_otp, otp_expiry, utcnow
from app.models.customer import Customer
from app.services.campaigns import get_campaign, parse_campaign_id, require_operator
from app.services.otp_delivery import OtpSender, deliver_otp, get_otp_sender
from app.utils.text import clean_str

logger = logging.getLogger(__name__)


def register_customer(
    db: Session,
    campaign_id: Union[str, uuid.UUID],
    phone: Optional[str],
    name: Optional[str],
    operator_id: str,
    sender: Optional[OtpSender] = None,
    now: Optional[datetime] = None,
) -> Customer:
    operator_id = require_operator(operator_id)
    phone = clean_str(phone)
    if not phone:
        raise ValidationError("Phone number is required")

    campaign = get_campaign(db, campaign_id, operator_id)

    existing = db.query(Customer).filter(
        Customer.phone == phone,
        Customer.campaign_id == campaign.id
    ).first()
    if existing:
        raise DuplicateRegistration()

    now = now or utcnow()
    customer = Customer(
        phone=phone,
        name=clean_str(name),
        campaign_id=campaign.id,
        owner_id=operator_id,
        is_verified=False,
        otp=generate_otp(),
        otp_expires_at=otp_expiry(now),
        created_at=now,
    )
    db.add(customer)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same pair
        db.rollback()
        raise DuplicateRegistration()
    except Exception:
        db.rollback()
        raise
    db.refresh(customer)

    logger.info(f"Customer {customer.id} registered for campaign {campaign.id}")
    deliver_otp(sender or get_otp_sender(), customer.phone, customer.otp)
    return customer


def find_customer(db: Session, campaign_id: Union[str, uuid.UUID], phone: str, operator_id: str) -> Customer:
    """Owner-scoped lookup by (phone, campaign)."""
    customer = db.query(Customer).filter(
        Customer.phone == phone,
        Customer.campaign_id == parse_campaign_id(campaign_id),
        Customer.owner_id == operator_id
    ).first()
    if not customer:
        raise NotFound("Customer not found")
    return customer


def reissue_code(
    db: Session,
    campaign_id: Union[str, uuid.UUID],
    phone: Optional[str],
    operator_id: str,
    sender: Optional[OtpSender] = None,
    now: Optional[datetime] = None,
) -> Customer:
    """Replace an unverified customer's code and expiry in place."""
    operator_id = require_operator(operator_id)
    phone = clean_str(phone)
    if not phone:
        raise ValidationError("Phone number is required")

    customer = find_customer(db, campaign_id, phone, operator_id)
    if customer.is_verified:
        raise AlreadyVerified()

    customer.otp = generate_otp()
    customer.otp_expires_at = otp_expiry(now or utcnow())
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(customer)

    logger.info(f"OTP reissued for customer {customer.id}")
    deliver_otp(sender or get_otp_sender(), customer.phone, customer.otp)
    return customer
