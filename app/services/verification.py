"""
OTP verification.

Checks run in a fixed order and the first failure is reported:
already verified, then expired, then wrong code. On success the customer is
flipped to verified and the campaign's customer_count is incremented in the same
transaction, so the counter cannot drift from the number of verified customers.
"""
from datetime import datetime
from sqlalchemy.orm import Session
from typing import Optional, Union
import logging
import uuid

from app.core.exceptions import AlreadyVerified, CodeExpired, InvalidCode, ValidationError
from app.core.otp import codes_match, is_expired, utcnow
from app.models.campaign import Campaign
from app.models.customer import Customer
from app.services.campaigns import require_operator
from app.services.registration import find_customer
from app.utils.text import clean_str

logger = logging.getLogger(__name__)


def verify_customer(
    db: Session,
    campaign_id: Union[str, uuid.UUID],
    phone: Optional[str],
    otp: Optional[str],
    operator_id: str,
    now: Optional[datetime] = None,
) -> Customer:
    operator_id = require_operator(operator_id)
    phone = clean_str(phone)
    # The submitted code is compared as sent; only a missing value is rejected here
    if not phone or otp is None or otp == "":
        raise ValidationError("Phone number and OTP are required")

    customer = find_customer(db, campaign_id, phone, operator_id)
    now = now or utcnow()

    if customer.is_verified:
        raise AlreadyVerified()
    if is_expired(customer.otp_expires_at, now):
        raise CodeExpired()
    if not codes_match(str(otp), customer.otp):
        logger.info(f"Invalid OTP submitted for customer {customer.id}")
        raise InvalidCode()

    try:
        # Conditional flip: a concurrent verifier that got here first leaves nothing to update
        updated = db.query(Customer).filter(
            Customer.id == customer.id,
            Customer.is_verified.is_(False)
        ).update(
            {Customer.is_verified: True, Customer.verified_at: now},
            synchronize_session=False,
        )
        if updated == 0:
            db.rollback()
            raise AlreadyVerified()

        db.query(Campaign).filter(
            Campaign.id == customer.campaign_id,
            Campaign.owner_id == operator_id
        ).update(
            {Campaign.customer_count: Campaign.customer_count + 1, Campaign.updated_at: now},
            synchronize_session=False,
        )
        db.commit()
    except AlreadyVerified:
        raise
    except Exception:
        db.rollback()
        raise

    db.refresh(customer)
    logger.info(f"Customer {customer.id} verified for campaign {customer.campaign_id}")
    return customer
