"""
Campaign creation and owner-scoped lookups.

Records that exist but belong to another operator are reported exactly like
records that do not exist.
"""
from sqlalchemy.orm import Session
from sqlalchemy import desc
from typing import List, Optional, Union
import logging
import uuid

from app.core.exceptions import NotAuthenticated, NotFound, ValidationError
from app.models.campaign import Campaign
from app.models.customer import Customer
from app.utils.text import clean_str

logger = logging.getLogger(__name__)


def require_operator(operator_id: Optional[str]) -> str:
    if not operator_id:
        raise NotAuthenticated()
    return operator_id


def parse_campaign_id(campaign_id: Union[str, uuid.UUID]) -> uuid.UUID:
    """Malformed ids cannot match any campaign, so they are NotFound too."""
    if isinstance(campaign_id, uuid.UUID):
        return campaign_id
    try:
        return uuid.UUID(str(campaign_id))
    except (ValueError, TypeError):
        raise NotFound("Campaign not found")


def create_campaign(db: Session, name: Optional[str], operator_id: str) -> Campaign:
    operator_id = require_operator(operator_id)
    name = clean_str(name)
    if not name:
        raise ValidationError("Campaign name is required")

    campaign = Campaign(name=name, owner_id=operator_id, customer_count=0)
    db.add(campaign)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(campaign)
    logger.info(f"Campaign {campaign.id} created by operator {operator_id}")
    return campaign


def list_campaigns(db: Session, operator_id: str) -> List[Campaign]:
    operator_id = require_operator(operator_id)
    return (
        db.query(Campaign)
        .filter(Campaign.owner_id == operator_id)
        .order_by(desc(Campaign.created_at))
        .all()
    )


def get_campaign(db: Session, campaign_id: Union[str, uuid.UUID], operator_id: str) -> Campaign:
    operator_id = require_operator(operator_id)
    campaign = db.query(Campaign).filter(
        Campaign.id == parse_campaign_id(campaign_id),
        Campaign.owner_id == operator_id
    ).first()
    if not campaign:
        raise NotFound("Campaign not found")
    return campaign


def list_customers(db: Session, campaign_id: Union[str, uuid.UUID], operator_id: str) -> List[Customer]:
    campaign = get_campaign(db, campaign_id, operator_id)
    return (
        db.query(Customer)
        .filter(
            Customer.campaign_id == campaign.id,
            Customer.owner_id == operator_id
        )
        .order_by(desc(Customer.created_at))
        .all()
    )
