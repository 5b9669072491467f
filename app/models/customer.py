from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, UniqueConstraint, Uuid
import uuid
from app.db.session import Base
from app.core.otp import utcnow


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    campaign_id = Column(Uuid(as_uuid=True), ForeignKey("campaigns.id"), nullable=False, index=True)
    owner_id = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=False)
    name = Column(String, nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    otp = Column(String, nullable=False)
    otp_expires_at = Column(DateTime, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    verified_at = Column(DateTime, nullable=True)

    # A phone number registers at most once per campaign
    __table_args__ = (
        UniqueConstraint("phone", "campaign_id", name="uq_customers_phone_campaign"),
    )
