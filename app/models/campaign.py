from sqlalchemy import Column, String, DateTime, Integer, Uuid
import uuid
from app.core.otp import utcnow
from app.db.session import Base


class Campaign(Base):
    __tablename__ = "campaigns"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    owner_id = Column(String, nullable=False, index=True)  # Operator id from the identity provider
    name = Column(String, nullable=False)
    customer_count = Column(Integer, default=0, nullable=False)  # Verified customers only
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
