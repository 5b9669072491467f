from pydantic import BaseModel
from datetime import datetime
from typing import Optional
import uuid


class CampaignCreate(BaseModel):
    # Optional here so a missing name is reported as 400 by the service, not 422
    name: Optional[str] = None


class Campaign(BaseModel):
    id: uuid.UUID
    name: str
    owner_id: str
    customer_count: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
