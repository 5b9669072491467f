from app.models.campaign import Campaign
from app.models.customer import Customer

__all__ = ["Campaign", "Customer"]
