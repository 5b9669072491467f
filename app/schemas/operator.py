from pydantic import BaseModel
from typing import Optional


class Operator(BaseModel):
    """Authenticated caller, as asserted by the identity provider's token."""
    id: str
    email: Optional[str] = None
