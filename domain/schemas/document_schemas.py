from datetime import datetime
from typing import Optional

from domain.schemas.base import CamelModel


class DocumentResponse(CamelModel):
    """Schema for an uploaded document record"""

    id: str
    user_id: str
    name: str
    type: str
    url: str
    size: int
    created_at: Optional[datetime] = None
