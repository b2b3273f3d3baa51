"""Pydantic contracts for CMS image slots."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class CMSImageOut(BaseModel):
    image_id: int
    section_id: str
    url: str
    alt_text: str
    file_name: Optional[str] = None
    is_active: bool
    uploaded_at: datetime

    model_config = {"from_attributes": True}


class CMSSlotOut(BaseModel):
    url: str
    alt_text: str
