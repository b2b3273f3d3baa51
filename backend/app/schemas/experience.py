"""Experience category page contracts."""

from typing import Optional

from pydantic import BaseModel

from app.schemas.cms_image import CMSSlotOut
from app.schemas.property import PropertyOut


class ExperienceCategoryOut(BaseModel):
    slug: str
    name: str
    description: str
    image: Optional[CMSSlotOut] = None


class ExperienceCategoryDetailOut(ExperienceCategoryOut):
    properties: list[PropertyOut]
