"""SQLAlchemy model package."""

from app.models.property import Property, PropertyImage, PropertyAmenity
from app.models.journal import JournalPost, JournalSection
from app.models.cms_image import CMSImage

__all__ = [
    "Property", "PropertyImage", "PropertyAmenity",
    "JournalPost", "JournalSection",
    "CMSImage",
]
