"""Service layer package."""

from app.services import (
    auth_service,
    blob_storage,
    property_service,
    journal_service,
    cms_image_service,
)
