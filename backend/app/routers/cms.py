"""Public CMS slot lookups used by the page templates."""

from typing import Dict, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.cms_image import CMSSlotOut
from app.services import cms_image_service

router = APIRouter(prefix="/api/cms", tags=["cms"])


@router.get("/images", response_model=Dict[str, Optional[CMSSlotOut]])
def resolve_slots(
    sections: str = Query(..., min_length=1, description="Comma separated section ids"),
    db: Session = Depends(get_db),
):
    section_ids = [part.strip() for part in sections.split(",")]
    return cms_image_service.resolve_slots(db, section_ids)


@router.get("/images/{section_id}", response_model=Optional[CMSSlotOut])
def resolve_slot(section_id: str, db: Session = Depends(get_db)):
    return cms_image_service.resolve_slot(db, section_id)
