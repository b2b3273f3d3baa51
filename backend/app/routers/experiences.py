"""Experience category API router backing the experiences pages."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.experience import ExperienceCategoryDetailOut, ExperienceCategoryOut
from app.schemas.property import PropertyOut
from app.services import cms_image_service, property_service
from app.utils.catalog import EXPERIENCE_CATEGORIES

router = APIRouter(prefix="/api/experiences", tags=["experiences"])


@router.get("", response_model=List[ExperienceCategoryOut])
def list_categories(db: Session = Depends(get_db)):
    slots = cms_image_service.resolve_slots(
        db, [info["image_section"] for info in EXPERIENCE_CATEGORIES.values()]
    )
    return [
        ExperienceCategoryOut(
            slug=slug,
            name=info["name"],
            description=info["description"],
            image=slots.get(info["image_section"]),
        )
        for slug, info in EXPERIENCE_CATEGORIES.items()
    ]


@router.get("/{category}", response_model=ExperienceCategoryDetailOut)
def get_category(category: str, db: Session = Depends(get_db)):
    info = EXPERIENCE_CATEGORIES.get(category)
    if not info:
        raise HTTPException(status_code=404, detail="Category not found")
    return ExperienceCategoryDetailOut(
        slug=category,
        name=info["name"],
        description=info["description"],
        image=cms_image_service.resolve_slot(db, info["image_section"]),
        properties=[
            PropertyOut.model_validate(row)
            for row in property_service.list_category_properties(db, category)
        ],
    )
