"""Admin property API router. Every route requires an admin session."""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.property import PropertyCreate, PropertyOptionsOut, PropertyOut, PropertyUpdate
from app.services import property_service
from app.utils.catalog import (
    CANCELLATION_POLICIES,
    COMMON_AMENITIES,
    COUNTRIES,
    EXPERIENCE_CATEGORIES,
    PROPERTY_TYPES,
)

router = APIRouter(
    prefix="/api/admin/properties",
    tags=["admin-properties"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=List[PropertyOut])
def list_properties(
    category: str | None = Query(None),
    status: str | None = Query(None, pattern="^(published|draft|all)$"),
    search: str | None = Query(None, max_length=100),
    db: Session = Depends(get_db),
):
    return property_service.list_admin_properties(db, category=category, status=status, search=search)


@router.post("", response_model=PropertyOut)
def create_property(data: PropertyCreate, db: Session = Depends(get_db)):
    return property_service.create_property(db, data)


@router.get("/options", response_model=PropertyOptionsOut)
def property_options():
    return {
        "categories": [
            {"slug": slug, "name": info["name"]} for slug, info in EXPERIENCE_CATEGORIES.items()
        ],
        "property_types": PROPERTY_TYPES,
        "cancellation_policies": CANCELLATION_POLICIES,
        "common_amenities": COMMON_AMENITIES,
        "countries": COUNTRIES,
    }


@router.get("/{property_id:int}", response_model=PropertyOut)
def get_property(property_id: int, db: Session = Depends(get_db)):
    return property_service.get_property(db, property_id)


@router.put("/{property_id:int}", response_model=PropertyOut)
def update_property(property_id: int, data: PropertyUpdate, db: Session = Depends(get_db)):
    return property_service.update_property(db, property_id, data)


@router.delete("/{property_id:int}")
def delete_property(property_id: int, db: Session = Depends(get_db)):
    property_service.delete_property(db, property_id)
    return {"success": True}
