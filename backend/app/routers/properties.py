"""Public property API router. Validates query parameters and delegates to the service layer."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.property import PropertyCreate, PropertyDetailOut, PropertyListOut, PropertyOut
from app.services import property_service

router = APIRouter(prefix="/api/properties", tags=["properties"])


@router.get("", response_model=PropertyListOut)
def list_properties(
    category: str | None = Query(None),
    search: str | None = Query(None, max_length=100),
    sort: str = Query(property_service.SORT_FEATURED),
    min_price: float | None = Query(None, alias="minPrice", ge=0),
    max_price: float | None = Query(None, alias="maxPrice", ge=0),
    guests: int | None = Query(None, ge=1),
    property_type: str | None = Query(None, alias="type"),
    page: int = Query(1, ge=1),
    limit: int | None = Query(None, ge=1, le=100),
    db: Session = Depends(get_db),
):
    return property_service.list_published_properties(
        db,
        category=category,
        search=search,
        sort=sort,
        min_price=min_price,
        max_price=max_price,
        guests=guests,
        property_type=property_type,
        page=page,
        limit=limit,
    )


@router.post("", response_model=PropertyOut)
def create_property(
    data: PropertyCreate,
    db: Session = Depends(get_db),
    _admin: str = Depends(require_admin),
):
    return property_service.create_property(db, data)


@router.get("/{slug}", response_model=PropertyDetailOut)
def get_property(slug: str, db: Session = Depends(get_db)):
    row = property_service.get_published_property(db, slug)
    return {
        "property": row,
        "similar_properties": property_service.get_similar_properties(db, row),
    }
