"""Property domain service layer: listing queries, slug handling and child-row writes."""

import math
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import or_
from sqlalchemy.orm import Session, selectinload

from app.config import settings
from app.models.property import Property, PropertyImage, PropertyAmenity
from app.schemas.property import (
    PropertyAmenityIn,
    PropertyCreate,
    PropertyImageIn,
    PropertyImageOut,
    PropertyOut,
    PropertyUpdate,
)
from app.utils.helpers import generate_slug, timestamp_suffix

SORT_FEATURED = "featured"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_NEWEST = "newest"

REQUIRED_FIELDS_MESSAGE = "Title, category, description, country, city, and nightly rate are required"

# Scalar columns copied from the payload as-is on update.
_SCALAR_FIELDS = (
    "title", "category_slug", "description", "property_type", "country", "city",
    "nearby_attractions", "max_guests", "bedrooms", "bathrooms", "nightly_rate",
    "service_fee_percent", "minimum_stay", "cancellation_policy", "blocked_dates",
    "instant_book", "is_published", "is_featured", "sort_order",
)
# Columns where an empty value is stored as NULL.
_NULLABLE_FIELDS = (
    "tagline", "address", "latitude", "longitude", "bed_configurations",
    "weekend_rate", "cleaning_fee",
)


def _with_children(query):
    return query.options(selectinload(Property.images), selectinload(Property.amenities))


def _order_by(sort: Optional[str]):
    if sort == SORT_PRICE_LOW:
        return [Property.nightly_rate.asc()]
    if sort == SORT_PRICE_HIGH:
        return [Property.nightly_rate.desc()]
    if sort == SORT_NEWEST:
        return [Property.created_at.desc(), Property.property_id.desc()]
    return [
        Property.is_featured.desc(),
        Property.sort_order.asc(),
        Property.created_at.desc(),
        Property.property_id.desc(),
    ]


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _search_filter(search: str, include_tagline: bool = True):
    pattern = f"%{_escape_like(search)}%"
    clauses = [
        Property.title.ilike(pattern, escape="\\"),
        Property.city.ilike(pattern, escape="\\"),
        Property.country.ilike(pattern, escape="\\"),
    ]
    if include_tagline:
        clauses.append(Property.tagline.ilike(pattern, escape="\\"))
    return or_(*clauses)


def list_published_properties(
    db: Session,
    *,
    category: Optional[str] = None,
    search: Optional[str] = None,
    sort: Optional[str] = SORT_FEATURED,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    guests: Optional[int] = None,
    property_type: Optional[str] = None,
    page: int = 1,
    limit: Optional[int] = None,
) -> dict:
    page = max(1, int(page or 1))
    limit = max(1, int(limit or settings.PROPERTY_PAGE_SIZE))

    q = db.query(Property).filter(Property.is_published == True)  # noqa: E712
    if category:
        q = q.filter(Property.category_slug == category)
    if search:
        q = q.filter(_search_filter(search))
    if min_price is not None:
        q = q.filter(Property.nightly_rate >= min_price)
    if max_price is not None:
        q = q.filter(Property.nightly_rate <= max_price)
    if guests is not None:
        q = q.filter(Property.max_guests >= guests)
    if property_type:
        q = q.filter(Property.property_type == property_type)

    total = q.count()
    rows = (
        _with_children(q)
        .order_by(*_order_by(sort))
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return {
        "properties": rows,
        "pagination": {
            "page": page,
            "limit": limit,
            "total": total,
            "total_pages": math.ceil(total / limit),
        },
    }


def list_admin_properties(
    db: Session,
    *,
    category: Optional[str] = None,
    status: Optional[str] = None,
    search: Optional[str] = None,
) -> list[Property]:
    q = db.query(Property)
    if category:
        q = q.filter(Property.category_slug == category)
    if status == "published":
        q = q.filter(Property.is_published == True)  # noqa: E712
    elif status == "draft":
        q = q.filter(Property.is_published == False)  # noqa: E712
    if search:
        q = q.filter(_search_filter(search, include_tagline=False))
    return _with_children(q).order_by(Property.created_at.desc(), Property.property_id.desc()).all()


def list_category_properties(db: Session, category_slug: str) -> list[Property]:
    q = db.query(Property).filter(
        Property.category_slug == category_slug,
        Property.is_published == True,  # noqa: E712
    )
    return _with_children(q).order_by(*_order_by(SORT_FEATURED)).all()


def get_property(db: Session, property_id: int) -> Property:
    row = _with_children(db.query(Property)).filter(Property.property_id == property_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Property not found")
    return row


def get_published_property(db: Session, slug: str) -> Property:
    row = (
        _with_children(db.query(Property))
        .filter(Property.slug == slug, Property.is_published == True)  # noqa: E712
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Property not found")
    return row


def get_similar_properties(db: Session, prop: Property, limit: Optional[int] = None) -> list[PropertyOut]:
    limit = limit or settings.SIMILAR_PROPERTY_LIMIT
    rows = (
        _with_children(db.query(Property))
        .filter(
            Property.category_slug == prop.category_slug,
            Property.is_published == True,  # noqa: E712
            Property.property_id != prop.property_id,
        )
        .order_by(Property.is_featured.desc(), Property.created_at.desc(), Property.property_id.desc())
        .limit(limit)
        .all()
    )
    similar = []
    for row in rows:
        item = PropertyOut.model_validate(row)
        item.images = [PropertyImageOut.model_validate(image) for image in row.images if image.is_featured][:1]
        similar.append(item)
    return similar


def _slug_exists(db: Session, slug: str, exclude_id: Optional[int] = None) -> bool:
    q = db.query(Property.property_id).filter(Property.slug == slug)
    if exclude_id is not None:
        q = q.filter(Property.property_id != exclude_id)
    return q.first() is not None


def resolve_unique_slug(db: Session, title: str, custom_slug: Optional[str] = None) -> str:
    slug = (custom_slug or "").strip() or generate_slug(title) or "property"
    if _slug_exists(db, slug):
        slug = f"{slug}-{timestamp_suffix()}"
    return slug


def _build_images(images: list[PropertyImageIn], first_is_featured: bool) -> list[PropertyImage]:
    rows = []
    for index, image in enumerate(images):
        featured = bool(image.is_featured) or (first_is_featured and index == 0)
        rows.append(
            PropertyImage(
                url=image.url,
                alt_text=image.alt_text or None,
                is_featured=featured,
                sort_order=index,
            )
        )
    return rows


def _build_amenities(amenities: list[PropertyAmenityIn]) -> list[PropertyAmenity]:
    return [PropertyAmenity(name=amenity.name, icon=amenity.icon or None) for amenity in amenities]


def create_property(db: Session, data: PropertyCreate) -> Property:
    if not (data.title and data.category_slug and data.description and data.country and data.city and data.nightly_rate):
        raise HTTPException(status_code=400, detail=REQUIRED_FIELDS_MESSAGE)

    row = Property(
        title=data.title,
        slug=resolve_unique_slug(db, data.title, data.slug),
        category_slug=data.category_slug,
        tagline=data.tagline or None,
        description=data.description,
        property_type=data.property_type or "villa",
        country=data.country,
        city=data.city,
        address=data.address or None,
        latitude=data.latitude,
        longitude=data.longitude,
        nearby_attractions=data.nearby_attractions or [],
        max_guests=data.max_guests or 2,
        bedrooms=data.bedrooms or 1,
        bathrooms=data.bathrooms or 1,
        bed_configurations=data.bed_configurations or None,
        nightly_rate=data.nightly_rate,
        weekend_rate=data.weekend_rate or None,
        cleaning_fee=data.cleaning_fee or None,
        service_fee_percent=data.service_fee_percent or 10,
        minimum_stay=data.minimum_stay or 1,
        cancellation_policy=data.cancellation_policy or "flexible",
        blocked_dates=data.blocked_dates or [],
        instant_book=bool(data.instant_book),
        is_published=bool(data.is_published),
        is_featured=bool(data.is_featured),
        sort_order=data.sort_order or 0,
    )
    row.images = _build_images(data.images or [], first_is_featured=True)
    row.amenities = _build_amenities(data.amenities or [])
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_property(db: Session, property_id: int, data: PropertyUpdate) -> Property:
    row = db.query(Property).filter(Property.property_id == property_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Property not found")

    payload = data.model_dump(exclude_unset=True)
    slug = payload.get("slug")
    if slug and slug != row.slug and _slug_exists(db, slug, exclude_id=row.property_id):
        raise HTTPException(status_code=400, detail="A property with this slug already exists")

    try:
        if "images" in payload:
            db.query(PropertyImage).filter(PropertyImage.property_id == property_id).delete(synchronize_session=False)
        if "amenities" in payload:
            db.query(PropertyAmenity).filter(PropertyAmenity.property_id == property_id).delete(synchronize_session=False)
        db.flush()
        db.expire(row, ["images", "amenities"])

        if slug:
            row.slug = slug
        for field in _SCALAR_FIELDS:
            if field in payload and payload[field] is not None:
                setattr(row, field, payload[field])
        for field in _NULLABLE_FIELDS:
            if field in payload:
                setattr(row, field, payload[field] or None)

        if "images" in payload:
            row.images = _build_images(data.images or [], first_is_featured=False)
        if "amenities" in payload:
            row.amenities = _build_amenities(data.amenities or [])
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return row


def delete_property(db: Session, property_id: int) -> None:
    row = db.query(Property).filter(Property.property_id == property_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Property not found")
    db.delete(row)
    db.commit()
