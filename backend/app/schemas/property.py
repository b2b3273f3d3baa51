"""Pydantic request/response contracts for properties."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel


class PropertyImageIn(BaseModel):
    url: str
    alt_text: Optional[str] = None
    is_featured: Optional[bool] = None


class PropertyAmenityIn(BaseModel):
    name: str
    icon: Optional[str] = None


class PropertyImageOut(BaseModel):
    image_id: int
    url: str
    alt_text: Optional[str] = None
    is_featured: bool
    sort_order: int

    model_config = {"from_attributes": True}


class PropertyAmenityOut(BaseModel):
    amenity_id: int
    name: str
    icon: Optional[str] = None

    model_config = {"from_attributes": True}


class PropertyWrite(BaseModel):
    """Shared create/update payload. Required-field rules live in the service layer."""

    title: Optional[str] = None
    slug: Optional[str] = None
    category_slug: Optional[str] = None
    tagline: Optional[str] = None
    description: Optional[str] = None
    property_type: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    nearby_attractions: Optional[list[str]] = None
    max_guests: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    bed_configurations: Optional[Any] = None
    nightly_rate: Optional[float] = None
    weekend_rate: Optional[float] = None
    cleaning_fee: Optional[float] = None
    service_fee_percent: Optional[float] = None
    minimum_stay: Optional[int] = None
    cancellation_policy: Optional[str] = None
    blocked_dates: Optional[list[str]] = None
    instant_book: Optional[bool] = None
    is_published: Optional[bool] = None
    is_featured: Optional[bool] = None
    sort_order: Optional[int] = None
    images: Optional[list[PropertyImageIn]] = None
    amenities: Optional[list[PropertyAmenityIn]] = None


class PropertyCreate(PropertyWrite):
    pass


class PropertyUpdate(PropertyWrite):
    pass


class PropertyOut(BaseModel):
    property_id: int
    title: str
    slug: str
    category_slug: str
    tagline: Optional[str] = None
    description: str
    property_type: str
    country: str
    city: str
    address: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    nearby_attractions: list[str] = []
    max_guests: int
    bedrooms: int
    bathrooms: int
    bed_configurations: Optional[Any] = None
    nightly_rate: float
    weekend_rate: Optional[float] = None
    cleaning_fee: Optional[float] = None
    service_fee_percent: float
    minimum_stay: int
    cancellation_policy: str
    blocked_dates: list[str] = []
    instant_book: bool
    is_published: bool
    is_featured: bool
    sort_order: int
    created_at: datetime
    updated_at: Optional[datetime] = None
    images: list[PropertyImageOut] = []
    amenities: list[PropertyAmenityOut] = []

    model_config = {"from_attributes": True}


class PaginationOut(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PropertyListOut(BaseModel):
    properties: list[PropertyOut]
    pagination: PaginationOut


class PropertyDetailOut(BaseModel):
    property: PropertyOut
    similar_properties: list[PropertyOut]


class PropertyOptionsOut(BaseModel):
    categories: list[dict]
    property_types: list[str]
    cancellation_policies: list[dict]
    common_amenities: list[dict]
    countries: list[str]
