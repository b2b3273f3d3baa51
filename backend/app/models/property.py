"""Property listing SQLAlchemy models with their images and amenities."""

from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime, ForeignKey, JSON, Index
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class Property(Base):
    __tablename__ = "property"

    property_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(200), nullable=False)
    slug = Column(String(200), unique=True, nullable=False)
    category_slug = Column(String(100), nullable=False)
    tagline = Column(String(300))
    description = Column(Text, nullable=False)
    property_type = Column(String(50), nullable=False, default="villa")

    # Location
    country = Column(String(100), nullable=False)
    city = Column(String(100), nullable=False)
    address = Column(String(300))
    latitude = Column(Float)
    longitude = Column(Float)
    nearby_attractions = Column(JSON, nullable=False, default=list)

    # Capacity
    max_guests = Column(Integer, nullable=False, default=2)
    bedrooms = Column(Integer, nullable=False, default=1)
    bathrooms = Column(Integer, nullable=False, default=1)
    bed_configurations = Column(JSON)

    # Pricing
    nightly_rate = Column(Float, nullable=False)
    weekend_rate = Column(Float)
    cleaning_fee = Column(Float)
    service_fee_percent = Column(Float, nullable=False, default=10)

    # Policies
    minimum_stay = Column(Integer, nullable=False, default=1)
    cancellation_policy = Column(String(30), nullable=False, default="flexible")
    blocked_dates = Column(JSON, nullable=False, default=list)
    instant_book = Column(Boolean, nullable=False, default=False)

    is_published = Column(Boolean, nullable=False, default=False)
    is_featured = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    images = relationship(
        "PropertyImage",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="PropertyImage.sort_order",
    )
    amenities = relationship(
        "PropertyAmenity",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="PropertyAmenity.amenity_id",
    )

    __table_args__ = (
        Index("idx_property_category", "category_slug", "is_published"),
    )


class PropertyImage(Base):
    __tablename__ = "property_image"

    image_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, ForeignKey("property.property_id", ondelete="CASCADE"), nullable=False)
    url = Column(String(1000), nullable=False)
    alt_text = Column(String(300))
    is_featured = Column(Boolean, nullable=False, default=False)
    sort_order = Column(Integer, nullable=False, default=0)

    property = relationship("Property", back_populates="images")


class PropertyAmenity(Base):
    __tablename__ = "property_amenity"

    amenity_id = Column(Integer, primary_key=True, autoincrement=True)
    property_id = Column(Integer, ForeignKey("property.property_id", ondelete="CASCADE"), nullable=False)
    name = Column(String(100), nullable=False)
    icon = Column(String(50))

    property = relationship("Property", back_populates="amenities")
