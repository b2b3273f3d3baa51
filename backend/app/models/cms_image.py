"""CMS image slot model. One row per upload; the newest active row wins per section."""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, Index
from sqlalchemy.sql import func
from app.database import Base


class CMSImage(Base):
    __tablename__ = "cms_image"

    image_id = Column(Integer, primary_key=True, autoincrement=True)
    section_id = Column(String(100), nullable=False)  # e.g. hero-slide-1
    url = Column(String(1000), nullable=False)
    alt_text = Column(String(300), nullable=False, default="")
    file_name = Column(String(300))
    is_active = Column(Boolean, nullable=False, default=True)
    uploaded_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        Index("idx_cms_image_section", "section_id", "is_active", "uploaded_at"),
    )
