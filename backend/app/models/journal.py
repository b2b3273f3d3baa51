"""Journal (blog) post and section SQLAlchemy models."""

from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, ForeignKey, JSON
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.database import Base


class JournalPost(Base):
    __tablename__ = "journal_post"

    post_id = Column(Integer, primary_key=True, autoincrement=True)
    slug = Column(String(200), unique=True, nullable=False)
    title = Column(String(200), nullable=False)
    subtitle = Column(String(300), nullable=False, default="")
    hero_image = Column(String(1000), nullable=False, default="")
    thumbnail_image = Column(String(1000), nullable=False, default="")
    intro = Column(Text, nullable=False, default="")
    excerpt = Column(Text, nullable=False, default="")
    gallery = Column(JSON, nullable=False, default=list)
    conclusion_title = Column(String(200), nullable=False, default="")
    conclusion_content = Column(Text, nullable=False, default="")
    conclusion_image = Column(String(1000), nullable=False, default="")
    published = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    sections = relationship(
        "JournalSection",
        back_populates="post",
        cascade="all, delete-orphan",
        order_by="JournalSection.order",
    )


class JournalSection(Base):
    __tablename__ = "journal_section"

    section_id = Column(Integer, primary_key=True, autoincrement=True)
    post_id = Column(Integer, ForeignKey("journal_post.post_id", ondelete="CASCADE"), nullable=False)
    title = Column(String(200), nullable=False, default="")
    content = Column(Text, nullable=False, default="")
    image = Column(String(1000), nullable=False, default="")
    reverse = Column(Boolean, nullable=False, default=False)
    order = Column(Integer, nullable=False, default=0)

    post = relationship("JournalPost", back_populates="sections")
