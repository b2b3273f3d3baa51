"""Pydantic request/response contracts for journal posts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class JournalSectionIn(BaseModel):
    title: str = ""
    content: str = ""
    image: Optional[str] = None
    reverse: Optional[bool] = None


class JournalSectionOut(BaseModel):
    section_id: int
    title: str
    content: str
    image: str
    reverse: bool
    order: int

    model_config = {"from_attributes": True}


class JournalPostWrite(BaseModel):
    slug: Optional[str] = None
    title: Optional[str] = None
    subtitle: Optional[str] = None
    hero_image: Optional[str] = None
    thumbnail_image: Optional[str] = None
    intro: Optional[str] = None
    excerpt: Optional[str] = None
    gallery: Optional[list[str]] = None
    conclusion_title: Optional[str] = None
    conclusion_content: Optional[str] = None
    conclusion_image: Optional[str] = None
    published: Optional[bool] = None
    sections: Optional[list[JournalSectionIn]] = None


class JournalPostCreate(JournalPostWrite):
    pass


class JournalPostUpdate(JournalPostWrite):
    pass


class JournalPostOut(BaseModel):
    post_id: int
    slug: str
    title: str
    subtitle: str
    hero_image: str
    thumbnail_image: str
    intro: str
    excerpt: str
    gallery: list[str] = []
    conclusion_title: str
    conclusion_content: str
    conclusion_image: str
    published: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    sections: list[JournalSectionOut] = []

    model_config = {"from_attributes": True}
