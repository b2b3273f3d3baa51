"""Public journal API router. Only published posts are visible."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.journal import JournalPostOut
from app.services import journal_service

router = APIRouter(prefix="/api/journal", tags=["journal"])


@router.get("", response_model=List[JournalPostOut])
def list_posts(db: Session = Depends(get_db)):
    return journal_service.list_posts(db, published_only=True)


@router.get("/{slug}", response_model=JournalPostOut)
def get_post(slug: str, db: Session = Depends(get_db)):
    return journal_service.get_published_post(db, slug)
