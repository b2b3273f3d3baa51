"""Admin journal API router. Every route requires an admin session."""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.journal import JournalPostCreate, JournalPostOut, JournalPostUpdate
from app.services import journal_service
from app.services.blob_storage import BlobStorage, get_blob_storage

router = APIRouter(
    prefix="/api/admin/journal",
    tags=["admin-journal"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=List[JournalPostOut])
def list_posts(db: Session = Depends(get_db)):
    return journal_service.list_posts(db)


@router.post("", response_model=JournalPostOut)
def create_post(data: JournalPostCreate, db: Session = Depends(get_db)):
    return journal_service.create_post(db, data)


@router.get("/{post_id:int}", response_model=JournalPostOut)
def get_post(post_id: int, db: Session = Depends(get_db)):
    return journal_service.get_post(db, post_id)


@router.put("/{post_id:int}", response_model=JournalPostOut)
def update_post(post_id: int, data: JournalPostUpdate, db: Session = Depends(get_db)):
    return journal_service.update_post(db, post_id, data)


@router.delete("/{post_id:int}")
def delete_post(
    post_id: int,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
):
    journal_service.delete_post(db, post_id, storage)
    return {"success": True}
