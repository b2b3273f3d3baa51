"""CMS image slot service: upload, listing, slot resolution and removal."""

import logging
from typing import Iterable, Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from app.models.cms_image import CMSImage
from app.services.blob_storage import BlobStorage, delete_blobs

logger = logging.getLogger(__name__)


def _newest_first(query):
    return query.order_by(CMSImage.uploaded_at.desc(), CMSImage.image_id.desc())


def list_active_images(db: Session, section_id: Optional[str] = None) -> list[CMSImage]:
    q = db.query(CMSImage).filter(CMSImage.is_active == True)  # noqa: E712
    if section_id:
        q = q.filter(CMSImage.section_id == section_id)
    return _newest_first(q).all()


def resolve_slot(db: Session, section_id: str) -> Optional[dict]:
    row = _newest_first(
        db.query(CMSImage).filter(
            CMSImage.section_id == section_id,
            CMSImage.is_active == True,  # noqa: E712
        )
    ).first()
    if not row:
        return None
    return {"url": row.url, "alt_text": row.alt_text or ""}


def resolve_slots(db: Session, section_ids: Iterable[str]) -> dict[str, Optional[dict]]:
    wanted = [section_id for section_id in dict.fromkeys(section_ids) if section_id]
    slots: dict[str, Optional[dict]] = {section_id: None for section_id in wanted}
    if not wanted:
        return slots
    rows = _newest_first(
        db.query(CMSImage).filter(
            CMSImage.section_id.in_(wanted),
            CMSImage.is_active == True,  # noqa: E712
        )
    ).all()
    for row in rows:
        if slots[row.section_id] is None:
            slots[row.section_id] = {"url": row.url, "alt_text": row.alt_text or ""}
    return slots


def upload_image(
    db: Session,
    storage: BlobStorage,
    *,
    section_id: str,
    filename: str,
    content: bytes,
    content_type: Optional[str] = None,
    alt_text: str = "",
) -> CMSImage:
    blob = storage.put(filename, content, content_type)
    row = CMSImage(
        section_id=section_id,
        url=blob.url,
        alt_text=alt_text or "",
        file_name=filename,
        is_active=True,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("[cms] stored image %s for slot %s", row.image_id, section_id)
    return row


def delete_image(db: Session, storage: BlobStorage, image_id: int) -> None:
    row = db.query(CMSImage).filter(CMSImage.image_id == image_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Image not found")
    if storage.is_managed(row.url):
        delete_blobs(storage, [row.url])
    db.delete(row)
    db.commit()
