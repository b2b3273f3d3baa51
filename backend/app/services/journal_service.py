"""Journal post service layer: section replacement and blob cleanup on delete."""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session, selectinload

from app.models.journal import JournalPost, JournalSection
from app.schemas.journal import JournalPostCreate, JournalPostUpdate, JournalSectionIn
from app.services.blob_storage import BlobStorage, delete_blobs, managed_urls

logger = logging.getLogger(__name__)

# Fields that keep their stored value when the update payload omits them or sends null.
_KEEP_IF_NONE_FIELDS = (
    "subtitle", "hero_image", "thumbnail_image", "intro", "excerpt", "gallery",
    "conclusion_title", "conclusion_content", "conclusion_image", "published",
)


def _with_sections(query):
    return query.options(selectinload(JournalPost.sections))


def _build_sections(sections: list[JournalSectionIn]) -> list[JournalSection]:
    return [
        JournalSection(
            title=section.title,
            content=section.content,
            image=section.image or "",
            reverse=bool(section.reverse),
            order=index,
        )
        for index, section in enumerate(sections)
    ]


def _slug_taken(db: Session, slug: str, exclude_id: Optional[int] = None) -> bool:
    q = db.query(JournalPost.post_id).filter(JournalPost.slug == slug)
    if exclude_id is not None:
        q = q.filter(JournalPost.post_id != exclude_id)
    return q.first() is not None


def list_posts(db: Session, published_only: bool = False) -> list[JournalPost]:
    q = _with_sections(db.query(JournalPost))
    if published_only:
        q = q.filter(JournalPost.published == True)  # noqa: E712
    return q.order_by(JournalPost.created_at.desc(), JournalPost.post_id.desc()).all()


def get_post(db: Session, post_id: int) -> JournalPost:
    row = _with_sections(db.query(JournalPost)).filter(JournalPost.post_id == post_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Post not found")
    return row


def get_published_post(db: Session, slug: str) -> JournalPost:
    row = (
        _with_sections(db.query(JournalPost))
        .filter(JournalPost.slug == slug, JournalPost.published == True)  # noqa: E712
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Post not found")
    return row


def create_post(db: Session, data: JournalPostCreate) -> JournalPost:
    if not data.slug or not data.title:
        raise HTTPException(status_code=400, detail="Slug and title are required")
    if _slug_taken(db, data.slug):
        raise HTTPException(status_code=400, detail="A post with this slug already exists")

    row = JournalPost(
        slug=data.slug,
        title=data.title,
        subtitle=data.subtitle or "",
        hero_image=data.hero_image or "",
        thumbnail_image=data.thumbnail_image or "",
        intro=data.intro or "",
        excerpt=data.excerpt or "",
        gallery=data.gallery or [],
        conclusion_title=data.conclusion_title or "",
        conclusion_content=data.conclusion_content or "",
        conclusion_image=data.conclusion_image or "",
        published=bool(data.published),
    )
    row.sections = _build_sections(data.sections or [])
    db.add(row)
    db.commit()
    db.refresh(row)
    return row


def update_post(db: Session, post_id: int, data: JournalPostUpdate) -> JournalPost:
    row = db.query(JournalPost).filter(JournalPost.post_id == post_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Post not found")

    if data.slug and data.slug != row.slug and _slug_taken(db, data.slug, exclude_id=row.post_id):
        raise HTTPException(status_code=400, detail="A post with this slug already exists")

    try:
        if data.sections is not None:
            db.query(JournalSection).filter(JournalSection.post_id == post_id).delete(synchronize_session=False)
            db.flush()
            db.expire(row, ["sections"])

        row.slug = data.slug or row.slug
        row.title = data.title or row.title
        for field in _KEEP_IF_NONE_FIELDS:
            value = getattr(data, field)
            if value is not None:
                setattr(row, field, value)

        if data.sections is not None:
            row.sections = _build_sections(data.sections)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(row)
    return row


def referenced_image_urls(post: JournalPost) -> list[Optional[str]]:
    urls: list[Optional[str]] = [post.hero_image, post.thumbnail_image, post.conclusion_image]
    urls.extend(post.gallery or [])
    urls.extend(section.image for section in post.sections)
    return urls


def delete_post(db: Session, post_id: int, storage: BlobStorage) -> int:
    row = get_post(db, post_id)
    blob_urls = managed_urls(storage, referenced_image_urls(row))
    deleted = delete_blobs(storage, blob_urls)
    logger.info("[journal] deleting post %s (%s/%s blobs removed)", post_id, deleted, len(blob_urls))

    db.delete(row)
    db.commit()
    return deleted
