"""Admin CMS image API router. Uploads slot images to blob storage and records them."""

from typing import List

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from sqlalchemy.orm import Session
from starlette.concurrency import run_in_threadpool

from app.database import get_db
from app.middleware.auth_middleware import require_admin
from app.schemas.cms_image import CMSImageOut
from app.services import cms_image_service
from app.services.blob_storage import BlobStorage, get_blob_storage
from app.utils.helpers import read_upload

router = APIRouter(
    prefix="/api/admin/images",
    tags=["admin-images"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=List[CMSImageOut])
def list_images(
    section_id: str | None = Query(None, alias="sectionId"),
    db: Session = Depends(get_db),
):
    return cms_image_service.list_active_images(db, section_id=section_id)


@router.post("", response_model=CMSImageOut)
async def upload_image(
    file: UploadFile | None = File(None),
    section_id: str | None = Form(None, alias="sectionId"),
    alt_text: str = Form("", alias="altText"),
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
):
    if file is None or not file.filename or not (section_id or "").strip():
        raise HTTPException(status_code=400, detail="Filename, body, and sectionId are required")
    content = await read_upload(file)
    return await run_in_threadpool(
        cms_image_service.upload_image,
        db,
        storage,
        section_id=section_id.strip(),
        filename=file.filename,
        content=content,
        content_type=file.content_type,
        alt_text=alt_text,
    )


@router.delete("/{image_id:int}")
def delete_image(
    image_id: int,
    db: Session = Depends(get_db),
    storage: BlobStorage = Depends(get_blob_storage),
):
    cms_image_service.delete_image(db, storage, image_id)
    return {"success": True}
