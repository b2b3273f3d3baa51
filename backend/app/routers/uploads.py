"""Admin upload API router for property and journal images."""

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from app.middleware.auth_middleware import require_admin
from app.schemas.upload import UploadedFileOut
from app.services.blob_storage import BlobStorage, get_blob_storage
from app.utils.helpers import read_upload

router = APIRouter(prefix="/api/admin/uploads", tags=["uploads"])


@router.post("", response_model=UploadedFileOut)
async def upload_file(
    file: UploadFile = File(...),
    storage: BlobStorage = Depends(get_blob_storage),
    _admin: str = Depends(require_admin),
):
    content = await read_upload(file)
    blob = await run_in_threadpool(storage.put, file.filename, content, file.content_type)
    return UploadedFileOut(filename=file.filename, url=blob.url, size=blob.size)
