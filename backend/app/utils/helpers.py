import re
import time

from fastapi import UploadFile, HTTPException
from app.config import settings

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def generate_slug(title: str) -> str:
    text = (title or "").lower()
    text = re.sub(r"[^a-z0-9\s-]", "", text)
    text = re.sub(r"\s+", "-", text)
    text = re.sub(r"-+", "-", text)
    return text.strip().strip("-")


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def timestamp_suffix() -> str:
    return to_base36(int(time.time() * 1000))


def file_extension(filename: str | None) -> str:
    name = filename or ""
    return name.rsplit(".", 1)[-1].lower() if "." in name else ""


def validate_image_file(file: UploadFile) -> None:
    ext = file_extension(file.filename)
    if ext not in settings.ALLOWED_IMAGE_EXTENSIONS:
        raise HTTPException(
            status_code=400,
            detail=f"File type '{ext}' not allowed. Allowed: {', '.join(settings.ALLOWED_IMAGE_EXTENSIONS)}",
        )


async def read_upload(file: UploadFile) -> bytes:
    validate_image_file(file)
    content = await file.read()
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")
    if len(content) > settings.MAX_UPLOAD_SIZE:
        limit_mb = settings.MAX_UPLOAD_SIZE // (1024 * 1024)
        raise HTTPException(status_code=400, detail=f"File exceeds {limit_mb} MB limit")
    return content
