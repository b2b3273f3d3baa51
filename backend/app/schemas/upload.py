"""Upload response contract."""

from pydantic import BaseModel


class UploadedFileOut(BaseModel):
    filename: str
    url: str
    size: int
