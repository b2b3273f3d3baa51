"""Blob storage collaborator: uploads public images and removes them again.

Two backends share one interface. ``VercelBlobStorage`` talks to the hosted blob
HTTP API; ``LocalBlobStorage`` writes under ``settings.UPLOAD_DIR`` and relies on the
``/uploads`` static mount. Deletion helpers are best-effort: a failed delete is
logged and never propagated.
"""

import logging
import os
import re
import uuid
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional
from urllib.parse import quote

import httpx

from app.config import settings
from app.utils.helpers import file_extension

logger = logging.getLogger(__name__)


class BlobStorageError(Exception):
    """Raised when the blob backend rejects or fails an operation."""


@dataclass
class BlobObject:
    url: str
    pathname: str
    size: int


def _random_suffix_name(filename: str) -> str:
    base = os.path.basename(filename or "") or "upload"
    ext = file_extension(base)
    stem = base[: -(len(ext) + 1)] if ext else base
    stem = re.sub(r"[^A-Za-z0-9._-]+", "-", stem).strip("-") or "upload"
    suffix = uuid.uuid4().hex[:12]
    return f"{stem}-{suffix}.{ext}" if ext else f"{stem}-{suffix}"


class BlobStorage:
    def put(self, filename: str, content: bytes, content_type: Optional[str] = None) -> BlobObject:
        raise NotImplementedError

    def delete(self, url: str) -> None:
        raise NotImplementedError

    def is_managed(self, url: Optional[str]) -> bool:
        raise NotImplementedError


class VercelBlobStorage(BlobStorage):
    def __init__(
        self,
        token: Optional[str] = None,
        api_url: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        self.token = token if token is not None else settings.BLOB_READ_WRITE_TOKEN
        self.api_url = (api_url or settings.BLOB_API_URL).rstrip("/")
        self._client = client

    def _headers(self, extra: Optional[dict] = None) -> dict:
        if not self.token:
            raise BlobStorageError("BLOB_READ_WRITE_TOKEN is not configured")
        headers = {
            "authorization": f"Bearer {self.token}",
            "x-api-version": settings.BLOB_API_VERSION,
        }
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            if self._client is not None:
                response = self._client.request(method, url, **kwargs)
            else:
                response = httpx.request(method, url, timeout=settings.BLOB_TIMEOUT_SECONDS, **kwargs)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise BlobStorageError(f"blob {method} {url} failed: {exc}") from exc
        return response

    def put(self, filename: str, content: bytes, content_type: Optional[str] = None) -> BlobObject:
        pathname = quote(os.path.basename(filename or "") or "upload")
        headers = self._headers({
            "x-add-random-suffix": "1",
            "x-vercel-blob-access": "public",
        })
        if content_type:
            headers["x-content-type"] = content_type
        response = self._request("PUT", f"{self.api_url}/{pathname}", headers=headers, content=content)
        try:
            payload = response.json()
        except ValueError as exc:
            raise BlobStorageError(f"blob upload returned a non-JSON body: {exc}") from exc
        url = payload.get("url") if isinstance(payload, dict) else None
        if not url:
            raise BlobStorageError("blob upload response did not include a url")
        return BlobObject(url=url, pathname=payload.get("pathname") or pathname, size=len(content))

    def delete(self, url: str) -> None:
        self._request("POST", f"{self.api_url}/delete", headers=self._headers(), json={"urls": [url]})

    def is_managed(self, url: Optional[str]) -> bool:
        return bool(url) and settings.BLOB_HOST_MARKER in url


class LocalBlobStorage(BlobStorage):
    URL_PREFIX = "/uploads/blobs/"

    def __init__(self, root: Optional[str] = None):
        self.root = root

    def _folder(self) -> str:
        return os.path.join(self.root or settings.UPLOAD_DIR, "blobs")

    def put(self, filename: str, content: bytes, content_type: Optional[str] = None) -> BlobObject:
        folder = self._folder()
        name = _random_suffix_name(filename)
        try:
            os.makedirs(folder, exist_ok=True)
            with open(os.path.join(folder, name), "wb") as f:
                f.write(content)
        except OSError as exc:
            raise BlobStorageError(f"failed to write blob {name}: {exc}") from exc
        return BlobObject(url=f"{self.URL_PREFIX}{name}", pathname=name, size=len(content))

    def delete(self, url: str) -> None:
        if not self.is_managed(url):
            raise BlobStorageError(f"not a local blob url: {url}")
        name = os.path.basename(url[len(self.URL_PREFIX):])
        path = os.path.join(self._folder(), name)
        try:
            os.remove(path)
        except OSError as exc:
            raise BlobStorageError(f"failed to delete blob {name}: {exc}") from exc

    def is_managed(self, url: Optional[str]) -> bool:
        return bool(url) and url.startswith(self.URL_PREFIX)


def build_blob_storage() -> BlobStorage:
    backend = (settings.BLOB_BACKEND or "local").strip().lower()
    if backend == "vercel":
        return VercelBlobStorage()
    if backend == "local":
        return LocalBlobStorage()
    raise BlobStorageError(f"unknown BLOB_BACKEND '{settings.BLOB_BACKEND}'")


def get_blob_storage() -> BlobStorage:
    return build_blob_storage()


def managed_urls(storage: BlobStorage, urls: Iterable[Optional[str]]) -> list[str]:
    found: list[str] = []
    for url in urls:
        if storage.is_managed(url) and url not in found:
            found.append(url)
    return found


def _try_delete(storage: BlobStorage, url: str) -> bool:
    try:
        storage.delete(url)
        return True
    except Exception as exc:  # noqa: BLE001
        logger.warning("[blob] best-effort delete failed for %s: %s", url, exc)
        return False


def delete_blobs(storage: BlobStorage, urls: Iterable[str]) -> int:
    """Delete every url in parallel and wait for all; returns how many succeeded."""
    targets = list(urls)
    if not targets:
        return 0
    workers = max(1, min(len(targets), int(settings.BLOB_DELETE_WORKERS)))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(lambda url: _try_delete(storage, url), targets))
    deleted = sum(1 for ok in results if ok)
    if deleted != len(targets):
        logger.info("[blob] deleted %s of %s blobs", deleted, len(targets))
    return deleted
