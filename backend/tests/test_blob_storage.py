import json

import httpx
import pytest

from app.services.blob_storage import (
    BlobStorageError,
    LocalBlobStorage,
    VercelBlobStorage,
    delete_blobs,
    managed_urls,
)
from app.utils.helpers import generate_slug, to_base36


def _vercel(handler, token="tok"):
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return VercelBlobStorage(token=token, api_url="https://blob.example.test", client=client)


def test_vercel_put_sends_public_random_suffix_upload():
    seen = {}

    def handler(request: httpx.Request):
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["headers"] = request.headers
        seen["body"] = request.content
        return httpx.Response(
            200,
            json={"url": "https://abc.public.blob.vercel-storage.com/hero-x1.png", "pathname": "hero-x1.png"},
        )

    blob = _vercel(handler).put("hero.png", b"data", "image/png")

    assert blob.url == "https://abc.public.blob.vercel-storage.com/hero-x1.png"
    assert blob.size == 4
    assert seen["method"] == "PUT"
    assert seen["path"] == "/hero.png"
    assert seen["headers"]["authorization"] == "Bearer tok"
    assert seen["headers"]["x-add-random-suffix"] == "1"
    assert seen["headers"]["x-vercel-blob-access"] == "public"
    assert seen["body"] == b"data"


def test_vercel_delete_posts_url_list():
    seen = {}

    def handler(request: httpx.Request):
        seen["path"] = request.url.path
        seen["json"] = json.loads(request.content)
        return httpx.Response(200, json={})

    _vercel(handler).delete("https://abc.public.blob.vercel-storage.com/a.png")
    assert seen["path"] == "/delete"
    assert seen["json"] == {"urls": ["https://abc.public.blob.vercel-storage.com/a.png"]}


def test_vercel_errors_are_wrapped():
    storage = _vercel(lambda request: httpx.Response(500, json={"error": "boom"}))
    with pytest.raises(BlobStorageError):
        storage.put("a.png", b"x")


def test_vercel_requires_token():
    storage = _vercel(lambda request: httpx.Response(200, json={}), token="")
    with pytest.raises(BlobStorageError):
        storage.delete("https://abc.public.blob.vercel-storage.com/a.png")


def test_local_put_and_delete(tmp_path):
    storage = LocalBlobStorage(root=str(tmp_path))
    first = storage.put("Sunset View.jpg", b"one")
    second = storage.put("Sunset View.jpg", b"two")

    assert first.url != second.url
    assert first.url.startswith("/uploads/blobs/")
    assert storage.is_managed(first.url)
    path = tmp_path / "blobs" / first.pathname
    assert path.read_bytes() == b"one"

    storage.delete(first.url)
    assert not path.exists()
    with pytest.raises(BlobStorageError):
        storage.delete(first.url)


def test_delete_blobs_swallows_failures(tmp_path):
    storage = LocalBlobStorage(root=str(tmp_path))
    kept = storage.put("a.png", b"a")
    missing = "/uploads/blobs/never-existed.png"

    assert delete_blobs(storage, [kept.url, missing]) == 1
    assert delete_blobs(storage, []) == 0


def test_managed_urls_filters_and_dedupes(tmp_path):
    storage = LocalBlobStorage(root=str(tmp_path))
    urls = ["/uploads/blobs/a.png", None, "", "https://elsewhere/x.png", "/uploads/blobs/a.png"]
    assert managed_urls(storage, urls) == ["/uploads/blobs/a.png"]


def test_generate_slug():
    assert generate_slug("Casa del Mar: Sea & Sky!") == "casa-del-mar-sea-sky"
    assert generate_slug("  Two   Spaces  ") == "two-spaces"


def test_to_base36():
    assert to_base36(0) == "0"
    assert to_base36(35) == "z"
    assert to_base36(36) == "10"


def test_vercel_put_rejects_non_json_body():
    storage = _vercel(lambda request: httpx.Response(200, text="<html>gateway</html>"))
    with pytest.raises(BlobStorageError):
        storage.put("a.png", b"x")


def test_vercel_put_requires_url_in_response():
    storage = _vercel(lambda request: httpx.Response(200, json={"pathname": "a.png"}))
    with pytest.raises(BlobStorageError):
        storage.put("a.png", b"x")


def test_local_put_wraps_folder_creation_failure(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_bytes(b"")
    storage = LocalBlobStorage(root=str(blocker))
    with pytest.raises(BlobStorageError):
        storage.put("a.png", b"x")
