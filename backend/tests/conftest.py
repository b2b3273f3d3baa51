import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models.property import Property, PropertyImage, PropertyAmenity
from app.models.journal import JournalPost, JournalSection
from app.services.blob_storage import BlobObject, BlobStorage, get_blob_storage

TEST_DB_URL = "sqlite:///./test_yve.db"
TEST_ADMIN_PASSWORD = "test-admin-password"
BLOB_HOST = "https://store.public.blob.vercel-storage.com"

engine = create_engine(TEST_DB_URL, connect_args={"check_same_thread": False})
TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


class RecordingBlobStorage(BlobStorage):
    """In-memory blob store that records calls and can be told to fail deletes."""

    def __init__(self):
        self.objects: dict[str, bytes] = {}
        self.put_calls: list[str] = []
        self.delete_calls: list[str] = []
        self.failing_urls: set[str] = set()

    def put(self, filename, content, content_type=None):
        url = f"{BLOB_HOST}/{len(self.put_calls)}-{filename}"
        self.put_calls.append(filename)
        self.objects[url] = content
        return BlobObject(url=url, pathname=filename, size=len(content))

    def delete(self, url):
        self.delete_calls.append(url)
        if url in self.failing_urls:
            raise RuntimeError(f"simulated failure for {url}")
        self.objects.pop(url, None)

    def is_managed(self, url):
        return bool(url) and "blob.vercel-storage.com" in url


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(autouse=True)
def setup_db(monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_PASSWORD", TEST_ADMIN_PASSWORD)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    db = TestingSession()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def blob_storage():
    storage = RecordingBlobStorage()
    app.dependency_overrides[get_blob_storage] = lambda: storage
    yield storage
    app.dependency_overrides.pop(get_blob_storage, None)


@pytest.fixture
def client():
    return TestClient(app)


def make_property(db, **overrides) -> Property:
    fields = {
        "title": "Savannah House",
        "slug": "savannah-house",
        "category_slug": "safari-escapes",
        "description": "A lodge on the plains",
        "country": "Kenya",
        "city": "Nanyuki",
        "nightly_rate": 250.0,
        "is_published": True,
    }
    images = overrides.pop("images", [])
    amenities = overrides.pop("amenities", [])
    fields.update(overrides)
    prop = Property(**fields)
    prop.images = [
        PropertyImage(url=url, is_featured=index == 0, sort_order=index)
        for index, url in enumerate(images)
    ]
    prop.amenities = [PropertyAmenity(name=name) for name in amenities]
    db.add(prop)
    db.commit()
    db.refresh(prop)
    return prop


def make_post(db, **overrides) -> JournalPost:
    sections = overrides.pop("sections", [])
    fields = {"slug": "into-the-mara", "title": "Into the Mara", "published": True}
    fields.update(overrides)
    post = JournalPost(**fields)
    post.sections = [
        JournalSection(title=title, content=f"{title} body", image=image, order=index)
        for index, (title, image) in enumerate(sections)
    ]
    db.add(post)
    db.commit()
    db.refresh(post)
    return post


def get_token(client, password: str = TEST_ADMIN_PASSWORD) -> str:
    resp = client.post("/api/auth/login", json={"password": password})
    assert resp.status_code == 200, resp.text
    return resp.json()["access_token"]


def auth_headers(client) -> dict:
    return {"Authorization": f"Bearer {get_token(client)}"}
