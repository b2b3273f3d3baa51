from app.models.cms_image import CMSImage
from tests.conftest import make_property


def test_list_categories_with_slot_images(client, db):
    db.add(CMSImage(section_id="experience-safari", url="https://x/safari.jpg", alt_text="Plains"))
    db.commit()

    resp = client.get("/api/experiences")
    assert resp.status_code == 200
    by_slug = {c["slug"]: c for c in resp.json()}
    assert set(by_slug) == {"safari-escapes", "coastal-retreats", "mountain-and-cabin-getaways"}
    assert by_slug["safari-escapes"]["image"] == {"url": "https://x/safari.jpg", "alt_text": "Plains"}
    assert by_slug["coastal-retreats"]["image"] is None


def test_category_lists_published_properties(client, db):
    make_property(db, slug="plain", sort_order=1)
    make_property(db, slug="star", is_featured=True, sort_order=5)
    make_property(db, slug="draft", is_published=False)
    make_property(db, slug="beach", category_slug="coastal-retreats")

    resp = client.get("/api/experiences/safari-escapes")
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Safari Escapes"
    assert [p["slug"] for p in data["properties"]] == ["star", "plain"]


def test_unknown_category_404(client):
    resp = client.get("/api/experiences/arctic")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Category not found"}
