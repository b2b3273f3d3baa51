from tests.conftest import auth_headers, make_property


def test_list_only_published(client, db):
    make_property(db, slug="live", title="Live")
    make_property(db, slug="draft", title="Draft", is_published=False)

    resp = client.get("/api/properties")
    assert resp.status_code == 200
    data = resp.json()
    assert [p["slug"] for p in data["properties"]] == ["live"]
    assert data["pagination"] == {"page": 1, "limit": 12, "total": 1, "total_pages": 1}


def test_filter_by_category_and_price_band(client, db):
    make_property(db, slug="in-band", nightly_rate=300)
    make_property(db, slug="edge-low", nightly_rate=100)
    make_property(db, slug="too-cheap", nightly_rate=80)
    make_property(db, slug="too-dear", nightly_rate=900)
    make_property(db, slug="coastal", category_slug="coastal-retreats", nightly_rate=300)
    make_property(db, slug="hidden", nightly_rate=300, is_published=False)

    resp = client.get("/api/properties?category=safari-escapes&minPrice=100&maxPrice=500")
    assert resp.status_code == 200
    slugs = {p["slug"] for p in resp.json()["properties"]}
    assert slugs == {"in-band", "edge-low"}
    for prop in resp.json()["properties"]:
        assert prop["category_slug"] == "safari-escapes"
        assert 100 <= prop["nightly_rate"] <= 500
        assert prop["is_published"] is True


def test_search_matches_title_city_country_tagline(client, db):
    make_property(db, slug="a", title="Ocean Hideaway", city="Diani", country="Kenya")
    make_property(db, slug="b", title="Stone Barn", city="Arusha", country="Tanzania")
    make_property(db, slug="c", title="Quiet Place", city="X", country="Y", tagline="Near the OCEAN")

    resp = client.get("/api/properties?search=ocean")
    assert {p["slug"] for p in resp.json()["properties"]} == {"a", "c"}

    resp = client.get("/api/properties?search=tanz")
    assert [p["slug"] for p in resp.json()["properties"]] == ["b"]


def test_guest_and_type_filters(client, db):
    make_property(db, slug="small", max_guests=2, property_type="cabin")
    make_property(db, slug="big-cabin", max_guests=8, property_type="cabin")
    make_property(db, slug="big-villa", max_guests=10, property_type="villa")

    resp = client.get("/api/properties?guests=6&type=cabin")
    assert [p["slug"] for p in resp.json()["properties"]] == ["big-cabin"]


def test_sort_orders(client, db):
    make_property(db, slug="mid", nightly_rate=200, sort_order=2)
    make_property(db, slug="cheap", nightly_rate=100, sort_order=1)
    make_property(db, slug="dear", nightly_rate=400, is_featured=True, sort_order=3)

    low = client.get("/api/properties?sort=price-low").json()["properties"]
    assert [p["slug"] for p in low] == ["cheap", "mid", "dear"]

    high = client.get("/api/properties?sort=price-high").json()["properties"]
    assert [p["slug"] for p in high] == ["dear", "mid", "cheap"]

    featured = client.get("/api/properties").json()["properties"]
    assert [p["slug"] for p in featured] == ["dear", "cheap", "mid"]

    newest = client.get("/api/properties?sort=newest").json()["properties"]
    assert [p["slug"] for p in newest] == ["dear", "cheap", "mid"]


def test_pagination(client, db):
    for i in range(5):
        make_property(db, slug=f"p{i}", sort_order=i)

    resp = client.get("/api/properties?page=2&limit=2")
    data = resp.json()
    assert [p["slug"] for p in data["properties"]] == ["p2", "p3"]
    assert data["pagination"] == {"page": 2, "limit": 2, "total": 5, "total_pages": 3}


def test_invalid_query_returns_400(client):
    resp = client.get("/api/properties?minPrice=cheap")
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_get_by_slug_with_similar(client, db):
    main = make_property(db, slug="main", images=["https://x/1.jpg", "https://x/2.jpg"], amenities=["Pool"])
    make_property(db, slug="sibling", images=["https://x/s1.jpg", "https://x/s2.jpg"])
    make_property(db, slug="other-category", category_slug="coastal-retreats")
    make_property(db, slug="unpublished-sibling", is_published=False)

    resp = client.get("/api/properties/main")
    assert resp.status_code == 200
    data = resp.json()
    assert data["property"]["property_id"] == main.property_id
    assert [img["url"] for img in data["property"]["images"]] == ["https://x/1.jpg", "https://x/2.jpg"]
    assert [a["name"] for a in data["property"]["amenities"]] == ["Pool"]
    assert [p["slug"] for p in data["similar_properties"]] == ["sibling"]
    assert [img["url"] for img in data["similar_properties"][0]["images"]] == ["https://x/s1.jpg"]


def test_get_by_slug_hides_drafts(client, db):
    make_property(db, slug="secret", is_published=False)
    resp = client.get("/api/properties/secret")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Property not found"}


def test_search_treats_wildcards_literally(client, db):
    make_property(db, slug="a", title="Ocean Hideaway")
    make_property(db, slug="b", title="Stone Barn")
    make_property(db, slug="c", title="100% Off-Grid", city="Lamu")
    make_property(db, slug="d", title="Tree_House", city="Arusha")

    resp = client.get("/api/properties", params={"search": "%"})
    assert [p["slug"] for p in resp.json()["properties"]] == ["c"]

    resp = client.get("/api/properties", params={"search": "_"})
    assert [p["slug"] for p in resp.json()["properties"]] == ["d"]


def test_admin_search_treats_wildcards_literally(client, db):
    make_property(db, slug="a", title="Ocean Hideaway")
    resp = client.get("/api/admin/properties", params={"search": "%"}, headers=auth_headers(client))
    assert resp.json() == []
