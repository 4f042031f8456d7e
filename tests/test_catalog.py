"""Service and project routes: list, lookup by ObjectId, create.

Invariants:
    - Malformed identifiers are rejected with 400 before the store is queried
    - Valid but unknown identifiers return 404
    - Lookups return the stored document, _id rendered as a hex string
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from easysolutions.db.mongo import get_db
from easysolutions.main import app
from tests.fakes import BrokenDB


@pytest.fixture
async def seed_project(test_db):
    doc = {"title": "Clinic website", "tags": ["web", "seo"], "year": 2024}
    result = await test_db["project"].insert_one(doc)
    return result.inserted_id


async def test_list_services_empty(client):
    res = await client.get("/service")

    assert res.status_code == 200
    assert res.json() == []


async def test_create_then_list_service(client):
    res = await client.post("/service", json={"name": "Web design", "price": 500})

    assert res.status_code == 200
    ack = res.json()
    assert ack["acknowledged"] is True
    assert ObjectId.is_valid(ack["insertedId"])

    listed = (await client.get("/service")).json()
    assert listed == [{"_id": ack["insertedId"], "name": "Web design", "price": 500}]


async def test_create_service_stores_body_verbatim(client, test_db):
    body = {"name": "SEO", "features": {"audit": True, "reports": ["monthly"]}}

    ack = (await client.post("/service", json=body)).json()

    stored = await test_db["service"].find_one({"_id": ObjectId(ack["insertedId"])})
    stored.pop("_id")
    assert stored == body


async def test_create_service_rejects_non_object_body(client, test_db):
    res = await client.post("/service", json=["not", "a", "document"])

    assert res.status_code == 400
    assert await test_db["service"].count_documents({}) == 0


async def test_get_service_by_id(client):
    ack = (await client.post("/service", json={"name": "Hosting"})).json()

    res = await client.get(f"/service/{ack['insertedId']}")

    assert res.status_code == 200
    assert res.json() == {"_id": ack["insertedId"], "name": "Hosting"}


@pytest.mark.parametrize("bad_id", ["123", "not-an-object-id", "zzzzzzzzzzzzzzzzzzzzzzzz", "abcdefghijkl"])
async def test_get_service_invalid_id_returns_400(client, bad_id):
    res = await client.get(f"/service/{bad_id}")

    assert res.status_code == 400
    assert res.json() == {"success": False, "message": "Invalid service ID"}


async def test_invalid_id_is_rejected_before_store_access(client):
    # A broken store would turn any query into a 500
    app.dependency_overrides[get_db] = lambda: BrokenDB()

    res = await client.get("/project/xyz")

    assert res.status_code == 400


async def test_get_service_unknown_id_returns_404(client):
    res = await client.get(f"/service/{ObjectId()}")

    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Service not found"}


async def test_store_failure_on_lookup_returns_500(client):
    app.dependency_overrides[get_db] = lambda: BrokenDB()

    res = await client.get(f"/service/{ObjectId()}")

    assert res.status_code == 500
    assert res.json() == {"success": False, "message": "Failed to fetch service"}


async def test_list_projects(client, seed_project):
    res = await client.get("/projects")

    assert res.status_code == 200
    assert res.json() == [
        {"_id": str(seed_project), "title": "Clinic website", "tags": ["web", "seo"], "year": 2024},
    ]


async def test_get_project_by_id(client, seed_project):
    res = await client.get(f"/project/{seed_project}")

    assert res.status_code == 200
    assert res.json()["title"] == "Clinic website"
    assert res.json()["_id"] == str(seed_project)


async def test_get_project_unknown_id_returns_404(client, seed_project):
    res = await client.get(f"/project/{ObjectId()}")

    assert res.status_code == 404
    assert res.json()["message"] == "Project not found"


async def test_get_project_invalid_id_returns_400(client, seed_project):
    res = await client.get("/project/abc")

    assert res.status_code == 400
    assert res.json()["message"] == "Invalid project ID"


async def test_datetimes_in_documents_are_iso_strings(client, test_db):
    created = datetime(2025, 3, 1, 12, 30, tzinfo=timezone.utc)
    result = await test_db["project"].insert_one({"title": "Dated", "launched": created})

    res = await client.get(f"/project/{result.inserted_id}")

    assert res.json()["launched"].startswith("2025-03-01T12:30:00")
