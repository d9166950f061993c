"""
Tests for food request endpoints.

Covers:
- POST /requests always stores status "pending" and a server createdAt
- GET /requests filters on foodId / email (requester_email), conjunctively
- PATCH /requests/<id> updates status only, rejects missing/empty status
"""

import pytest
from bson import ObjectId

from test_fixtures import client, fake_db, make_request, ticking_clock


@pytest.fixture
def seeded(client):
    """Three requests over two foods and two requesters"""
    food_a, food_b = str(ObjectId()), str(ObjectId())
    bodies = [
        make_request(food_a, "a@example.com"),
        make_request(food_b, "a@example.com"),
        make_request(food_a, "b@example.com"),
    ]
    ids = [client.post("/requests", json=body).json()["insertedId"] for body in bodies]
    return {"food_a": food_a, "food_b": food_b, "ids": ids}


def test_create_request_forces_pending(client, fake_db, ticking_clock):
    body = make_request(str(ObjectId()), status="approved", createdAt="1999-01-01")

    r = client.post("/requests", json=body)

    assert r.status_code == 200
    assert r.json()["acknowledged"] is True
    stored = fake_db["requests"].documents[0]
    assert stored["status"] == "pending"
    assert stored["createdAt"] == ticking_clock
    assert stored["requester_email"] == "alice@example.com"


def test_list_requests_without_filters(client, seeded):
    r = client.get("/requests")

    assert r.status_code == 200
    assert sorted(doc["_id"] for doc in r.json()) == sorted(seeded["ids"])


def test_list_requests_by_email(client, seeded):
    r = client.get("/requests", params={"email": "a@example.com"})

    assert r.status_code == 200
    docs = r.json()
    assert len(docs) == 2
    assert all(doc["requester_email"] == "a@example.com" for doc in docs)


def test_list_requests_by_food_and_email(client, seeded):
    r = client.get("/requests", params={"foodId": seeded["food_a"], "email": "a@example.com"})

    assert r.status_code == 200
    docs = r.json()
    assert [doc["_id"] for doc in docs] == [seeded["ids"][0]]


def test_list_requests_ignores_empty_params(client, seeded):
    r = client.get("/requests", params={"foodId": "", "email": ""})

    assert r.status_code == 200
    assert len(r.json()) == 3


def test_list_requests_no_match(client, seeded):
    r = client.get("/requests", params={"email": "nobody@example.com"})

    assert r.status_code == 200
    assert r.json() == []


def test_update_request_status(client, fake_db, seeded):
    request_id = seeded["ids"][1]

    r = client.patch(f"/requests/{request_id}", json={"status": "accepted", "notes": "ignored"})

    assert r.status_code == 200
    assert r.json()["matchedCount"] == 1
    assert r.json()["modifiedCount"] == 1
    stored = fake_db["requests"].find_one({"_id": ObjectId(request_id)})
    assert stored["status"] == "accepted"
    assert stored["notes"] == "Can pick up after 6pm"


def test_update_request_status_accepts_free_text(client, fake_db, seeded):
    request_id = seeded["ids"][0]

    r = client.patch(f"/requests/{request_id}", json={"status": "picked-up-by-neighbour"})

    assert r.status_code == 200
    stored = fake_db["requests"].find_one({"_id": ObjectId(request_id)})
    assert stored["status"] == "picked-up-by-neighbour"


@pytest.mark.parametrize("payload", [{}, {"status": ""}, {"status": None}])
def test_update_request_status_requires_status(client, fake_db, seeded, payload):
    request_id = seeded["ids"][0]

    r = client.patch(f"/requests/{request_id}", json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": "Status is required"}
    stored = fake_db["requests"].find_one({"_id": ObjectId(request_id)})
    assert stored["status"] == "pending"


def test_update_request_status_malformed_id(client):
    r = client.patch("/requests/12345", json={"status": "accepted"})

    assert r.status_code == 500
    assert "not a valid ObjectId" in r.json()["error"]


def test_update_status_without_body(client, fake_db):
    request_id = client.post("/requests", json=make_request(str(ObjectId()))).json()["insertedId"]

    r = client.patch(f"/requests/{request_id}")

    assert r.status_code == 400
    assert r.json() == {"error": "Status is required"}
    assert fake_db["requests"].documents[0]["status"] == "pending"


def test_create_request_with_non_json_body(client, fake_db):
    r = client.post("/requests", content=b"foodId=abc", headers={"Content-Type": "text/plain"})

    assert r.status_code == 200
    stored = fake_db["requests"].documents
    assert len(stored) == 1
    assert stored[0]["status"] == "pending"
    assert "foodId" not in stored[0]
