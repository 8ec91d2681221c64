from __future__ import annotations

import uuid


def test_theater_ids_are_sequential(client, theater_payload):
    first = client.post("/api/theaters", json=theater_payload)
    second = client.post("/api/theaters", json=theater_payload)
    assert first.status_code == 201
    assert first.get_json()["message"] == "Theater added"
    assert first.get_json()["data"]["theaterId"] == 1
    assert second.get_json()["data"]["theaterId"] == 2


def test_theater_id_continues_after_highest(client, theater_payload):
    ids = [client.post("/api/theaters", json=theater_payload).get_json()["data"] for _ in range(2)]
    client.delete(f"/api/theaters/{ids[0]['id']}")
    third = client.post("/api/theaters", json=theater_payload).get_json()["data"]
    assert third["theaterId"] == 3


def test_create_theater_validation(client, theater_payload):
    theater_payload["location"]["geo"]["coordinates"] = [2.35]
    resp = client.post("/api/theaters", json=theater_payload)
    assert resp.status_code == 400
    assert "location" in resp.get_json()["error"]

    theater_payload["location"]["geo"] = {"type": "Polygon", "coordinates": [1, 2]}
    assert client.post("/api/theaters", json=theater_payload).status_code == 400

    assert client.post("/api/theaters", json={}).status_code == 400


def test_list_theaters(client, theater_payload):
    client.post("/api/theaters", json=theater_payload)
    client.post("/api/theaters", json=theater_payload)
    body = client.get("/api/theaters").get_json()
    assert [t["theaterId"] for t in body["data"]] == [1, 2]
    assert body["meta"]["total"] == 2
    assert body["data"][0]["location"]["address"]["city"] == "Paris"


def test_get_update_delete_theater(client, theater_payload):
    created = client.post("/api/theaters", json=theater_payload).get_json()["data"]
    url = f"/api/theaters/{created['id']}"

    assert client.get(url).get_json()["data"]["theaterId"] == 1

    theater_payload["location"]["address"]["city"] = "Lyon"
    resp = client.put(url, json=theater_payload)
    assert resp.status_code == 200
    assert resp.get_json()["data"]["location"]["address"]["city"] == "Lyon"
    assert resp.get_json()["data"]["theaterId"] == 1

    assert client.delete(url).status_code == 200
    assert client.get(url).status_code == 404


def test_theater_bad_and_missing_ids(client, theater_payload):
    assert client.get("/api/theaters/123").status_code == 400
    assert client.put(f"/api/theaters/{uuid.uuid4()}", json=theater_payload).status_code == 404
    assert client.delete(f"/api/theaters/{uuid.uuid4()}").status_code == 404
