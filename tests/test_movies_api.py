from __future__ import annotations

import uuid

import pytest


def test_create_movie(client, movie_payload):
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 201
    body = resp.get_json()
    assert body["status"] == 201
    assert body["message"] == "Movie created"
    data = body["data"]
    assert data["id"]
    assert data["title"] == "Inception"
    assert data["imdb"] == {"rating": 8.8, "votes": 2000000, "id": 1375666}
    assert data["tomatoes"]["critic"]["meter"] == 87
    assert data["released"].startswith("2010-07-16")


def test_create_movie_drops_unknown_fields(client, movie_payload):
    movie_payload["producer"] = "nobody"
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 201
    assert "producer" not in resp.get_json()["data"]


@pytest.mark.parametrize("missing", ["title", "imdb", "tomatoes", "released"])
def test_create_movie_requires_fields(client, movie_payload, missing):
    movie_payload.pop(missing)
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 400
    body = resp.get_json()
    assert body["message"] == "Invalid input"
    assert missing in body["error"]


def test_create_movie_validates_nested_documents(client, movie_payload):
    movie_payload["tomatoes"]["viewer"].pop("meter")
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 400
    assert "tomatoes" in resp.get_json()["error"]


def test_awards_are_optional(client, movie_payload):
    movie_payload.pop("awards")
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 201
    assert resp.get_json()["data"]["awards"] is None


def test_get_movie(client, movie):
    resp = client.get(f"/api/movies/{movie['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["data"]["title"] == "Inception"


def test_get_movie_invalid_id_is_400(client):
    resp = client.get("/api/movies/not-an-id")
    assert resp.status_code == 400
    assert resp.get_json()["message"] == "Invalid movie ID"


def test_get_movie_missing_is_404(client):
    resp = client.get(f"/api/movies/{uuid.uuid4()}")
    assert resp.status_code == 404
    assert resp.get_json() == {"status": 404, "message": "Movie not found"}


def test_update_movie(client, movie, movie_payload):
    movie_payload["title"] = "Inception (Director's Cut)"
    movie_payload["runtime"] = 160
    resp = client.put(f"/api/movies/{movie['id']}", json=movie_payload)
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["message"] == "Movie updated"
    assert body["data"]["title"] == "Inception (Director's Cut)"
    assert client.get(f"/api/movies/{movie['id']}").get_json()["data"]["runtime"] == 160


def test_update_movie_requires_full_document(client, movie):
    resp = client.put(f"/api/movies/{movie['id']}", json={"title": "Only a title"})
    assert resp.status_code == 400


def test_update_missing_movie_is_404(client, movie_payload):
    assert client.put(f"/api/movies/{uuid.uuid4()}", json=movie_payload).status_code == 404


def test_delete_movie(client, movie):
    resp = client.delete(f"/api/movies/{movie['id']}")
    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Movie deleted"
    assert client.get(f"/api/movies/{movie['id']}").status_code == 404
    assert client.delete(f"/api/movies/{movie['id']}").status_code == 404


def test_list_movies_paginates_and_sorts(client, movie_payload):
    for title, year in [("Alien", 1979), ("Brazil", 1985), ("Cube", 1997)]:
        payload = dict(movie_payload, title=title, year=year)
        assert client.post("/api/movies", json=payload).status_code == 201

    resp = client.get("/api/movies?limit=2&sort=-year")
    body = resp.get_json()
    assert resp.status_code == 200
    assert [m["title"] for m in body["data"]] == ["Cube", "Brazil"]
    assert body["meta"] == {"page": 1, "limit": 2, "total": 3}

    page2 = client.get("/api/movies?limit=2&page=2&sort=-year").get_json()
    assert [m["title"] for m in page2["data"]] == ["Alien"]


def test_list_movies_search(client, movie_payload):
    client.post("/api/movies", json=dict(movie_payload, title="The Matrix"))
    client.post("/api/movies", json=dict(movie_payload, title="Heat"))
    body = client.get("/api/movies?q=matrix").get_json()
    assert [m["title"] for m in body["data"]] == ["The Matrix"]


def test_list_movies_search_treats_wildcards_literally(client, movie_payload):
    client.post("/api/movies", json=dict(movie_payload, title="100% Wolf"))
    client.post("/api/movies", json=dict(movie_payload, title="Heat"))
    client.post("/api/movies", json=dict(movie_payload, title="Up_Side"))

    assert [m["title"] for m in client.get("/api/movies?q=%25").get_json()["data"]] == ["100% Wolf"]
    assert [m["title"] for m in client.get("/api/movies?q=_").get_json()["data"]] == ["Up_Side"]


def test_list_movies_rejects_bad_params(client):
    assert client.get("/api/movies?sort=budget").status_code == 400
    assert client.get("/api/movies?page=abc").status_code == 400
