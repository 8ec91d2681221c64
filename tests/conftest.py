"""Pytest fixtures: a fresh app on an in-memory SQLite database per test."""

from __future__ import annotations

import copy

import pytest

from api import create_app
from models import storage


MOVIE_PAYLOAD = {
    "title": "Inception",
    "plot": "A thief who steals corporate secrets through dream-sharing technology.",
    "genres": ["Action", "Sci-Fi"],
    "runtime": 148,
    "cast": ["Leonardo DiCaprio", "Joseph Gordon-Levitt"],
    "poster": "https://example.com/inception.jpg",
    "fullplot": "Dom Cobb is a skilled thief.",
    "languages": ["English"],
    "released": "2010-07-16T00:00:00.000Z",
    "directors": ["Christopher Nolan"],
    "rated": "PG-13",
    "awards": {"wins": 4, "nominations": 8, "text": "Won 4 Oscars."},
    "year": 2010,
    "imdb": {"rating": 8.8, "votes": 2000000, "id": 1375666},
    "countries": ["USA", "UK"],
    "type": "movie",
    "tomatoes": {
        "viewer": {"rating": 4.5, "numReviews": 3500, "meter": 90},
        "fresh": 300,
        "critic": {"rating": 8.1, "numReviews": 290, "meter": 87},
        "rotten": 10,
        "lastUpdated": "2025-03-29T22:00:00Z",
    },
    "num_mflix_comments": 0,
}

THEATER_PAYLOAD = {
    "location": {
        "address": {
            "street1": "123 Rue des Lilas",
            "city": "Paris",
            "state": "Ile-de-France",
            "zipcode": "75000",
        },
        "geo": {"type": "Point", "coordinates": [2.3522, 48.8566]},
    }
}

USER = {"name": "A", "email": "a@x.com", "password": "longenough1"}


@pytest.fixture()
def app():
    """Flask app built with TestingConfig; each test gets an empty database."""
    app = create_app("testing")
    yield app
    storage.close()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def auth_service(app):
    """The AuthService wired by the app factory."""
    return app.extensions["auth_service"]


@pytest.fixture()
def movie_payload():
    return copy.deepcopy(MOVIE_PAYLOAD)


@pytest.fixture()
def theater_payload():
    return copy.deepcopy(THEATER_PAYLOAD)


@pytest.fixture()
def user_payload():
    return dict(USER)


@pytest.fixture()
def registered_user(client, user_payload):
    resp = client.post("/api/auth/register", json=user_payload)
    assert resp.status_code == 201
    return resp.get_json()["data"]


@pytest.fixture()
def movie(client, movie_payload):
    resp = client.post("/api/movies", json=movie_payload)
    assert resp.status_code == 201
    return resp.get_json()["data"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}
