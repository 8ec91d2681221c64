from __future__ import annotations

from datetime import timedelta

import jwt
import pytest

from utils.errors import ErrorKind, ServiceError
from utils.security import (
    InvalidToken,
    TokenService,
    hash_password,
    parse_bearer,
    verify_password,
)


@pytest.fixture()
def tokens() -> TokenService:
    return TokenService(secret="unit-secret")


# ------------------------------ passwords --------------------------------- #
def test_hash_is_salted_and_verifies():
    h1 = hash_password("longenough1")
    h2 = hash_password("longenough1")
    assert h1 != "longenough1"
    assert h1 != h2  # random salt
    assert verify_password("longenough1", h1)
    assert verify_password("longenough1", h2)


def test_verify_password_rejects_wrong_password_and_garbage_hash():
    h = hash_password("longenough1")
    assert verify_password("longenough2", h) is False
    assert verify_password("longenough1", "not-an-argon2-hash") is False


# -------------------------------- tokens ---------------------------------- #
def test_access_token_claims_and_lifetime(tokens):
    token = tokens.issue_access_token("user-1", "a@x.com")
    claims = tokens.verify(token)
    assert claims["user_id"] == "user-1"
    assert claims["email"] == "a@x.com"
    assert claims["type"] == "access"
    assert claims["exp"] - claims["iat"] == 3600


def test_refresh_token_lives_seven_days(tokens):
    claims = tokens.verify(tokens.issue_refresh_token("user-1", "a@x.com"))
    assert claims["type"] == "refresh"
    assert claims["exp"] - claims["iat"] == 7 * 24 * 3600


def test_tokens_issued_together_are_distinct(tokens):
    assert tokens.issue_refresh_token("u", "a@x.com") != tokens.issue_refresh_token("u", "a@x.com")


def test_expired_token_is_rejected():
    expired = TokenService(secret="unit-secret", access_expires=timedelta(seconds=-30))
    token = expired.issue_access_token("user-1", "a@x.com")
    with pytest.raises(InvalidToken, match="expired"):
        expired.verify(token)


def test_token_signed_with_other_secret_is_rejected(tokens):
    other = TokenService(secret="another-secret")
    with pytest.raises(InvalidToken):
        tokens.verify(other.issue_access_token("user-1", "a@x.com"))


def test_token_without_user_id_is_rejected(tokens):
    token = jwt.encode(
        {"iss": "mflix-api", "iat": 1, "exp": 4102444800, "email": "a@x.com"},
        "unit-secret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_garbage_token_is_rejected(tokens):
    with pytest.raises(InvalidToken):
        tokens.verify("not.a.jwt")


def test_token_service_requires_secret():
    with pytest.raises(ValueError):
        TokenService(secret="")


# ------------------------------ bearer header ------------------------------ #
def test_parse_bearer_extracts_token():
    assert parse_bearer("Bearer abc.def.ghi") == "abc.def.ghi"


@pytest.mark.parametrize("header", [None, "", "abc", "Basic abc", "Bearer ", "bearer abc"])
def test_parse_bearer_rejects_missing_or_malformed(header):
    with pytest.raises(ServiceError) as exc:
        parse_bearer(header)
    assert exc.value.kind is ErrorKind.BAD_REQUEST
    assert exc.value.status == 400
