import jwt
import pytest

from devconnect.security import create_access_token, decode_token, hash_password, verify_password
from devconnect.utils.avatar import gravatar_url


def test_hash_and_verify_password():
    hashed = hash_password("secret123", rounds=4)
    assert hashed != "secret123"
    assert hashed.startswith("$2")
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong-pass", hashed)


def test_hashes_are_salted():
    assert hash_password("secret123", rounds=4) != hash_password("secret123", rounds=4)


def test_token_roundtrip_keeps_claims():
    token = create_access_token({"id": 7, "name": "Jane"}, "s3cret", expires_in=60)
    claims = decode_token(token, "s3cret")
    assert claims["id"] == 7
    assert claims["name"] == "Jane"
    assert claims["exp"] - claims["iat"] == 60


def test_expired_token_is_rejected():
    token = create_access_token({"id": 7}, "s3cret", expires_in=-10)
    with pytest.raises(jwt.ExpiredSignatureError):
        decode_token(token, "s3cret")


def test_token_signed_with_other_secret_is_rejected():
    token = create_access_token({"id": 7}, "other", expires_in=60)
    with pytest.raises(jwt.InvalidTokenError):
        decode_token(token, "s3cret")


def test_gravatar_url_is_derived_from_normalised_email():
    url = gravatar_url("Jane@Example.com ")
    assert url == gravatar_url("jane@example.com")
    assert url.startswith("https://www.gravatar.com/avatar/")
    assert url.endswith("?s=200&r=pg&d=mm")
