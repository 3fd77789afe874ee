from datetime import timedelta

import pytest

from utils.auth import hash_password, verify_password
from utils.errors import TokenError
from utils.tokens import decode_token, issue_token


def test_hash_is_salted_and_verifiable():
    first = hash_password("secret1")
    second = hash_password("secret1")

    assert first != "secret1"
    assert first != second
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)


def test_verify_mismatch_returns_false():
    hashed = hash_password("secret1")

    assert verify_password("wrong", hashed) is False
    assert verify_password("secret1", "") is False
    assert verify_password("secret1", None) is False


def test_token_round_trip_carries_subject():
    token = issue_token("65a1f0c2e4b0a1b2c3d4e5f6", "s3cret")

    assert decode_token(token, "s3cret") == "65a1f0c2e4b0a1b2c3d4e5f6"


def test_token_rejects_other_secret():
    token = issue_token("abc", "s3cret")

    with pytest.raises(TokenError, match="Invalid token"):
        decode_token(token, "another")


def test_expired_token_is_rejected():
    token = issue_token("abc", "s3cret", ttl=timedelta(seconds=-5))

    with pytest.raises(TokenError, match="expired"):
        decode_token(token, "s3cret")


@pytest.mark.parametrize("secret", [None, ""])
def test_issue_without_secret_fails(secret):
    with pytest.raises(TokenError):
        issue_token("abc", secret)
