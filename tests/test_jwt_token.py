from __future__ import annotations

import time

import pytest

from rcli.errors import AuthenticationError
from rcli.process.jwt_token import parse_expiry, process_jwt_sign, process_jwt_verify


def test_parse_expiry():
    assert parse_expiry("1d0h0m", now=1000) == 1000 + 86400
    assert parse_expiry("0d5h20m", now=0) == 5 * 3600 + 20 * 60


@pytest.mark.parametrize("value", ["", "1d", "1h0m", "xd0h0m", "1d0h0m extra"])
def test_parse_expiry_rejects_bad_format(value: str):
    with pytest.raises(ValueError):
        parse_expiry(value)


def test_jwt_round_trip():
    token = process_jwt_sign("acme", "device1", parse_expiry("1d0h0m"))
    claims = process_jwt_verify(token, "device1")
    assert claims["sub"] == "acme"
    assert claims["aud"] == "device1"


def test_jwt_wrong_audience():
    token = process_jwt_sign("acme", "device1", parse_expiry("0d1h0m"))
    with pytest.raises(AuthenticationError):
        process_jwt_verify(token, "device2")


def test_jwt_expired():
    token = process_jwt_sign("acme", "device1", int(time.time()) - 3600)
    with pytest.raises(AuthenticationError, match="expired"):
        process_jwt_verify(token, "device1")


def test_jwt_secret_from_environment(monkeypatch: pytest.MonkeyPatch):
    token = process_jwt_sign("acme", "device1", parse_expiry("0d1h0m"))
    monkeypatch.setenv("RCLI_JWT_SECRET", "another-secret-value-for-tests")
    with pytest.raises(AuthenticationError):
        process_jwt_verify(token, "device1")


def test_jwt_garbage_token():
    with pytest.raises(AuthenticationError):
        process_jwt_verify("not.a.token", "device1")
