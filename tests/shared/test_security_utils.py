# tests/shared/test_security_utils.py
# -*- coding: utf-8 -*-
from datetime import timedelta

import pytest

from app.shared.utils import mask_email, mask_secret
from app.shared.utils.security import (
    MAX_PASSWORD_LENGTH,
    PasswordTooLongError,
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
)

SECRET = "unit-test-secret-with-32-characters!"


def test_hash_and_verify_password():
    hashed = hash_password("papas-con-aji")
    assert hashed.startswith("$argon2id$")
    assert verify_password("papas-con-aji", hashed)
    assert not verify_password("otra", hashed)


def test_password_too_long():
    with pytest.raises(PasswordTooLongError):
        hash_password("x" * (MAX_PASSWORD_LENGTH + 1))
    assert verify_password("x" * (MAX_PASSWORD_LENGTH + 1), "$argon2id$irrelevante") is False


def test_expired_token_decodes_to_none():
    token = create_access_token({"sub": "uid-1"}, secret=SECRET, expires_delta=timedelta(seconds=-5))
    assert decode_token(token, secret=SECRET) is None


def test_garbage_token_decodes_to_none():
    assert decode_token("no.es.jwt", secret=SECRET) is None


@pytest.mark.parametrize(
    "value, expected",
    [(None, "<empty>"), ("", "<empty>"), ("abc", "***(3)"), ("prod_events_abc123", "***(18)")],
)
def test_mask_secret(value, expected):
    assert mask_secret(value) == expected


def test_mask_secret_never_leaks_characters():
    secret = "prod_events_Zr8mQ2pL"
    masked = mask_secret(secret)
    assert "prod" not in masked
    assert not any(ch in masked for ch in "ZrmQpL")


def test_mask_email_hides_local_part():
    assert mask_email("ana.maria@quehaypahoy.co") == "ana***@quehaypahoy.co"
    assert mask_email(None) == "empty"

# Fin del archivo tests/shared/test_security_utils.py
