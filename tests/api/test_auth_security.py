import pytest
import jwt as pyjwt

from collabhub.api.auth.security import (
    _truncate_password_for_bcrypt,
    create_access_token,
    decode_access_token,
    hash_password,
    validate_password_strength,
    verify_password,
)


@pytest.mark.parametrize("password", ["Short1", "nouppercase1", "NOLOWERCASE1", "NoDigitsHere"])
def test_weak_passwords_are_rejected(password):
    with pytest.raises(ValueError):
        validate_password_strength(password)


def test_strong_password_passes_through():
    assert validate_password_strength("Hackathon2025") == "Hackathon2025"


def test_truncation_keeps_multibyte_characters_whole():
    pw = "é" * 50  # 2 bytes each
    truncated = _truncate_password_for_bcrypt(pw)
    assert truncated == "é" * 36
    assert len(truncated.encode("utf-8")) == 72


def test_hash_and_verify():
    pw_hash = hash_password("Hackathon2025")
    assert pw_hash != "Hackathon2025"
    assert verify_password("Hackathon2025", pw_hash) is True
    assert verify_password("hackathon2025", pw_hash) is False


def test_token_carries_user_id_and_username():
    token = create_access_token(secret="s3cret", user_id=7, username="alice", expires_minutes=5)
    payload = decode_access_token(secret="s3cret", token=token)
    assert payload["sub"] == "7"
    assert payload["username"] == "alice"
    assert payload["exp"] - payload["iat"] == 300


def test_expired_token_is_rejected():
    token = create_access_token(secret="s3cret", user_id=7, username="alice", expires_minutes=-1)
    with pytest.raises(pyjwt.ExpiredSignatureError):
        decode_access_token(secret="s3cret", token=token)
