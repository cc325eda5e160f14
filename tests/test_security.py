import base64

import jwt
import pytest

from friendcore.security import (
    LETTERS,
    decode_token,
    hash_password,
    is_same,
    new_token,
    random_string,
)
from friendcore.user import User

SECRET = "secret"


def test_hash_round_trip():
    password = "password"
    hashed = hash_password(password)
    assert hashed != password
    assert is_same(password, hashed) is True


def test_hash_uses_default_cost():
    hashed = hash_password("password")
    assert hashed.split("$")[2] == "10"


def test_wrong_text_does_not_match():
    hashed = hash_password("password")
    assert is_same("placeholder", hashed) is False


def test_invalid_hash_does_not_match():
    assert is_same("password", "not a hash") is False


def test_random_string_length_and_alphabet():
    value = random_string(50)
    assert len(value) == 50
    assert set(value) <= set(LETTERS)


def test_random_string_empty():
    assert random_string(0) == ""


def test_random_string_negative():
    with pytest.raises(ValueError):
        random_string(-1)


def test_token_round_trip():
    user = User(id=5, username="alice")
    token = new_token(user, SECRET)
    assert decode_token(token, SECRET) == {"user_id": 5, "username": "alice"}


def test_token_header_and_payload_layout():
    user = User(id=5, username="alice")
    token = new_token(user, SECRET)
    assert jwt.get_unverified_header(token) == {"alg": "HS256", "typ": "JWT"}
    segment = token.split(".")[1]
    payload = base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4)).decode()
    assert payload == '{"user_id":5,"username":"alice"}'


def test_token_wrong_secret():
    user = User(id=5, username="alice")
    token = new_token(user, SECRET)
    with pytest.raises(jwt.InvalidSignatureError):
        decode_token(token, "placeholder")


def test_token_secret_from_environment(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("JWT_SECRET", SECRET)
    user = User(id=8, username="bob")
    token = new_token(user)
    assert decode_token(token, SECRET)["username"] == "bob"
    assert decode_token(token)["user_id"] == 8