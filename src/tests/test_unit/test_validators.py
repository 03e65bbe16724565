import pytest

from database import accounts_validators
from security.passwords import hash_password, verify_password


@pytest.mark.parametrize("username", ["abc", "movie_fan.42", "a-b-c"])
def test_valid_usernames(username):
    assert accounts_validators.validate_username(username) == username


@pytest.mark.parametrize(
    "username", ["ab", "has space", "x" * 33, "emoji🙂", "alice\n", "\nalice"]
)
def test_invalid_usernames(username):
    with pytest.raises(ValueError):
        accounts_validators.validate_username(username)


@pytest.mark.parametrize(
    "password, message",
    [
        ("Sh0rt!", "at least 8 characters"),
        ("lowercase1!", "uppercase"),
        ("UPPERCASE1!", "lower"),
        ("NoDigits!!", "digit"),
        ("NoSpecial12", "special character"),
    ],
)
def test_weak_passwords(password, message):
    with pytest.raises(ValueError) as exc_info:
        accounts_validators.validate_password_strength(password)
    assert message in str(exc_info.value)


def test_email_is_normalized_to_lowercase():
    assert accounts_validators.validate_email("Movie.Fan@Example.com") == "movie.fan@example.com"


def test_invalid_email():
    with pytest.raises(ValueError):
        accounts_validators.validate_email("not-an-email")


def test_password_hash_round_trip():
    hashed = hash_password("StrongPassword123!")

    assert hashed != "StrongPassword123!"
    assert verify_password("StrongPassword123!", hashed)
    assert not verify_password("WrongPassword123!", hashed)
