# 검증 로직 테스트
import asyncio
import re
import pytest
from datetime import datetime, timezone

from users_api.core.exceptions import FieldValidationError
from users_api.models.user import User
from users_api.services.validator import UserValidator, ValidationPatterns

@pytest.fixture
def validator(patterns, repo):
    return UserValidator(patterns, repo)

@pytest.mark.parametrize("email", [None, "", "jane.example.com", "jane@", "jane@example", "@example.com", "jane@exa mple.com"])
def test_invalid_email(validator, email):
    with pytest.raises(FieldValidationError) as exc:
        asyncio.run(validator.validate_email(email))
    assert exc.value.message == "Invalid email"

def test_valid_email(validator):
    asyncio.run(validator.validate_email("jane.doe+x@mail.example.co"))

def test_duplicate_email(validator, repo):
    now = datetime.now(tz=timezone.utc)
    existing = User(email="jane@example.com", password="h", created=now, last_login=now)
    repo.users[existing.id] = existing
    with pytest.raises(FieldValidationError) as exc:
        asyncio.run(validator.validate_email("jane@example.com"))
    assert exc.value.message == "Email already registered"

@pytest.mark.parametrize("password", [None, "", "short1A", "alllowercase1", "ALLUPPERCASE1", "NoDigitsHere"])
def test_invalid_password(validator, password):
    with pytest.raises(FieldValidationError) as exc:
        validator.validate_password(password)
    assert exc.value.message == "Invalid password"

def test_valid_password(validator):
    validator.validate_password("Hunter2Hunter2")

def test_password_pattern_is_configurable(repo):
    patterns = ValidationPatterns(
        email=re.compile(r".+@.+\..+"),
        password=re.compile(r"\d{4}"),
        user_id=re.compile(r".+"),
    )
    validator = UserValidator(patterns, repo)
    validator.validate_password("1234")
    with pytest.raises(FieldValidationError):
        validator.validate_password("Hunter2Hunter2")

def test_is_user_id(validator):
    assert validator.is_user_id("3f2b8c1e-9a4d-4e6b-8f7a-1c2d3e4f5a6b")
    assert not validator.is_user_id("not-a-uuid")
