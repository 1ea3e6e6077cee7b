# 공통 픽스처: 테스트용 환경변수, 메모리 저장소
import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-users-manager-tests")

import pytest

from users_api.core.config import settings
from users_api.core.exceptions import FieldValidationError
from users_api.core.security import EncryptionService
from users_api.services.user_service import UserService
from users_api.services.validator import ValidationPatterns


class InMemoryUserRepository:
    """MongoUserRepository 와 같은 계약을 dict 로 흉내낸다 (이메일 unique 포함)"""

    def __init__(self):
        self.users = {}
        self.save_calls = 0

    async def find_by_id(self, user_id):
        return self.users.get(user_id)

    async def find_by_email(self, email):
        return next((u for u in self.users.values() if u.email == email), None)

    async def save(self, user):
        self.save_calls += 1
        if any(u.email == user.email for u in self.users.values()):
            raise FieldValidationError("Email already registered")
        self.users[user.id] = user
        return user


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def encryption():
    return EncryptionService(settings)


@pytest.fixture
def patterns():
    return ValidationPatterns.from_settings(settings)


@pytest.fixture
def service(repo, encryption, patterns):
    return UserService(repo, encryption, patterns)
