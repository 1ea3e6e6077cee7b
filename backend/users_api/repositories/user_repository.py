# 사용자 저장소 레이어
# - 데이터 접근(조회/저장)만 담당 (서비스 로직 분리)
# - UserRepository 는 계약(Protocol), MongoUserRepository 는 Beanie 구현

import logging
from typing import Optional, Protocol
from uuid import UUID
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import FieldValidationError
from ..models.user import User
from ..models.user_document import UserDocument

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    async def find_by_id(self, user_id: UUID) -> Optional[User]: ...

    async def find_by_email(self, email: str) -> Optional[User]: ...

    async def save(self, user: User) -> User: ...


class MongoUserRepository:
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        doc = await UserDocument.get(user_id)
        return doc.to_user() if doc else None

    async def find_by_email(self, email: str) -> Optional[User]:
        doc = await UserDocument.find_one(UserDocument.email == email)
        return doc.to_user() if doc else None

    async def save(self, user: User) -> User:
        doc = UserDocument.from_user(user)
        try:
            await doc.insert()
        except DuplicateKeyError:
            # 서비스의 사전 중복 체크를 통과한 동시 가입 요청
            logger.warning(f"[UserRepository] Unique index rejected email for user {user.id}")
            raise FieldValidationError("Email already registered")
        return doc.to_user()


def get_user_repository() -> UserRepository:
    return MongoUserRepository()
