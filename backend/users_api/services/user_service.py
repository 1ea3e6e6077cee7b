# 사용자 서비스 레이어
# - 가입: 이메일 검증 -> 비밀번호 검증 -> 조립 -> 저장 -> 응답 변환
# - 조회: id 로 사용자 조회 (형식이 틀린 id 는 에러가 아니라 "없음")

import logging
from typing import Optional
from uuid import UUID
from fastapi import Depends

from ..core.config import settings
from ..core.exceptions import FieldValidationError
from ..core.security import EncryptionService, get_encryption_service
from ..repositories.user_repository import UserRepository, get_user_repository
from ..schemas.user_mapper import map_to_create_user_response, map_to_user_response
from ..schemas.user_schema import CreateUserRequest, CreateUserResponse, UserResponse
from .user_assembler import UserAssembler
from .validator import UserValidator, ValidationPatterns

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: UserRepository, encryption: EncryptionService, patterns: ValidationPatterns):
        self.repo = repo
        self.validator = UserValidator(patterns, repo)
        self.assembler = UserAssembler(encryption)

    async def create_user(self, request: CreateUserRequest) -> CreateUserResponse:
        await self.validator.validate_email(request.email)
        self.validator.validate_password(request.password)

        user = self.assembler.build_user(request)
        user = await self.repo.save(user)
        logger.info(f"[UserService] Created user {user.id} with {len(user.phones)} phone(s)")

        return map_to_create_user_response(user)

    async def get_user_by_id(self, user_id: Optional[str]) -> Optional[UserResponse]:
        if user_id is None or not user_id.strip():
            raise FieldValidationError("User id required")

        if not self.validator.is_user_id(user_id):
            logger.debug("[UserService] Malformed user id treated as not found")
            return None

        user = await self.repo.find_by_id(UUID(user_id))
        if user is None:
            return None
        return map_to_user_response(user)


# 패턴은 프로세스 시작 시 한 번만 컴파일
_patterns = ValidationPatterns.from_settings(settings)


def get_user_service(
    repo: UserRepository = Depends(get_user_repository),
    encryption: EncryptionService = Depends(get_encryption_service),
) -> UserService:
    return UserService(repo, encryption, _patterns)
