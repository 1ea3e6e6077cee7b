# 입력 검증
# - 이메일 형식 / 비밀번호 형식 / 이메일 중복
# - 정규식은 서비스 생성 시 한 번만 컴파일해서 ValidationPatterns 로 주입

import re
import logging
from dataclasses import dataclass
from typing import Optional, Pattern

from ..core.config import EMAIL_REGEX, UUID_REGEX, Settings
from ..core.exceptions import FieldValidationError
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationPatterns:
    email: Pattern
    password: Pattern
    user_id: Pattern

    @classmethod
    def from_settings(cls, config: Settings) -> "ValidationPatterns":
        return cls(
            email=re.compile(EMAIL_REGEX),
            password=re.compile(config.PASSWORD_REGEX),
            user_id=re.compile(UUID_REGEX),
        )


class UserValidator:
    def __init__(self, patterns: ValidationPatterns, repo: UserRepository):
        self.patterns = patterns
        self.repo = repo

    async def validate_email(self, email: Optional[str]) -> None:
        if email is None or not self.patterns.email.fullmatch(email):
            raise FieldValidationError("Invalid email")

        # 저장소 조회가 있으므로 순수 함수가 아님 (빠른 거절용, 최종 판정은 unique 인덱스)
        existing = await self.repo.find_by_email(email)
        if existing is not None:
            logger.info(f"[Validator] Rejected duplicate email registration (user {existing.id})")
            raise FieldValidationError("Email already registered")

    def validate_password(self, password: Optional[str]) -> None:
        if password is None or not self.patterns.password.fullmatch(password):
            raise FieldValidationError("Invalid password")

    def is_user_id(self, user_id: str) -> bool:
        return self.patterns.user_id.fullmatch(user_id) is not None
