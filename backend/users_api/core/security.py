# 보안 유틸리티
# - 비밀번호 해싱/검증 (passlib bcrypt)
# - 가입 시 발급하는 JWT 토큰 생성/디코드

import uuid
from datetime import datetime, timedelta, timezone
from passlib.context import CryptContext
import jwt

from .config import Settings, settings
from ..models.user import User

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


class EncryptionService:
    def __init__(self, config: Settings = settings):
        self.secret_key = config.JWT_SECRET_KEY
        self.algorithm = config.JWT_ALGORITHM
        self.expires_delta = timedelta(minutes=config.TOKEN_EXPIRE_MINUTES)

    def hash_password(self, password: str) -> str:
        return pwd_context.hash(password)

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        return pwd_context.verify(plain_password, hashed_password)

    def issue_token(self, user: User) -> str:
        """사용자 정보로 토큰을 발급합니다.

        jti(랜덤) 를 포함하므로 같은 사용자라도 저장된 값으로 다시 만들 수 없습니다.
        """
        now = datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.name,
            "jti": uuid.uuid4().hex,
            "exp": now + self.expires_delta,
            "iat": now,
            "nbf": now,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict:
        return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])


def get_encryption_service() -> EncryptionService:
    return EncryptionService(settings)
