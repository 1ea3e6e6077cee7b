# 가입 요청 -> User 레코드 조립

from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID, uuid4

from ..core.security import EncryptionService
from ..models.user import Phone, User
from ..schemas.user_schema import CreateUserRequest, PhoneDTO


class UserAssembler:
    def __init__(self, encryption: EncryptionService):
        self.encryption = encryption

    def build_user(self, request: CreateUserRequest) -> User:
        user_id = uuid4()
        now = datetime.now(tz=timezone.utc)
        user = User(
            id=user_id,
            name=request.name,
            email=request.email,
            password=self.encryption.hash_password(request.password),
            created=now,
            last_login=now,
            is_active=True,
            phones=self.build_phones(request.phones, user_id),
        )
        # 토큰은 나머지 필드가 모두 채워진 뒤 마지막에 발급
        user.token = self.encryption.issue_token(user)
        return user

    def build_phones(self, phones: Optional[List[PhoneDTO]], user_id: UUID) -> List[Phone]:
        if not phones:
            return []
        return [
            Phone(user_id=user_id, number=p.number, citycode=p.citycode, countrycode=p.countrycode)
            for p in phones
        ]
