# User 저장 모델 (Beanie Document)
# - 이메일은 unique 인덱스 (동시 가입 경쟁 시 최종 판정은 DB가 한다)
# - 전화번호는 사용자 문서 안에 임베드

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4
from beanie import Document, Indexed
from pydantic import BaseModel, Field

from .user import Phone, User


class PhoneRecord(BaseModel):
    number: Optional[str] = None
    citycode: Optional[str] = None
    countrycode: Optional[str] = None


class UserDocument(Document):
    id: UUID = Field(default_factory=uuid4)
    name: Optional[str] = None
    email: Indexed(str, unique=True)  # 중복 방지 인덱스
    password: str = Field(repr=False)
    created: datetime
    last_login: datetime
    is_active: bool = True
    token: Optional[str] = Field(default=None, repr=False)
    phones: List[PhoneRecord] = Field(default_factory=list)

    class Settings:
        name = "users"  # 컬렉션명

    @classmethod
    def from_user(cls, user: User) -> "UserDocument":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            password=user.password,
            created=user.created,
            last_login=user.last_login,
            is_active=user.is_active,
            token=user.token,
            phones=[
                PhoneRecord(number=p.number, citycode=p.citycode, countrycode=p.countrycode)
                for p in user.phones
            ],
        )

    def to_user(self) -> User:
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            password=self.password,
            created=self.created,
            last_login=self.last_login,
            is_active=self.is_active,
            token=self.token,
            phones=[
                Phone(user_id=self.id, number=p.number, citycode=p.citycode, countrycode=p.countrycode)
                for p in self.phones
            ],
        )
