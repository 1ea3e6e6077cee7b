# User 도메인 모델
# - 서비스 계층이 다루는 사용자/전화번호 레코드
# - DB 문서(Beanie Document)와는 분리: models/user_document.py 참고

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4
from pydantic import BaseModel, Field


class Phone(BaseModel):
    user_id: UUID  # 소유 사용자 (전화번호는 항상 한 명의 사용자에 속함)
    number: Optional[str] = None
    citycode: Optional[str] = None
    countrycode: Optional[str] = None


class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: Optional[str] = None
    email: str
    password: str = Field(repr=False)  # 해시값만 저장
    created: datetime
    last_login: datetime
    is_active: bool = True
    token: Optional[str] = Field(default=None, repr=False)
    phones: List[Phone] = Field(default_factory=list)
