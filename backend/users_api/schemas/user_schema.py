# 요청/응답 스키마 정의 (Pydantic 모델)
# 요청 필드는 모두 Optional: 누락/형식 오류는 422 가 아니라 서비스 검증(400)으로 처리

from datetime import datetime
from typing import List, Optional
from uuid import UUID
from pydantic import BaseModel, Field


class PhoneDTO(BaseModel):
    number: Optional[str] = None
    citycode: Optional[str] = None
    countrycode: Optional[str] = None


class CreateUserRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)
    phones: Optional[List[PhoneDTO]] = None


class UserResponse(BaseModel):
    id: UUID
    name: Optional[str] = None
    email: str
    created: datetime
    last_login: datetime
    is_active: bool
    token: Optional[str] = None
    phones: List[PhoneDTO] = []


class CreateUserResponse(UserResponse):
    token: str


class ErrorResponse(BaseModel):
    message: str
