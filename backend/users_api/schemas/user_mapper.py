# User -> 응답 스키마 변환 (비밀번호는 절대 포함하지 않음)

from typing import List

from ..models.user import Phone, User
from .user_schema import CreateUserResponse, PhoneDTO, UserResponse


def map_phones(phones: List[Phone]) -> List[PhoneDTO]:
    return [PhoneDTO(number=p.number, citycode=p.citycode, countrycode=p.countrycode) for p in phones]


def map_to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created=user.created,
        last_login=user.last_login,
        is_active=user.is_active,
        token=user.token,
        phones=map_phones(user.phones),
    )


def map_to_create_user_response(user: User) -> CreateUserResponse:
    return CreateUserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        created=user.created,
        last_login=user.last_login,
        is_active=user.is_active,
        token=user.token,
        phones=map_phones(user.phones),
    )
