# 사용자 라우터
# - 가입: POST /api/v1/users
# - 조회: GET /api/v1/users/{user_id}

from fastapi import APIRouter, Depends, HTTPException, status

from ...schemas.user_schema import CreateUserRequest, CreateUserResponse, ErrorResponse, UserResponse
from ...services.user_service import UserService, get_user_service

router = APIRouter(prefix="/users", tags=["users"])

@router.post(
    "",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="회원가입 (이메일/비밀번호 검증, 이메일 중복 체크 포함)",
)
async def create_user(payload: CreateUserRequest, service: UserService = Depends(get_user_service)):
    return await service.create_user(payload)

@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="사용자 조회 (비밀번호 제외)",
)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)):
    user = await service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
