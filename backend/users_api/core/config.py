# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 이 파일은 backend/users_api/core/config.py 이므로 4단계 위가 프로젝트 루트
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"

# 이메일 형식은 고정 (정책 변경 대상 아님)
EMAIL_REGEX = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*\.[A-Za-z]{2,}"
UUID_REGEX = r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"


class Settings(BaseSettings):
    APP_NAME: str = "users-manager"
    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    MONGODB_URI: str = "mongodb://localhost:27017/users_manager"
    DB_CONNECT_ATTEMPTS: int = 3

    JWT_SECRET_KEY: str = Field(..., description="토큰 서명용 비밀키. 반드시 강력한 랜덤 문자열로 설정하세요.")
    JWT_ALGORITHM: str = "HS256"
    TOKEN_EXPIRE_MINUTES: int = 60

    # 비밀번호 정책은 재배포 없이 바꿀 수 있도록 환경변수로 받는다
    # 기본값: 8자 이상, 대문자/소문자/숫자 각 1개 이상
    PASSWORD_REGEX: str = Field(
        default=r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d).{8,}",
        description="비밀번호 형식 정규식 (전체 일치)",
    )

    CORS_ALLOW_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
