# FastAPI 진입점
# - Beanie ODM 초기화 (MongoDB, 실패 시 재시도)
# - 라우터 라우팅
# - CORS 설정
# - FieldValidationError -> 400 응답 매핑

import logging
import uvicorn
from datetime import datetime, timezone
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie

from .core.config import settings
from .core.exceptions import DatabaseConnectionError, FieldValidationError
from .core.retry import create_db_retry_decorator
from .models.user_document import UserDocument
from .api.v1.users import router as users_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Users Manager API",
    description="사용자 등록/조회 서비스",
    version="1.0.0"
)

origins = [o.strip() for o in settings.CORS_ALLOW_ORIGINS.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins or ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(FieldValidationError)
async def field_validation_handler(request: Request, exc: FieldValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": exc.message})

async def open_database():
    # 시도 1회: 실패한 클라이언트는 닫고, 재시도 때 새로 만든다
    client = AsyncIOMotorClient(settings.MONGODB_URI, serverSelectionTimeoutMS=5000, uuidRepresentation="standard")
    try:
        await client.admin.command('ping')
        db = client.get_default_database()
        await init_beanie(database=db, document_models=[UserDocument])
    except Exception as e:
        client.close()
        raise DatabaseConnectionError(settings.MONGODB_URI, str(e)) from e

connect_db = create_db_retry_decorator(max_attempts=settings.DB_CONNECT_ATTEMPTS)(open_database)

# Beanie 초기화 (앱 시작 시 1회)
@app.on_event("startup")
async def app_init():
    try:
        await connect_db()
        logger.info(f"[MongoDB] Connected: {settings.MONGODB_URI}")
    except DatabaseConnectionError as e:
        # 서버는 뜨지만 /api/v1/users 요청은 DB 가 올라올 때까지 실패한다
        logger.error(f"{e} (after {settings.DB_CONNECT_ATTEMPTS} attempts)")

@app.get("/")
async def root():
    return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(tz=timezone.utc).isoformat()}

@app.get("/health")
async def health_check():
    return {"status": "ok", "app": settings.APP_NAME, "version": "1.0.0"}

app.include_router(users_router, prefix="/api/v1")

def run():
    """`users-manager` 콘솔 스크립트 / `python -m users_api.main` 진입점"""
    uvicorn.run("users_api.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())

if __name__ == "__main__":
    run()
