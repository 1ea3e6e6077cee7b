# 재시도 로직 유틸리티
# MongoDB 초기 연결은 컨테이너 기동 순서 때문에 잠깐 실패할 수 있으므로
# tenacity 로 지수 백오프 재시도를 건다. (요청 처리 경로에는 재시도를 두지 않는다)

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)
import logging
from typing import Type, Tuple

from .exceptions import DatabaseConnectionError

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (DatabaseConnectionError,)
):
    """
    DB 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    Args:
        max_attempts: 최대 시도 횟수 (처음 1번 포함)
        initial_wait: 첫 재시도 전 대기 시간 (초)
        max_wait: 최대 대기 시간 (초)
        exceptions: 재시도할 예외 타입

    모든 시도가 실패하면 마지막 예외를 그대로 다시 던집니다 (reraise).

    사용 예시:
        @create_db_retry_decorator(max_attempts=5)
        async def connect():
            ...
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )
