# 커스텀 예외 클래스 정의
# 서비스 계층은 이 예외들을 그대로 던지고, HTTP 상태코드 매핑은 main.py 에서 한다.

class UserServiceError(Exception):
    """사용자 서비스 관련 기본 예외 클래스"""
    pass


class FieldValidationError(UserServiceError):
    """입력 필드 하나가 검증에 실패했을 때 발생하는 예외

    저장(persistence) 이전에 발생하므로, 이 예외가 올라오면
    어떤 기록도 남지 않은 상태입니다.

    Attributes:
        message: 사용자에게 그대로 돌려줄 메시지 (예: "Invalid email")
    """
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class DatabaseConnectionError(UserServiceError):
    """MongoDB 연결/초기화 실패 시 발생하는 예외

    Attributes:
        uri: 접속을 시도한 MongoDB URI
        message: 에러 메시지
    """
    def __init__(self, uri: str, message: str):
        self.uri = uri
        self.message = message
        super().__init__(f"[MongoDB] 연결 실패 ({uri}): {message}")
