"""
core/exceptions.py - 통합 예외 계층 구조

sqscli 전체에서 사용되는 예외 클래스들을 정의합니다.
일관된 예외 처리와 에러 메시지를 제공합니다.

예외 계층 구조:
    SQSCliError (베이스)
    ├── TransportError (SQS API 호출 실패)
    ├── PartialBatchFailure (배치 전송/삭제 일부 실패)
    ├── ArchiveWriteError (메시지 파일 저장 실패)
    ├── ConfigError (설정 관련)
    └── ValidationError (입력 검증)

Usage:
    from core.exceptions import TransportError

    try:
        sqs.get_queue_url(QueueName=name)
    except ClientError as e:
        raise TransportError.from_client_error("get_queue_url", e) from e
"""

from typing import Any, Dict, Optional

# =============================================================================
# 베이스 예외
# =============================================================================


class SQSCliError(Exception):
    """sqscli 기본 예외 클래스

    모든 커스텀 예외의 베이스 클래스입니다.

    Attributes:
        message: 에러 메시지
        cause: 원인 예외 (체이닝용)
        details: 추가 상세 정보
    """

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.details = details or {}

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


# =============================================================================
# SQS 호출 관련 예외
# =============================================================================


class TransportError(SQSCliError):
    """SQS API 호출 실패 예외

    boto3/botocore의 ClientError, BotoCoreError를 래핑하여
    실패한 작업 이름과 원인을 함께 전달합니다.
    """

    def __init__(
        self,
        operation: str,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        cause: Optional[Exception] = None,
        service: str = "sqs",
    ):
        message = f"{service}.{operation} 실패"
        if error_code:
            message = f"{message} ({error_code})"
        if error_message:
            message = f"{message}: {error_message}"

        super().__init__(message, cause)
        self.service = service
        self.operation = operation
        self.error_code = error_code
        self.error_message = error_message
        self.details.update(
            {
                "service": service,
                "operation": operation,
                "error_code": error_code,
            }
        )

    def __str__(self) -> str:
        # ClientError는 코드/메시지가 이미 message에 포함됨
        if self.error_code or not self.cause:
            return self.message
        return f"{self.message}: {self.cause}"

    @property
    def is_not_found(self) -> bool:
        """큐가 존재하지 않아 실패했는지 여부"""
        return is_not_found(self)

    @classmethod
    def from_client_error(
        cls,
        operation: str,
        client_error: Exception,
        service: str = "sqs",
    ) -> "TransportError":
        """botocore 예외로부터 생성

        Args:
            operation: API 작업 이름 (예: "receive_message")
            client_error: ClientError 또는 BotoCoreError 예외
            service: AWS 서비스 이름

        Returns:
            TransportError 인스턴스
        """
        error_code = None
        error_message = None

        # ClientError 형식 파싱
        response = getattr(client_error, "response", None)
        if isinstance(response, dict):
            error_info = response.get("Error", {})
            error_code = error_info.get("Code")
            error_message = error_info.get("Message")

        return cls(
            operation=operation,
            error_code=error_code,
            error_message=error_message,
            cause=client_error,
            service=service,
        )


class PartialBatchFailure(SQSCliError):
    """배치 요청 중 일부 항목 실패 예외

    send_message_batch / delete_message_batch 호출 자체는 성공했지만
    응답의 Failed 목록이 비어있지 않은 경우입니다.
    """

    def __init__(
        self,
        operation: str,
        failed_count: int,
        total: int,
        failures: Optional[list] = None,
    ):
        verb = "전송" if operation == "send_message_batch" else "삭제"
        message = f"메시지 {total}개 중 {failed_count}개 {verb} 실패 ({operation})"
        super().__init__(message)
        self.operation = operation
        self.failed_count = failed_count
        self.total = total
        self.failures = failures or []
        self.details.update(
            {
                "operation": operation,
                "failed_count": failed_count,
                "total": total,
                "failure_codes": sorted({f.get("Code", "") for f in self.failures}),
            }
        )


class ArchiveWriteError(SQSCliError):
    """메시지 파일 저장 실패 예외"""

    def __init__(self, path: str, cause: Optional[Exception] = None):
        super().__init__(f"파일 저장 실패 [{path}]", cause)
        self.path = path
        self.details["path"] = path


# =============================================================================
# 설정 / 입력 관련 예외
# =============================================================================


class ConfigError(SQSCliError):
    """설정 관련 예외"""

    def __init__(
        self,
        key: str,
        message: str,
        cause: Optional[Exception] = None,
    ):
        full_message = f"설정 오류 [{key}]: {message}"
        super().__init__(full_message, cause)
        self.config_key = key
        self.details["config_key"] = key


class ValidationError(SQSCliError):
    """입력 검증 오류"""

    def __init__(
        self,
        field: str,
        value: Any,
        expected: str,
        cause: Optional[Exception] = None,
    ):
        message = f"검증 오류 [{field}]: 예상값 '{expected}', 실제값 '{value}'"
        super().__init__(message, cause)
        self.field = field
        self.value = value
        self.expected = expected
        self.details.update(
            {
                "field": field,
                "value": str(value),
                "expected": expected,
            }
        )


# =============================================================================
# 예외 유틸리티 함수
# =============================================================================

ACCESS_DENIED_CODES = {
    "AccessDenied",
    "AccessDeniedException",
    "UnauthorizedAccess",
}

THROTTLING_CODES = {
    "Throttling",
    "ThrottlingException",
    "RequestLimitExceeded",
    "TooManyRequestsException",
    "RateExceeded",
    "RequestThrottled",
}

NOT_FOUND_CODES = {
    "QueueDoesNotExist",
    "AWS.SimpleQueueService.NonExistentQueue",
    "ResourceNotFoundException",
    "NotFoundException",
}


def get_client_error_code(error: Exception) -> str:
    """예외에서 AWS 에러 코드 추출 (래핑된 예외 포함)

    Args:
        error: 확인할 예외

    Returns:
        에러 코드. 없으면 빈 문자열
    """
    if isinstance(error, TransportError):
        return error.error_code or ""

    # HTTPClientError 계열은 response가 None
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        return response.get("Error", {}).get("Code", "")

    return ""


def is_access_denied(error: Exception) -> bool:
    """액세스 거부 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        액세스 거부 오류이면 True
    """
    return get_client_error_code(error) in ACCESS_DENIED_CODES


def is_throttling(error: Exception) -> bool:
    """스로틀링 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        스로틀링 오류이면 True
    """
    return get_client_error_code(error) in THROTTLING_CODES


def is_not_found(error: Exception) -> bool:
    """큐를 찾을 수 없는 오류인지 확인

    Args:
        error: 확인할 예외

    Returns:
        리소스 없음 오류이면 True
    """
    return get_client_error_code(error) in NOT_FOUND_CODES


def format_error_for_user(error: Exception) -> str:
    """사용자에게 표시할 에러 메시지 포맷팅

    Args:
        error: 예외

    Returns:
        사용자 친화적인 에러 메시지
    """
    friendly_messages = {
        "AccessDenied": "권한이 없습니다. IAM 정책을 확인하세요.",
        "ExpiredToken": "인증 토큰이 만료되었습니다. 다시 로그인하세요.",
        "InvalidClientTokenId": "잘못된 자격 증명입니다.",
        "Throttling": "요청이 너무 많습니다. 잠시 후 다시 시도하세요.",
        "QueueDoesNotExist": "큐가 존재하지 않습니다.",
        "AWS.SimpleQueueService.NonExistentQueue": "큐가 존재하지 않습니다.",
    }

    code = get_client_error_code(error)
    if code in friendly_messages:
        if isinstance(error, TransportError):
            return f"{error.service}.{error.operation}: {friendly_messages[code]}"
        return friendly_messages[code]

    if isinstance(error, SQSCliError):
        # 커스텀 예외는 이미 포맷팅됨
        return str(error)

    # boto3 ClientError
    response = getattr(error, "response", None)
    if isinstance(response, dict):
        error_info = response.get("Error", {})
        message = error_info.get("Message", str(error))
        return f"{code or 'UnknownError'}: {message}"

    return str(error)
