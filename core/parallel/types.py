"""
core/parallel/types.py - 병렬 실행 결과 타입

작업 단위마다 정확히 하나의 TaskResult(성공 또는 실패)를 만들고,
ParallelExecutionResult가 이를 모아 집계합니다.

주요 구성 요소:
- ErrorCategory: 에러 분류
- TaskError: 실패한 작업의 에러 정보
- TaskResult: 단일 작업 결과
- ParallelExecutionResult: 전체 실행 결과 집계
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorCategory(Enum):
    """에러 분류"""

    THROTTLING = "throttling"
    ACCESS_DENIED = "access_denied"
    NOT_FOUND = "not_found"
    NETWORK = "network"
    TIMEOUT = "timeout"
    EXPIRED_TOKEN = "expired_token"
    INVALID_REQUEST = "invalid_request"
    SERVICE_ERROR = "service_error"
    UNKNOWN = "unknown"


@dataclass
class TaskError:
    """실패한 작업의 에러 정보

    Attributes:
        identifier: 작업 식별자 (큐 이름 등)
        category: 에러 분류
        error_code: AWS 에러 코드 또는 예외 클래스명
        message: 에러 메시지
        retries: 실패 전까지 재시도한 횟수
        original_exception: 원본 예외
    """

    identifier: str
    category: ErrorCategory
    error_code: str
    message: str
    retries: int = 0
    original_exception: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.identifier}] {self.error_code}: {self.message}"


@dataclass
class TaskResult(Generic[T]):
    """단일 작업 결과

    success가 True이면 data, False이면 error가 채워집니다.
    """

    identifier: str
    success: bool
    data: T | None = None
    error: TaskError | None = None
    duration_ms: float = 0.0


@dataclass(frozen=True)
class ParallelExecutionResult(Generic[T]):
    """전체 병렬 실행 결과

    제출된 작업 수와 results 길이는 항상 같습니다.
    """

    results: tuple[TaskResult[T], ...] | list[TaskResult[T]] = ()

    @property
    def successful(self) -> list[TaskResult[T]]:
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[TaskResult[T]]:
        return [r for r in self.results if not r.success]

    @property
    def success_count(self) -> int:
        return len(self.successful)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    def get_data(self) -> list[T]:
        """성공한 작업의 데이터 목록 (None 제외)"""
        return [r.data for r in self.successful if r.data is not None]

    def get_errors(self) -> list[TaskError]:
        return [r.error for r in self.failed if r.error is not None]
