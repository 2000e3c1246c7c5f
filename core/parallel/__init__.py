"""
core/parallel - 병렬 처리 모듈

여러 큐에 대한 SQS 작업을 병렬로 안전하게 처리합니다.

주요 구성 요소:
- ParallelExecutor: 항목별 병렬 실행기 (항목당 결과 하나 보장)
- parallel_map: 간편한 병렬 실행 함수
- get_client: retry/timeout이 설정된 boto3 client 생성

Example:
    from core.parallel import parallel_map

    result = parallel_map(queue_names, fetch_attributes, max_workers=20)

    records = result.get_data()
    for error in result.get_errors():
        print(error)
"""

from .client import get_client
from .decorators import RetryConfig, categorize_error, get_error_code, is_retryable
from .executor import ParallelConfig, ParallelExecutor, parallel_map
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult

__all__: list[str] = [
    # Executor
    "ParallelExecutor",
    "ParallelConfig",
    "parallel_map",
    # Client (retry 적용)
    "get_client",
    # Retry / 에러 분류
    "RetryConfig",
    "categorize_error",
    "get_error_code",
    "is_retryable",
    # Types
    "ErrorCategory",
    "TaskError",
    "TaskResult",
    "ParallelExecutionResult",
]
