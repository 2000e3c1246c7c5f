"""
core/parallel/executor.py - 병렬 작업 실행기

항목 목록에 대해 같은 작업 함수를 ThreadPoolExecutor로 병렬 실행합니다.
각 항목은 성공이든 실패든 정확히 하나의 TaskResult를 만들며,
실행기는 제출한 개수만큼의 결과를 모은 뒤 반환합니다.
(작업 하나가 실패해도 나머지를 기다리며 멈추지 않음)

주요 구성 요소:
- ParallelConfig: 병렬 실행 설정 (워커 수, 재시도)
- ParallelExecutor: 항목별 병렬 실행기
- parallel_map: 간편한 병렬 실행 래퍼 함수

Example:
    from core.parallel import parallel_map

    def fetch(name):
        return directory.resolve(name)

    result = parallel_map(["orders", "billing"], fetch, max_workers=10)
    urls = result.get_data()
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import TypeVar

from .decorators import DEFAULT_RETRY_CONFIG, RetryConfig, categorize_error, get_error_code, is_retryable
from .types import ErrorCategory, ParallelExecutionResult, TaskError, TaskResult

logger = logging.getLogger(__name__)

T = TypeVar("T")

MAX_WORKERS_LIMIT = 100


def _clear_exception_chain(e: BaseException) -> None:
    """traceback + chained exception 메모리 누수 방지"""
    e.__traceback__ = None
    if e.__context__ is not None:
        e.__context__.__traceback__ = None
    if e.__cause__ is not None:
        e.__cause__.__traceback__ = None


@dataclass
class ParallelConfig:
    """병렬 실행 설정

    Attributes:
        max_workers: 최대 동시 스레드 수 (1~100)
        retry_config: 재시도 설정
    """

    max_workers: int = 20
    retry_config: RetryConfig | None = None

    def __post_init__(self) -> None:
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.max_workers > MAX_WORKERS_LIMIT:
            self.max_workers = MAX_WORKERS_LIMIT


class ParallelExecutor:
    """항목별 병렬 실행기

    특징:
    - ThreadPoolExecutor 기반 (워커 수 상한 있음)
    - 항목마다 정확히 하나의 TaskResult 보장
    - 재시도 가능한 에러는 지수 백오프 재시도

    Example:
        executor = ParallelExecutor(ParallelConfig(max_workers=20))
        result = executor.execute(queue_names, fetch_attributes)

        print(f"성공: {result.success_count}, 실패: {result.error_count}")
    """

    def __init__(self, config: ParallelConfig | None = None):
        """초기화

        Args:
            config: 병렬 실행 설정 (None이면 기본값)
        """
        self.config = config or ParallelConfig()
        self._retry_config = self.config.retry_config or DEFAULT_RETRY_CONFIG

    def execute(
        self,
        items: Iterable[str],
        func: Callable[[str], T],
        service: str = "sqs",
    ) -> ParallelExecutionResult[T]:
        """작업 함수를 모든 항목에 병렬 실행

        Args:
            items: 작업 식별자 목록 (큐 이름 등). 중복도 각각 실행됨
            func: (item) -> T 함수
            service: 로깅용 서비스 이름

        Returns:
            ParallelExecutionResult[T]: 항목 수와 같은 개수의 결과
        """
        tasks = list(items)
        if not tasks:
            logger.debug("실행할 작업이 없습니다")
            return ParallelExecutionResult()

        workers = min(self.config.max_workers, len(tasks))
        logger.info(f"병렬 실행 시작: {len(tasks)}개 작업, max_workers={workers}, service={service}")

        results: list[TaskResult[T]] = []
        start_time = time.monotonic()

        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._execute_single, func, item): item for item in tasks}

            # 제출한 future마다 결과 하나씩 수집
            for future in as_completed(futures):
                item = futures[future]
                try:
                    results.append(future.result())
                except Exception as e:
                    # _execute_single은 예외를 결과로 바꾸므로 여기 도달하면 실행기 자체 오류
                    logger.error(f"작업 실행 중 예외 [{item}]: {e}")
                    _clear_exception_chain(e)
                    results.append(
                        TaskResult(
                            identifier=item,
                            success=False,
                            error=TaskError(
                                identifier=item,
                                category=ErrorCategory.UNKNOWN,
                                error_code="ExecutorError",
                                message=str(e),
                                original_exception=e,
                            ),
                        )
                    )

        total_time = (time.monotonic() - start_time) * 1000
        exec_result = ParallelExecutionResult(results=tuple(results))

        logger.info(
            f"병렬 실행 완료: 성공 {exec_result.success_count}, 실패 {exec_result.error_count}, 총 {total_time:.0f}ms"
        )

        return exec_result

    def _execute_single(self, func: Callable[[str], T], item: str) -> TaskResult[T]:
        """단일 작업 실행 (워커 스레드 내에서 호출)

        재시도 가능한 에러(throttling, network 등)는 RetryConfig에 따라
        지수 백오프로 재시도하고, 재시도 불가능한 에러는 즉시 실패 결과로 반환합니다.

        Returns:
            TaskResult[T]: 성공 시 데이터, 실패 시 에러 정보 포함
        """
        start_time = time.monotonic()

        for attempt in range(self._retry_config.max_retries + 1):
            try:
                data = func(item)
                return TaskResult(
                    identifier=item,
                    success=True,
                    data=data,
                    duration_ms=(time.monotonic() - start_time) * 1000,
                )

            except Exception as e:
                if not is_retryable(e) or attempt >= self._retry_config.max_retries:
                    return self._failure(item, e, attempt, start_time)

                delay = self._retry_config.get_delay(attempt)
                logger.debug(f"[{item}] 시도 {attempt + 1} 실패, {delay:.2f}초 후 재시도...")
                time.sleep(delay)

        # 재시도 소진 (도달하면 안 됨)
        return TaskResult(
            identifier=item,
            success=False,
            error=TaskError(
                identifier=item,
                category=ErrorCategory.UNKNOWN,
                error_code="Unknown",
                message="최대 재시도 횟수 초과",
                retries=self._retry_config.max_retries,
            ),
            duration_ms=(time.monotonic() - start_time) * 1000,
        )

    @staticmethod
    def _failure(item: str, error: Exception, attempt: int, start_time: float) -> TaskResult:
        """예외를 실패 TaskResult로 변환"""
        _clear_exception_chain(error)
        return TaskResult(
            identifier=item,
            success=False,
            error=TaskError(
                identifier=item,
                category=categorize_error(error),
                error_code=get_error_code(error),
                message=str(error),
                retries=attempt,
                original_exception=error,
            ),
            duration_ms=(time.monotonic() - start_time) * 1000,
        )


def parallel_map(
    items: Iterable[str],
    func: Callable[[str], T],
    max_workers: int = 20,
    retry_config: RetryConfig | None = None,
    service: str = "sqs",
) -> ParallelExecutionResult[T]:
    """병렬 실행 편의 함수

    ParallelExecutor를 간단하게 사용할 수 있는 래퍼입니다.

    Args:
        items: 작업 식별자 목록
        func: (item) -> T
        max_workers: 최대 동시 스레드 수
        retry_config: 재시도 설정 (None이면 기본값)
        service: 로깅용 서비스 이름

    Returns:
        ParallelExecutionResult[T]
    """
    config = ParallelConfig(max_workers=max_workers, retry_config=retry_config)
    return ParallelExecutor(config).execute(items, func, service=service)
