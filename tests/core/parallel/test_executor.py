"""
tests/core/parallel/test_executor.py - ParallelExecutor 테스트
"""

import threading
from unittest.mock import patch

import pytest

from core.exceptions import TransportError
from core.parallel.decorators import RetryConfig
from core.parallel.executor import MAX_WORKERS_LIMIT, ParallelConfig, ParallelExecutor, parallel_map
from core.parallel.types import ErrorCategory

NO_RETRY = RetryConfig(max_retries=0)


class TestParallelConfig:
    """ParallelConfig 테스트"""

    def test_default_values(self):
        config = ParallelConfig()

        assert config.max_workers == 20
        assert config.retry_config is None

    def test_invalid_workers(self):
        with pytest.raises(ValueError):
            ParallelConfig(max_workers=0)

    def test_workers_clamped(self):
        assert ParallelConfig(max_workers=500).max_workers == MAX_WORKERS_LIMIT


class TestParallelExecutor:
    """ParallelExecutor 테스트"""

    def test_empty_items(self):
        result = ParallelExecutor().execute([], lambda item: item)

        assert result.results == ()

    def test_one_result_per_item(self):
        """항목마다 결과 하나 (성공/실패 혼합)"""

        def work(item: str) -> str:
            if item.startswith("bad"):
                raise ValueError(f"{item} failed")
            return item.upper()

        items = ["a", "bad-1", "b", "bad-2", "c"]
        result = ParallelExecutor(ParallelConfig(max_workers=3, retry_config=NO_RETRY)).execute(items, work)

        assert len(result.results) == len(items)
        assert sorted(result.get_data()) == ["A", "B", "C"]
        assert sorted(e.identifier for e in result.get_errors()) == ["bad-1", "bad-2"]

    def test_all_fail_does_not_hang(self):
        """모든 작업이 실패해도 모든 결과를 받고 반환"""

        def work(item: str) -> str:
            raise RuntimeError("boom")

        result = parallel_map([str(i) for i in range(50)], work, max_workers=5, retry_config=NO_RETRY)

        assert len(result.results) == 50
        assert result.success_count == 0
        assert result.error_count == 50

    def test_duplicate_items_each_executed(self):
        calls: list[str] = []
        lock = threading.Lock()

        def work(item: str) -> str:
            with lock:
                calls.append(item)
            return item

        result = parallel_map(["orders", "orders"], work, retry_config=NO_RETRY)

        assert len(result.results) == 2
        assert calls == ["orders", "orders"]

    def test_non_retryable_error_not_retried(self, mock_client_error):
        calls = []

        def work(item: str) -> str:
            calls.append(item)
            raise TransportError.from_client_error("get_queue_url", mock_client_error("QueueDoesNotExist"))

        result = parallel_map(["missing"], work, retry_config=RetryConfig(max_retries=3))

        error = result.get_errors()[0]
        assert len(calls) == 1
        assert error.category == ErrorCategory.NOT_FOUND
        assert error.error_code == "QueueDoesNotExist"
        assert error.retries == 0
        assert isinstance(error.original_exception, TransportError)

    def test_retryable_error_retried_then_succeeds(self, mock_client_error):
        attempts = {"count": 0}

        def work(item: str) -> str:
            attempts["count"] += 1
            if attempts["count"] < 3:
                raise mock_client_error("Throttling")
            return "ok"

        with patch("core.parallel.executor.time.sleep") as mock_sleep:
            result = parallel_map(["orders"], work, retry_config=RetryConfig(max_retries=3, jitter=False))

        assert result.get_data() == ["ok"]
        assert attempts["count"] == 3
        assert mock_sleep.call_count == 2

    def test_retries_exhausted(self, mock_client_error):
        def work(item: str) -> str:
            raise mock_client_error("Throttling")

        with patch("core.parallel.executor.time.sleep"):
            result = parallel_map(["orders"], work, retry_config=RetryConfig(max_retries=2))

        error = result.get_errors()[0]
        assert error.category == ErrorCategory.THROTTLING
        assert error.retries == 2
