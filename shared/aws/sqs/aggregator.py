"""
shared/aws/sqs/aggregator.py - 큐 속성 병렬 조회

큐 이름마다 작업 하나(URL 조회 → get_queue_attributes → QueueAttributes)를
병렬 실행기에 제출하고, 이름 수만큼의 결과(성공 또는 실패)를 모두 모은 뒤
이름순으로 정렬된 레코드와 실패 목록을 함께 반환합니다.

Example:
    result = fetch_queue_attributes(client, ["orders", "billing"])
    for record in result.records:
        print(record)
    if not result.success:
        print(result.get_error_summary())
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import settings
from core.exceptions import SQSCliError, TransportError
from core.parallel import ParallelExecutionResult, RetryConfig, TaskError, parallel_map

from .directory import QueueDirectory
from .types import QueueAttributes

logger = logging.getLogger(__name__)

# 스로틀링/네트워크 재시도는 client의 botocore adaptive retry가 담당
NO_RETRY_CONFIG = RetryConfig(max_retries=0)


@dataclass(frozen=True)
class AggregateResult:
    """큐 속성 조회 결과

    Attributes:
        records: 성공한 큐의 속성 (이름순 정렬)
        errors: 실패한 큐마다 하나씩의 에러
    """

    records: list[QueueAttributes] = field(default_factory=list)
    errors: list[TaskError] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def first_error(self) -> TaskError | None:
        return self.errors[0] if self.errors else None

    def get_error_summary(self) -> str:
        return "\n".join(str(e) for e in self.errors)

    def raise_for_errors(self) -> None:
        """실패가 있으면 첫 번째 실패의 원본 예외를 다시 발생"""
        error = self.first_error
        if error is None:
            return
        if isinstance(error.original_exception, SQSCliError):
            raise error.original_exception
        raise SQSCliError(str(error), cause=error.original_exception)


def fetch_queue_attributes(
    client: Any,
    names: Sequence[str],
    max_workers: int | None = None,
    retry_config: RetryConfig | None = None,
) -> AggregateResult:
    """여러 큐의 속성을 병렬 조회

    Args:
        client: boto3 SQS client (워커 간 공유)
        names: 큐 이름 목록
        max_workers: 동시 워커 수 (None이면 settings.FETCH_MAX_WORKERS)
        retry_config: 작업 단위 재시도 설정 (None이면 재시도 없음)

    Returns:
        AggregateResult: 이름순 레코드 + 실패 목록. 일부가 실패해도 항상 반환됨
    """
    if not names:
        return AggregateResult()

    directory = QueueDirectory(client)

    def fetch_one(name: str) -> QueueAttributes:
        url = directory.resolve_endpoint(name)
        try:
            resp = client.get_queue_attributes(QueueUrl=url, AttributeNames=["All"])
        except (ClientError, BotoCoreError) as e:
            raise TransportError.from_client_error("get_queue_attributes", e) from e
        return QueueAttributes.from_attributes(name, resp.get("Attributes", {}), url=url)

    result: ParallelExecutionResult[QueueAttributes] = parallel_map(
        names,
        fetch_one,
        max_workers=max_workers or settings.FETCH_MAX_WORKERS,
        retry_config=retry_config if retry_config is not None else NO_RETRY_CONFIG,
    )

    records = sorted(result.get_data(), key=lambda r: r.name)
    errors = sorted(result.get_errors(), key=lambda e: e.identifier)

    if errors:
        logger.warning(f"큐 속성 조회 실패 {len(errors)}건 / 요청 {len(names)}건")

    return AggregateResult(records=records, errors=errors)
