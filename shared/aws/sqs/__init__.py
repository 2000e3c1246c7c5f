"""
shared/aws/sqs - SQS 큐 운영 엔진

큐 목록/속성 조회, 큐 간 메시지 이동, 메시지 파일 저장, 메시지 전송을 제공합니다.

하위 모듈:
- types: QueueUrl, QueueAttributes, RedrivePolicy, TransferResult
- directory: 큐 목록 조회, 이름 → URL 변환
- aggregator: 큐 속성 병렬 조회
- transfer: 큐 간 메시지 이동 (receive → send batch → delete batch)
- archive: 메시지 파일 저장 (receive → 파일 → 선택적 delete batch)
- publisher: 단일 메시지 전송

Example:
    from core.auth.session import get_sqs_client
    from shared.aws.sqs import SQSClient

    sqs = SQSClient(get_sqs_client(profile_name="dev"))
    result = sqs.move("orders-dlq", "orders", limit=100)
    print(result.processed, result.error)
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from .aggregator import AggregateResult, fetch_queue_attributes
from .archive import download_messages
from .directory import QueueDirectory
from .publisher import send_message
from .transfer import move_messages
from .types import QueueAttributes, QueueUrl, RedrivePolicy, TransferResult, is_queue_url


class SQSClient:
    """boto3 SQS client에 각 작업을 묶은 진입점

    Args:
        client: boto3 SQS client
        max_workers: 속성 병렬 조회 워커 수 (None이면 설정값)
    """

    def __init__(self, client: Any, max_workers: int | None = None):
        self.client = client
        self.max_workers = max_workers
        self.directory = QueueDirectory(client)

    def list_queues(self) -> list[QueueUrl]:
        return self.directory.list_queues()

    def get_queue_url(self, name: str) -> QueueUrl:
        return self.directory.resolve(name)

    def info(self, names: Sequence[str]) -> AggregateResult:
        return fetch_queue_attributes(self.client, names, max_workers=self.max_workers)

    def move(self, source: str, destination: str, limit: int = 0) -> TransferResult:
        return move_messages(self.client, source, destination, limit)

    def download(
        self,
        source: str,
        destination_dir: str | Path,
        limit: int = 1,
        delete_after: bool = False,
    ) -> TransferResult:
        return download_messages(self.client, source, destination_dir, limit, delete_after)

    def send(
        self,
        destination: str,
        body: str,
        attributes: Mapping[str, str] | None = None,
        message_group_id: str | None = None,
        deduplication_id: str | None = None,
    ) -> str:
        return send_message(
            self.client,
            destination,
            body,
            attributes,
            message_group_id=message_group_id,
            deduplication_id=deduplication_id,
        )


__all__ = [
    "SQSClient",
    "QueueDirectory",
    "AggregateResult",
    "QueueAttributes",
    "QueueUrl",
    "RedrivePolicy",
    "TransferResult",
    "is_queue_url",
    "fetch_queue_attributes",
    "move_messages",
    "download_messages",
    "send_message",
]
