"""
shared/aws/sqs/transfer.py - 큐 간 메시지 이동 (mv)

수신 → 대상 큐로 배치 전송 → 원본 큐에서 배치 삭제를 반복합니다.

보장:
- 대상 큐가 배치 전체를 받은 경우에만 원본에서 삭제 (전송 실패 시 원본에 남아
  visibility timeout 이후 다시 보임)
- 삭제가 실패하면 해당 메시지는 양쪽에 모두 존재할 수 있음 (at-least-once)
- limit > 0이면 이동 건수는 limit을 넘지 않음

Note:
    limit 0(무제한)이면 메시지가 계속 들어오는 큐에서는 끝나지 않을 수 있습니다.
    반복 횟수 상한은 두지 않습니다.
"""

from __future__ import annotations

import logging
from typing import Any

from core.config import settings
from core.exceptions import SQSCliError, ValidationError

from .batch import delete_batch, receive_batch, remaining_allowance, send_batch
from .directory import QueueDirectory
from .types import TransferResult

logger = logging.getLogger(__name__)


def move_messages(client: Any, source: str, destination: str, limit: int = 0) -> TransferResult:
    """source 큐의 메시지를 destination 큐로 이동

    Args:
        client: boto3 SQS client
        source: 원본 큐 이름 또는 URL
        destination: 대상 큐 이름 또는 URL
        limit: 최대 이동 건수 (0 = 무제한)

    Returns:
        TransferResult: 이동 건수와 중단 원인 (정상 종료면 error None)
    """
    if limit < 0:
        return TransferResult(0, ValidationError("limit", limit, ">= 0"))

    directory = QueueDirectory(client)
    try:
        source_url = directory.resolve_endpoint(source)
        destination_url = directory.resolve_endpoint(destination)
    except SQSCliError as e:
        return TransferResult(0, e)

    logger.info(f"메시지 이동 시작: {source_url.name} → {destination_url.name} (limit={limit or '무제한'})")

    processed = 0
    while True:
        try:
            received = receive_batch(client, source_url, settings.MOVE_VISIBILITY_TIMEOUT)
        except SQSCliError as e:
            return _stopped(processed, e)

        if not received or (limit > 0 and processed >= limit):
            logger.info(f"메시지 이동 완료: {processed}건")
            return TransferResult(processed)

        messages = remaining_allowance(received, processed, limit)
        if not messages:
            return TransferResult(processed)

        try:
            send_batch(client, destination_url, messages)
            # 전송이 모두 확인된 배치만 원본에서 삭제
            delete_batch(client, source_url, messages)
        except SQSCliError as e:
            return _stopped(processed, e)

        processed += len(messages)
        logger.debug(f"배치 이동: {len(messages)}건 (누적 {processed}건)")


def _stopped(processed: int, error: SQSCliError) -> TransferResult:
    logger.warning(f"메시지 이동 중단: {processed}건 이동 후 {error}")
    return TransferResult(processed, error)
