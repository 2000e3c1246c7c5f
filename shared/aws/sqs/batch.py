"""
shared/aws/sqs/batch.py - 메시지 배치 수신/전송/삭제 헬퍼

mv(transfer)와 download(archive)가 공유하는 배치 단위 호출입니다.
각 함수는 SQS 호출 실패를 TransportError로,
배치 응답의 Failed 항목을 PartialBatchFailure로 변환합니다.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import settings
from core.exceptions import PartialBatchFailure, TransportError

logger = logging.getLogger(__name__)

# FIFO 큐 순서/중복 제거 키 (시스템 속성)
ATTR_MESSAGE_GROUP_ID = "MessageGroupId"
ATTR_MESSAGE_DEDUPLICATION_ID = "MessageDeduplicationId"

# 재전송 시 유지할 메시지 속성 필드
_MESSAGE_ATTRIBUTE_FIELDS = ("DataType", "StringValue", "BinaryValue")


def receive_batch(client: Any, queue_url: str, visibility_timeout: int) -> list[dict[str, Any]]:
    """메시지 최대 RECEIVE_BATCH_SIZE개 수신 (모든 속성 포함)

    Raises:
        TransportError: receive_message 호출 실패
    """
    try:
        resp = client.receive_message(
            QueueUrl=queue_url,
            MaxNumberOfMessages=settings.RECEIVE_BATCH_SIZE,
            VisibilityTimeout=visibility_timeout,
            AttributeNames=["All"],
            MessageAttributeNames=["All"],
        )
    except (ClientError, BotoCoreError) as e:
        raise TransportError.from_client_error("receive_message", e) from e

    return resp.get("Messages", [])


def remaining_allowance(batch: list[dict[str, Any]], processed: int, limit: int) -> list[dict[str, Any]]:
    """limit을 넘지 않도록 배치 자르기 (limit 0 = 무제한)"""
    if limit <= 0:
        return batch
    return batch[: max(limit - processed, 0)]


def _copy_message_attributes(attributes: dict[str, Any]) -> dict[str, Any]:
    # 수신 응답에는 StringListValues 등 전송 시 쓰지 않는 빈 필드가 섞여 있음
    return {
        key: {f: value[f] for f in _MESSAGE_ATTRIBUTE_FIELDS if f in value} for key, value in attributes.items()
    }


def build_send_entries(messages: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """send_message_batch 항목 생성

    메시지 ID를 배치 항목 Id로 사용하고, 본문과 메시지 속성은 그대로,
    FIFO 큐의 MessageGroupId / MessageDeduplicationId는 있으면 유지합니다.
    """
    entries = []
    for message in messages:
        entry: dict[str, Any] = {
            "Id": message["MessageId"],
            "MessageBody": message["Body"],
        }
        if message.get("MessageAttributes"):
            entry["MessageAttributes"] = _copy_message_attributes(message["MessageAttributes"])

        system_attributes = message.get("Attributes", {})
        if ATTR_MESSAGE_GROUP_ID in system_attributes:
            entry["MessageGroupId"] = system_attributes[ATTR_MESSAGE_GROUP_ID]
        if ATTR_MESSAGE_DEDUPLICATION_ID in system_attributes:
            entry["MessageDeduplicationId"] = system_attributes[ATTR_MESSAGE_DEDUPLICATION_ID]

        entries.append(entry)
    return entries


def build_delete_entries(messages: list[dict[str, Any]]) -> list[dict[str, str]]:
    """delete_message_batch 항목 생성 (receipt handle 기준)"""
    return [{"Id": m["MessageId"], "ReceiptHandle": m["ReceiptHandle"]} for m in messages]


def _check_batch_response(operation: str, resp: dict[str, Any], total: int) -> None:
    failed = resp.get("Failed", [])
    successful = resp.get("Successful", [])

    # Failed가 비어 있어도 성공 항목 수가 모자라면 실패로 간주
    failed_count = max(len(failed), total - len(successful))
    if failed_count > 0:
        raise PartialBatchFailure(operation, failed_count=failed_count, total=total, failures=failed)


def send_batch(client: Any, queue_url: str, messages: list[dict[str, Any]]) -> None:
    """메시지 배치 전송 - 전체 항목이 성공해야 정상 반환

    Raises:
        TransportError: send_message_batch 호출 실패
        PartialBatchFailure: 일부 항목 전송 실패
    """
    try:
        resp = client.send_message_batch(QueueUrl=queue_url, Entries=build_send_entries(messages))
    except (ClientError, BotoCoreError) as e:
        raise TransportError.from_client_error("send_message_batch", e) from e

    _check_batch_response("send_message_batch", resp, len(messages))


def delete_batch(client: Any, queue_url: str, messages: list[dict[str, Any]]) -> None:
    """메시지 배치 삭제 - 전체 항목이 성공해야 정상 반환

    Raises:
        TransportError: delete_message_batch 호출 실패
        PartialBatchFailure: 일부 항목 삭제 실패
    """
    try:
        resp = client.delete_message_batch(QueueUrl=queue_url, Entries=build_delete_entries(messages))
    except (ClientError, BotoCoreError) as e:
        raise TransportError.from_client_error("delete_message_batch", e) from e

    _check_batch_response("delete_message_batch", resp, len(messages))
