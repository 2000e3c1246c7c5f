"""
shared/aws/sqs/publisher.py - 단일 메시지 전송 (send)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.exceptions import TransportError

from .directory import QueueDirectory

logger = logging.getLogger(__name__)

DATA_TYPE_STRING = "String"


def build_message_attributes(attributes: Mapping[str, str]) -> dict[str, dict[str, str]]:
    """key=value 문자열 쌍을 String 타입 MessageAttributes로 변환"""
    return {key: {"DataType": DATA_TYPE_STRING, "StringValue": value} for key, value in attributes.items()}


def send_message(
    client: Any,
    destination: str,
    body: str,
    attributes: Mapping[str, str] | None = None,
    message_group_id: str | None = None,
    deduplication_id: str | None = None,
) -> str:
    """메시지 하나 전송

    Args:
        client: boto3 SQS client
        destination: 대상 큐 이름 또는 URL
        body: 메시지 본문
        attributes: 메시지 속성 (비어 있으면 생략)
        message_group_id: FIFO 큐 메시지 그룹 ID
        deduplication_id: FIFO 큐 중복 제거 ID

    Returns:
        SQS가 발급한 MessageId

    Raises:
        TransportError: 큐 조회 또는 send_message 실패
    """
    queue_url = QueueDirectory(client).resolve_endpoint(destination)

    params: dict[str, Any] = {"QueueUrl": queue_url, "MessageBody": body}
    if attributes:
        params["MessageAttributes"] = build_message_attributes(attributes)
    if message_group_id:
        params["MessageGroupId"] = message_group_id
    if deduplication_id:
        params["MessageDeduplicationId"] = deduplication_id

    try:
        resp = client.send_message(**params)
    except (ClientError, BotoCoreError) as e:
        raise TransportError.from_client_error("send_message", e) from e

    message_id = resp["MessageId"]
    logger.info(f"메시지 전송: {queue_url.name} ({message_id})")
    return message_id
