"""
shared/aws/sqs/archive.py - 메시지 파일 저장 (download)

수신한 메시지를 <MessageId>.json 파일로 하나씩 저장하고,
delete_after이면 배치 전체가 저장된 뒤 원본 큐에서 삭제합니다.

파일 형식:
    수신 응답의 메시지 dict 전체 (MessageId, ReceiptHandle, MD5OfBody, Body,
    Attributes, MessageAttributes). BinaryValue 등 bytes 값은 base64 문자열로 저장.
"""

from __future__ import annotations

import base64
import json
import logging
from pathlib import Path
from typing import Any

from core.config import settings
from core.exceptions import ArchiveWriteError, SQSCliError, ValidationError

from .batch import delete_batch, receive_batch, remaining_allowance
from .directory import QueueDirectory
from .types import TransferResult

logger = logging.getLogger(__name__)


def _encode_bytes(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def archive_path(destination_dir: Path, message: dict[str, Any]) -> Path:
    """메시지 저장 경로: <destination_dir>/<MessageId>.json"""
    return destination_dir / f"{message['MessageId']}{settings.ARCHIVE_EXTENSION}"


def write_message(destination_dir: Path, message: dict[str, Any]) -> Path:
    """메시지 하나를 JSON 파일로 저장

    Raises:
        ArchiveWriteError: 파일 쓰기 실패
    """
    path = archive_path(destination_dir, message)
    # 직렬화가 끝난 뒤에 파일을 열어 실패 시 빈 파일이 남지 않도록 함
    try:
        content = json.dumps(message, ensure_ascii=False, default=_encode_bytes) + "\n"
    except (TypeError, ValueError) as e:
        raise ArchiveWriteError(str(path), cause=e) from e

    try:
        path.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ArchiveWriteError(str(path), cause=e) from e
    return path


def download_messages(
    client: Any,
    source: str,
    destination_dir: str | Path,
    limit: int = 1,
    delete_after: bool = False,
    visibility_timeout: int | None = None,
) -> TransferResult:
    """source 큐의 메시지를 파일로 저장

    Args:
        client: boto3 SQS client
        source: 원본 큐 이름 또는 URL
        destination_dir: 저장 디렉토리 (없으면 생성)
        limit: 최대 저장 건수 (0 = 무제한)
        delete_after: 저장 후 원본 큐에서 삭제
        visibility_timeout: 수신 시 visibility timeout (None이면 설정값)

    Returns:
        TransferResult: 저장 건수와 중단 원인
    """
    if limit < 0:
        return TransferResult(0, ValidationError("limit", limit, ">= 0"))
    if visibility_timeout is None:
        visibility_timeout = settings.DOWNLOAD_VISIBILITY_TIMEOUT

    try:
        source_url = QueueDirectory(client).resolve_endpoint(source)
    except SQSCliError as e:
        return TransferResult(0, e)

    destination = Path(destination_dir)
    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        return TransferResult(0, ArchiveWriteError(str(destination), cause=e))

    logger.info(f"메시지 다운로드 시작: {source_url.name} → {destination} (limit={limit or '무제한'})")

    processed = 0
    while True:
        try:
            received = receive_batch(client, source_url, visibility_timeout)
        except SQSCliError as e:
            return _stopped(processed, e)

        if not received or (limit > 0 and processed >= limit):
            logger.info(f"메시지 다운로드 완료: {processed}건")
            return TransferResult(processed)

        messages = remaining_allowance(received, processed, limit)
        if not messages:
            return TransferResult(processed)

        # 순차 저장 - 실패 시 이미 쓴 파일은 그대로 둠
        for message in messages:
            try:
                write_message(destination, message)
            except ArchiveWriteError as e:
                return _stopped(processed, e)
            processed += 1

        if delete_after:
            try:
                delete_batch(client, source_url, messages)
            except SQSCliError as e:
                return _stopped(processed, e)

        logger.debug(f"배치 저장: {len(messages)}건 (누적 {processed}건)")


def _stopped(processed: int, error: SQSCliError) -> TransferResult:
    logger.warning(f"메시지 다운로드 중단: {processed}건 저장 후 {error}")
    return TransferResult(processed, error)
