"""
shared/aws/sqs/directory.py - 큐 목록 조회 및 이름 → URL 변환

Note:
    list_queues는 1회 호출에 최대 1000개까지만 반환하며 페이지네이션하지 않습니다.
"""

from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.config import settings
from core.exceptions import TransportError

from .types import QueueUrl, is_queue_url

logger = logging.getLogger(__name__)


class QueueDirectory:
    """큐 목록/URL 조회

    Args:
        client: boto3 SQS client
    """

    def __init__(self, client: Any):
        self.client = client

    def list_queues(self) -> list[QueueUrl]:
        """큐 URL 목록 (SQS 응답 순서 그대로)

        Raises:
            TransportError: list_queues 호출 실패
        """
        try:
            resp = self.client.list_queues(MaxResults=settings.LIST_MAX_RESULTS, QueueNamePrefix="")
        except (ClientError, BotoCoreError) as e:
            raise TransportError.from_client_error("list_queues", e) from e

        urls = [QueueUrl(u) for u in resp.get("QueueUrls", [])]
        if resp.get("NextToken"):
            logger.warning(f"큐가 {settings.LIST_MAX_RESULTS}개를 초과하여 일부만 조회되었습니다")

        logger.debug(f"큐 {len(urls)}개 조회")
        return urls

    def resolve(self, name: str) -> QueueUrl:
        """큐 이름으로 URL 조회

        Raises:
            TransportError: 큐가 없거나 get_queue_url 호출 실패 (없으면 is_not_found == True)
        """
        try:
            resp = self.client.get_queue_url(QueueName=name)
        except (ClientError, BotoCoreError) as e:
            raise TransportError.from_client_error("get_queue_url", e) from e
        return QueueUrl(resp["QueueUrl"])

    def resolve_endpoint(self, name_or_url: str) -> QueueUrl:
        """URL은 그대로, 이름이면 resolve()로 변환"""
        if is_queue_url(name_or_url):
            return QueueUrl(name_or_url)
        return self.resolve(name_or_url)
