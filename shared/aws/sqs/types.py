"""
shared/aws/sqs/types.py - SQS 큐 식별자 및 속성 모델

주요 구성 요소:
- QueueUrl: 큐 URL 값 타입 (마지막 경로 세그먼트 = 큐 이름)
- ArnParts / parse_arn: ARN을 6개 세그먼트로 분해
- RedrivePolicy: RedrivePolicy 속성(JSON) 디코딩 및 DLQ 대상 표시
- QueueAttributes: 큐 속성 스냅샷 (표시용 레코드)
- parse_int_or_default: 숫자 속성 파싱 (실패 시 기본값, 예외 전파 없음)
- TransferResult: mv/download 결과 (처리 건수 + 중단 원인)
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

if TYPE_CHECKING:
    from core.exceptions import SQSCliError

# get_queue_attributes 속성 이름
ATTR_NUMBER_OF_MESSAGES = "ApproximateNumberOfMessages"
ATTR_NOT_VISIBLE = "ApproximateNumberOfMessagesNotVisible"
ATTR_VISIBILITY_TIMEOUT = "VisibilityTimeout"
ATTR_REDRIVE_POLICY = "RedrivePolicy"
ATTR_QUEUE_ARN = "QueueArn"

# 표시용 컬럼 (탭 구분 레코드 순서)
DISPLAY_COLUMNS = ("NAME", "MESSAGES", "IN-FLIGHT", "TIMEOUT", "MAX", "DEAD-LETTER-TARGET")


class QueueUrl(str):
    """SQS 큐 URL

    SQS가 발급한 불투명 식별자이며, 마지막 경로 세그먼트가 큐 이름입니다.

    Example:
        >>> QueueUrl("https://sqs.ap-northeast-2.amazonaws.com/123456789012/orders").name
        'orders'
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        return self.split("/")[-1]


def is_queue_url(value: str) -> bool:
    """큐 URL인지 (이름이 아닌지) 확인

    scheme과 host가 모두 있는 절대 URL만 URL로 간주합니다.
    """
    parsed = urlparse(value)
    return bool(parsed.scheme and parsed.netloc)


def parse_int_or_default(value: Any, default: int = 0) -> int:
    """숫자 속성 파싱 - 없거나 해석할 수 없으면 기본값"""
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


# =============================================================================
# ARN / Redrive Policy
# =============================================================================


@dataclass(frozen=True)
class ArnParts:
    """arn:partition:service:region:account:resource"""

    partition: str
    service: str
    region: str
    account: str
    resource: str


def parse_arn(arn: str) -> ArnParts:
    """ARN을 6개 표준 세그먼트로 분해

    Raises:
        ValueError: 'arn:'으로 시작하는 6개 세그먼트 형식이 아닌 경우
    """
    parts = arn.split(":", 5)
    if len(parts) != 6 or parts[0] != "arn":
        raise ValueError(f"invalid ARN: {arn!r}")
    return ArnParts(partition=parts[1], service=parts[2], region=parts[3], account=parts[4], resource=parts[5])


@dataclass(frozen=True)
class RedrivePolicy:
    """큐의 RedrivePolicy 속성

    Attributes:
        target_arn: DLQ ARN (deadLetterTargetArn)
        max_receive_count: DLQ로 보내기 전 최대 수신 횟수
    """

    target_arn: str = ""
    max_receive_count: int = 0

    @classmethod
    def from_json(cls, raw: str | None) -> RedrivePolicy | None:
        """RedrivePolicy JSON 디코딩 (형식이 잘못되면 None)"""
        if not raw:
            return None
        try:
            data = json.loads(raw)
        except (TypeError, ValueError):
            return None
        if not isinstance(data, dict):
            return None

        return cls(
            target_arn=str(data.get("deadLetterTargetArn") or ""),
            max_receive_count=parse_int_or_default(data.get("maxReceiveCount")),
        )

    def resolve_target(self, queue_arn: str | None) -> str:
        """DLQ 대상 표시값

        원본 큐와 같은 계정/리전이면 큐 이름, 아니면 ARN 그대로 반환합니다.
        """
        try:
            source = parse_arn(queue_arn or "")
            target = parse_arn(self.target_arn)
        except ValueError:
            return self.target_arn

        if source.account == target.account and source.region == target.region:
            return target.resource
        return self.target_arn


# =============================================================================
# 큐 속성
# =============================================================================


@dataclass(frozen=True)
class QueueAttributes:
    """큐 속성 스냅샷

    요청마다 새로 만들며 캐시하거나 수정하지 않습니다.
    """

    name: str
    number_of_messages: int = 0
    messages_not_visible: int = 0
    visibility_timeout: int = 0
    dead_letter_target: str = ""
    max_receive_count: int = 0
    url: str = ""

    @classmethod
    def from_attributes(cls, name: str, attributes: dict[str, str], url: str = "") -> QueueAttributes:
        """get_queue_attributes 응답의 Attributes로부터 생성"""
        dead_letter_target = ""
        max_receive_count = 0

        policy = RedrivePolicy.from_json(attributes.get(ATTR_REDRIVE_POLICY))
        if policy is not None:
            dead_letter_target = policy.resolve_target(attributes.get(ATTR_QUEUE_ARN))
            max_receive_count = policy.max_receive_count

        return cls(
            name=name,
            number_of_messages=parse_int_or_default(attributes.get(ATTR_NUMBER_OF_MESSAGES)),
            messages_not_visible=parse_int_or_default(attributes.get(ATTR_NOT_VISIBLE)),
            visibility_timeout=parse_int_or_default(attributes.get(ATTR_VISIBILITY_TIMEOUT)),
            dead_letter_target=dead_letter_target,
            max_receive_count=max_receive_count,
            url=url,
        )

    def as_row(self) -> list[str]:
        """DISPLAY_COLUMNS 순서의 표시용 값"""
        return [
            self.name,
            str(self.number_of_messages),
            str(self.messages_not_visible),
            str(self.visibility_timeout),
            str(self.max_receive_count),
            self.dead_letter_target,
        ]

    def __str__(self) -> str:
        return "\t".join(self.as_row())


# =============================================================================
# 전송 결과
# =============================================================================


@dataclass(frozen=True)
class TransferResult:
    """mv / download 결과

    실패해도 그 전까지 처리한 건수는 버리지 않습니다.

    Attributes:
        processed: 처리 완료된 메시지 수
        error: 중단 원인 (정상 종료면 None)
    """

    processed: int
    error: SQSCliError | None = None

    @property
    def success(self) -> bool:
        return self.error is None
