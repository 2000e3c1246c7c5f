"""
tests/conftest.py - pytest 공통 픽스처

SQS API 모킹과 테스트 헬퍼를 제공합니다.

Usage:
    def test_something(moto_sqs, create_queue):
        # moto_sqs: moto로 모킹된 SQS client
        # create_queue: 테스트 큐 생성 헬퍼
        pass
"""

import sys
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


TEST_REGION = "ap-northeast-2"
TEST_ACCOUNT = "123456789012"


# =============================================================================
# 환경 설정
# =============================================================================


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """테스트용 AWS 환경 변수 설정 (실제 자격 증명 사용 방지)"""
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SECURITY_TOKEN", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    monkeypatch.delenv("AWS_DEFAULT_PROFILE", raising=False)

    yield


# =============================================================================
# AWS 모킹 픽스처
# =============================================================================


@pytest.fixture
def moto_sqs():
    """moto로 모킹된 SQS client"""
    import boto3
    from moto import mock_aws

    with mock_aws():
        yield boto3.client("sqs", region_name=TEST_REGION)


@pytest.fixture
def create_queue(moto_sqs):
    """테스트 큐 생성 헬퍼

    Returns:
        (name, **attributes) -> queue_url 함수
    """

    def _create(name: str, **attributes: str) -> str:
        params: dict[str, Any] = {"QueueName": name}
        if attributes:
            params["Attributes"] = attributes
        return moto_sqs.create_queue(**params)["QueueUrl"]

    return _create


@pytest.fixture
def fill_queue(moto_sqs):
    """큐에 메시지 n개 전송 헬퍼 (본문: "message-<i>")"""

    def _fill(queue_url: str, count: int) -> None:
        for start in range(0, count, 10):
            entries = [
                {"Id": str(i), "MessageBody": f"message-{i}"} for i in range(start, min(start + 10, count))
            ]
            moto_sqs.send_message_batch(QueueUrl=queue_url, Entries=entries)

    return _fill


@pytest.fixture
def mock_sqs_client():
    """SQS 클라이언트 모킹 (실패 경로 테스트용)"""
    mock_client = MagicMock()
    mock_client.get_queue_url.side_effect = lambda QueueName: {
        "QueueUrl": f"https://sqs.{TEST_REGION}.amazonaws.com/{TEST_ACCOUNT}/{QueueName}"
    }
    mock_client.receive_message.return_value = {"Messages": []}
    yield mock_client


# =============================================================================
# 헬퍼 함수
# =============================================================================


def create_mock_client_error(code: str, message: str = "Test error", operation: str = "TestOperation"):
    """테스트용 ClientError 생성

    Args:
        code: 에러 코드
        message: 에러 메시지
        operation: 작업 이름

    Returns:
        ClientError 인스턴스
    """
    from botocore.exceptions import ClientError

    error_response = {
        "Error": {
            "Code": code,
            "Message": message,
        },
        "ResponseMetadata": {
            "RequestId": "test-request-id",
            "HTTPStatusCode": 400,
        },
    }
    return ClientError(error_response, operation)


@pytest.fixture
def mock_client_error():
    """ClientError 생성 팩토리 픽스처"""
    return create_mock_client_error


@pytest.fixture
def make_message():
    """receive_message 응답 형식의 메시지 dict 생성 팩토리"""

    def _make(index: int, **attributes: str) -> dict[str, Any]:
        return {
            "MessageId": f"msg-{index}",
            "ReceiptHandle": f"rh-{index}",
            "MD5OfBody": "d41d8cd98f00b204e9800998ecf8427e",
            "Body": f"body-{index}",
            "Attributes": dict(attributes),
        }

    return _make
