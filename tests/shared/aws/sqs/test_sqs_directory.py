"""
tests/shared/aws/sqs/test_sqs_directory.py - QueueDirectory 테스트
"""

from unittest.mock import MagicMock

import pytest

from core.exceptions import TransportError
from shared.aws.sqs.directory import QueueDirectory


class TestListQueues:
    def test_empty(self, moto_sqs):
        assert QueueDirectory(moto_sqs).list_queues() == []

    def test_lists_all_queues(self, moto_sqs, create_queue):
        create_queue("orders")
        create_queue("billing")

        urls = QueueDirectory(moto_sqs).list_queues()

        assert sorted(url.name for url in urls) == ["billing", "orders"]

    def test_request_parameters(self):
        client = MagicMock()
        client.list_queues.return_value = {"QueueUrls": ["https://sqs.example.com/1/orders"]}

        urls = QueueDirectory(client).list_queues()

        client.list_queues.assert_called_once_with(MaxResults=1000, QueueNamePrefix="")
        assert urls[0].name == "orders"

    def test_truncated_listing_is_not_paginated(self, caplog):
        """NextToken이 있어도 첫 페이지만 반환"""
        client = MagicMock()
        client.list_queues.return_value = {"QueueUrls": ["https://sqs.example.com/1/a"], "NextToken": "next"}

        with caplog.at_level("WARNING"):
            urls = QueueDirectory(client).list_queues()

        assert len(urls) == 1
        assert client.list_queues.call_count == 1
        assert "1000" in caplog.text

    def test_transport_error(self, mock_client_error):
        client = MagicMock()
        client.list_queues.side_effect = mock_client_error("AccessDenied", "denied", "ListQueues")

        with pytest.raises(TransportError) as exc_info:
            QueueDirectory(client).list_queues()

        assert exc_info.value.operation == "list_queues"
        assert exc_info.value.error_code == "AccessDenied"


class TestResolve:
    def test_resolve(self, moto_sqs, create_queue):
        url = create_queue("orders")

        resolved = QueueDirectory(moto_sqs).resolve("orders")

        assert resolved == url
        assert resolved.name == "orders"

    def test_resolve_missing_queue(self, moto_sqs):
        with pytest.raises(TransportError) as exc_info:
            QueueDirectory(moto_sqs).resolve("missing")

        assert exc_info.value.operation == "get_queue_url"
        assert exc_info.value.is_not_found is True

    def test_resolve_endpoint_passes_url_through(self):
        client = MagicMock()
        url = "https://sqs.ap-northeast-2.amazonaws.com/123456789012/orders"

        resolved = QueueDirectory(client).resolve_endpoint(url)

        assert resolved == url
        client.get_queue_url.assert_not_called()

    def test_resolve_endpoint_resolves_name(self, mock_sqs_client):
        resolved = QueueDirectory(mock_sqs_client).resolve_endpoint("orders")

        assert resolved.name == "orders"
        mock_sqs_client.get_queue_url.assert_called_once_with(QueueName="orders")
