"""
tests/core/auth/test_auth_session.py - core/auth/session.py 테스트
"""

from unittest.mock import MagicMock, patch

import pytest
from botocore.exceptions import NoRegionError, ProfileNotFound

from core.auth.session import get_session, get_sqs_client
from core.exceptions import ConfigError


class TestGetSession:
    """get_session 테스트"""

    def test_explicit_profile_and_region(self):
        with patch("core.auth.session.boto3.Session") as mock_session_class:
            get_session("dev", "us-east-1")

        mock_session_class.assert_called_once_with(profile_name="dev", region_name="us-east-1")

    def test_defaults_from_environment(self, monkeypatch):
        """프로파일/리전 생략 시 환경변수 사용"""
        monkeypatch.setenv("AWS_PROFILE", "env-profile")
        monkeypatch.setenv("AWS_REGION", "eu-west-1")

        with patch("core.auth.session.boto3.Session") as mock_session_class:
            get_session()

        mock_session_class.assert_called_once_with(profile_name="env-profile", region_name="eu-west-1")

    def test_profile_not_found(self):
        with patch("core.auth.session.boto3.Session", side_effect=ProfileNotFound(profile="missing")):
            with pytest.raises(ConfigError) as exc_info:
                get_session("missing")

        assert exc_info.value.config_key == "profile"
        assert isinstance(exc_info.value.cause, ProfileNotFound)


class TestGetSqsClient:
    """get_sqs_client 테스트"""

    def test_creates_sqs_client_with_retry_config(self):
        mock_session = MagicMock()
        mock_session.region_name = "ap-northeast-2"

        with patch("core.auth.session.boto3.Session", return_value=mock_session):
            client = get_sqs_client("dev")

        assert client is mock_session.client.return_value
        args, kwargs = mock_session.client.call_args
        assert args[0] == "sqs"
        assert kwargs["region_name"] == "ap-northeast-2"
        assert kwargs["config"].retries["mode"] == "adaptive"

    def test_client_creation_failure(self):
        mock_session = MagicMock()
        mock_session.region_name = None
        mock_session.client.side_effect = NoRegionError()

        with patch("core.auth.session.boto3.Session", return_value=mock_session):
            with pytest.raises(ConfigError) as exc_info:
                get_sqs_client()

        assert exc_info.value.config_key == "sqs_client"
