"""
tests/core/test_core_config.py - core/config.py 테스트
"""

import pytest

from core.config import (
    LogConfig,
    Settings,
    get_default_profile,
    get_default_region,
    get_env_bool,
    get_env_int,
    get_version,
    settings,
)


class TestSettings:
    """Settings 데이터클래스 테스트"""

    def test_settings_is_frozen(self):
        """설정이 불변인지 확인"""
        with pytest.raises(Exception):  # FrozenInstanceError
            settings.DEFAULT_REGION = "us-east-1"

    def test_default_values(self):
        """기본값 확인"""
        assert settings.DEFAULT_REGION == "ap-northeast-2"
        assert settings.API_TIMEOUT == 30
        assert settings.API_RETRY_COUNT == 3
        assert settings.LIST_MAX_RESULTS == 1000
        assert settings.ARCHIVE_EXTENSION == ".json"

    def test_sqs_batch_limits(self):
        """SQS 배치/visibility 기본값"""
        assert settings.RECEIVE_BATCH_SIZE == 10
        assert settings.MOVE_VISIBILITY_TIMEOUT == 5

    def test_env_overrides(self, monkeypatch):
        """SQSCLI_* 환경변수로 덮어쓰기"""
        monkeypatch.setenv("SQSCLI_DOWNLOAD_VISIBILITY_TIMEOUT", "30")
        monkeypatch.setenv("SQSCLI_FETCH_MAX_WORKERS", "4")
        monkeypatch.setenv("SQSCLI_LANG", "en")

        custom = Settings()

        assert custom.DOWNLOAD_VISIBILITY_TIMEOUT == 30
        assert custom.FETCH_MAX_WORKERS == 4
        assert custom.DEFAULT_LANG == "en"

    def test_env_defaults(self, monkeypatch):
        """환경변수가 없으면 기본값"""
        monkeypatch.delenv("SQSCLI_DOWNLOAD_VISIBILITY_TIMEOUT", raising=False)
        monkeypatch.delenv("SQSCLI_FETCH_MAX_WORKERS", raising=False)

        custom = Settings()

        assert custom.DOWNLOAD_VISIBILITY_TIMEOUT == 2
        assert custom.FETCH_MAX_WORKERS == 20

    @pytest.mark.parametrize("value, expected", [("0", 1), ("-5", 1), ("500", 100)])
    def test_fetch_max_workers_clamped(self, monkeypatch, value, expected):
        """워커 수는 1~100 범위로 보정"""
        monkeypatch.setenv("SQSCLI_FETCH_MAX_WORKERS", value)

        assert Settings().FETCH_MAX_WORKERS == expected

    def test_download_visibility_timeout_not_negative(self, monkeypatch):
        monkeypatch.setenv("SQSCLI_DOWNLOAD_VISIBILITY_TIMEOUT", "-1")

        assert Settings().DOWNLOAD_VISIBILITY_TIMEOUT == 0



class TestEnvHelpers:
    """환경변수 헬퍼 테스트"""

    @pytest.mark.parametrize("value", ["true", "1", "YES", " on "])
    def test_get_env_bool_true(self, monkeypatch, value):
        monkeypatch.setenv("SQSCLI_TEST_FLAG", value)
        assert get_env_bool("SQSCLI_TEST_FLAG") is True

    @pytest.mark.parametrize("value", ["false", "0", "no", "OFF"])
    def test_get_env_bool_false(self, monkeypatch, value):
        monkeypatch.setenv("SQSCLI_TEST_FLAG", value)
        assert get_env_bool("SQSCLI_TEST_FLAG", default=True) is False

    def test_get_env_bool_unparseable_uses_default(self, monkeypatch):
        monkeypatch.setenv("SQSCLI_TEST_FLAG", "maybe")
        assert get_env_bool("SQSCLI_TEST_FLAG", default=True) is True

    def test_get_env_bool_missing(self, monkeypatch):
        monkeypatch.delenv("SQSCLI_TEST_FLAG", raising=False)
        assert get_env_bool("SQSCLI_TEST_FLAG") is False

    def test_get_env_int(self, monkeypatch):
        monkeypatch.setenv("SQSCLI_TEST_INT", "42")
        assert get_env_int("SQSCLI_TEST_INT", 0) == 42

    def test_get_env_int_invalid(self, monkeypatch):
        """숫자가 아니면 기본값"""
        monkeypatch.setenv("SQSCLI_TEST_INT", "abc")
        assert get_env_int("SQSCLI_TEST_INT", 7) == 7

    def test_get_env_int_bounds(self, monkeypatch):
        monkeypatch.setenv("SQSCLI_TEST_INT", "0")
        assert get_env_int("SQSCLI_TEST_INT", 7, minimum=1) == 1

        monkeypatch.setenv("SQSCLI_TEST_INT", "250")
        assert get_env_int("SQSCLI_TEST_INT", 7, minimum=1, maximum=100) == 100

    def test_get_env_int_bounds_apply_to_default(self, monkeypatch):
        monkeypatch.delenv("SQSCLI_TEST_INT", raising=False)
        assert get_env_int("SQSCLI_TEST_INT", -3, minimum=0) == 0



class TestAwsDefaults:
    """AWS 기본 프로파일/리전 조회"""

    def test_default_profile_from_aws_profile(self, monkeypatch):
        monkeypatch.setenv("AWS_PROFILE", "dev")
        monkeypatch.setenv("AWS_DEFAULT_PROFILE", "other")
        assert get_default_profile() == "dev"

    def test_default_profile_fallback(self, monkeypatch):
        monkeypatch.setenv("AWS_DEFAULT_PROFILE", "other")
        assert get_default_profile() == "other"

    def test_default_profile_none(self):
        assert get_default_profile() is None

    def test_default_region_priority(self, monkeypatch):
        monkeypatch.setenv("AWS_REGION", "us-east-1")
        assert get_default_region() == "us-east-1"

    def test_default_region_fallback(self, monkeypatch):
        monkeypatch.delenv("AWS_REGION", raising=False)
        monkeypatch.delenv("AWS_DEFAULT_REGION", raising=False)
        assert get_default_region() == settings.DEFAULT_REGION


class TestLogConfig:
    """LogConfig 테스트"""

    def test_defaults(self):
        config = LogConfig()
        assert config.level == "WARNING"
        assert "%(message)s" in config.format

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "%(message)s")

        config = LogConfig.from_env()

        assert config.level == "DEBUG"
        assert config.format == "%(message)s"


class TestVersion:
    def test_get_version_returns_string(self):
        version = get_version()
        assert isinstance(version, str)
        assert version
