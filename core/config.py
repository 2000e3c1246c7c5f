"""
core/config.py - 애플리케이션 설정

sqscli 전역 설정값과 환경변수 헬퍼를 제공합니다.

주요 구성 요소:
- Settings: 불변 설정 데이터클래스 (전역 인스턴스 settings)
- LogConfig: 로깅 설정 (LOG_LEVEL, LOG_FORMAT 환경변수)
- get_env_bool / get_env_int: 환경변수 변환 헬퍼
- get_default_profile / get_default_region: AWS 기본값 조회
- get_version: 설치된 패키지 버전

환경변수 오버라이드:
    SQSCLI_FETCH_MAX_WORKERS             속성 조회 동시 워커 수
    SQSCLI_DOWNLOAD_VISIBILITY_TIMEOUT   download 수신 시 visibility timeout (초)
    SQSCLI_LANG                          출력 언어 (ko/en)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

PACKAGE_NAME = "sqscli"
ENV_PREFIX = "SQSCLI_"

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


# =============================================================================
# 환경변수 헬퍼
# =============================================================================


def get_env_bool(name: str, default: bool = False) -> bool:
    """환경변수를 bool로 변환

    Args:
        name: 환경변수 이름
        default: 값이 없거나 해석할 수 없을 때 기본값

    Returns:
        변환된 bool 값
    """
    value = os.environ.get(name)
    if value is None:
        return default

    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def get_env_int(name: str, default: int, minimum: int | None = None, maximum: int | None = None) -> int:
    """환경변수를 int로 변환

    Args:
        name: 환경변수 이름
        default: 값이 없거나 숫자가 아닐 때 기본값
        minimum: 허용 최솟값 (벗어나면 이 값으로 보정)
        maximum: 허용 최댓값 (벗어나면 이 값으로 보정)

    Returns:
        변환된 int 값
    """
    value = os.environ.get(name)
    if value is None:
        result = default
    else:
        try:
            result = int(value)
        except ValueError:
            result = default

    if minimum is not None:
        result = max(minimum, result)
    if maximum is not None:
        result = min(maximum, result)
    return result


# =============================================================================
# 설정
# =============================================================================


@dataclass(frozen=True)
class Settings:
    """전역 설정 (불변)

    Attributes:
        DEFAULT_REGION: 리전 환경변수가 없을 때 사용할 리전
        API_TIMEOUT: botocore 읽기 타임아웃 (초)
        API_CONNECT_TIMEOUT: botocore 연결 타임아웃 (초)
        API_RETRY_COUNT: botocore 최대 재시도 횟수
        LIST_MAX_RESULTS: list_queues 1회 호출 최대 결과 수 (페이지네이션 없음)
        RECEIVE_BATCH_SIZE: receive_message 1회 최대 메시지 수 (SQS 상한 10)
        MOVE_VISIBILITY_TIMEOUT: mv 수신 시 visibility timeout (초)
        DOWNLOAD_VISIBILITY_TIMEOUT: download 수신 시 visibility timeout (초)
        FETCH_MAX_WORKERS: 큐 속성 병렬 조회 워커 수
        ARCHIVE_EXTENSION: 다운로드 파일 확장자
    """

    DEFAULT_REGION: str = "ap-northeast-2"
    API_TIMEOUT: int = 30
    API_CONNECT_TIMEOUT: int = 10
    API_RETRY_COUNT: int = 3

    LIST_MAX_RESULTS: int = 1000
    RECEIVE_BATCH_SIZE: int = 10
    MOVE_VISIBILITY_TIMEOUT: int = 5
    DOWNLOAD_VISIBILITY_TIMEOUT: int = field(
        default_factory=lambda: get_env_int(f"{ENV_PREFIX}DOWNLOAD_VISIBILITY_TIMEOUT", 2, minimum=0, maximum=43200)
    )
    FETCH_MAX_WORKERS: int = field(
        default_factory=lambda: get_env_int(f"{ENV_PREFIX}FETCH_MAX_WORKERS", 20, minimum=1, maximum=100)
    )

    ARCHIVE_EXTENSION: str = ".json"
    DEFAULT_LANG: str = field(default_factory=lambda: os.environ.get(f"{ENV_PREFIX}LANG", "ko"))


settings = Settings()


@dataclass
class LogConfig:
    """로깅 설정

    Attributes:
        level: 로그 레벨 이름
        format: logging 포맷 문자열
        date_format: 날짜 포맷
    """

    level: str = "WARNING"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @classmethod
    def from_env(cls) -> LogConfig:
        """LOG_LEVEL, LOG_FORMAT 환경변수에서 로드"""
        default = cls()
        return cls(
            level=os.environ.get("LOG_LEVEL", default.level).upper(),
            format=os.environ.get("LOG_FORMAT", default.format),
            date_format=default.date_format,
        )


# =============================================================================
# AWS 기본값
# =============================================================================


def get_default_profile() -> str | None:
    """AWS_PROFILE, AWS_DEFAULT_PROFILE 순으로 기본 프로파일 조회"""
    return os.environ.get("AWS_PROFILE") or os.environ.get("AWS_DEFAULT_PROFILE")


def get_default_region() -> str:
    """AWS_REGION, AWS_DEFAULT_REGION 순으로 기본 리전 조회

    둘 다 없으면 settings.DEFAULT_REGION을 반환합니다.
    """
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or settings.DEFAULT_REGION


@lru_cache(maxsize=1)
def get_version() -> str:
    """설치된 패키지 버전 반환 (미설치 상태면 0.0.0)"""
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version(PACKAGE_NAME)
    except PackageNotFoundError:
        return "0.0.0"
