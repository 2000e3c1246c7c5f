"""
core/auth/session.py - boto3 세션/클라이언트 생성

프로파일과 리전으로 boto3 Session을 만들고,
retry가 설정된 SQS client를 반환합니다.
(자격 증명 해석은 boto3 기본 체인에 맡김)
"""

from __future__ import annotations

import logging
from typing import Any

import boto3
from botocore.exceptions import BotoCoreError, ProfileNotFound

from core.config import get_default_profile, get_default_region
from core.exceptions import ConfigError

logger = logging.getLogger(__name__)


def get_session(profile_name: str | None = None, region: str | None = None) -> boto3.Session:
    """boto3 Session 생성

    Args:
        profile_name: AWS 프로파일 (None이면 AWS_PROFILE 또는 기본 체인)
        region: 리전 (None이면 AWS_REGION / AWS_DEFAULT_REGION / 설정 기본값)

    Returns:
        boto3.Session

    Raises:
        ConfigError: 프로파일이 존재하지 않는 경우
    """
    profile_name = profile_name or get_default_profile()
    region = region or get_default_region()

    try:
        session = boto3.Session(profile_name=profile_name, region_name=region)
    except ProfileNotFound as e:
        raise ConfigError("profile", f"프로파일을 찾을 수 없습니다: {profile_name}", cause=e) from e

    logger.debug(f"세션 생성: profile={profile_name or '(default)'}, region={region}")
    return session


def get_sqs_client(profile_name: str | None = None, region: str | None = None) -> Any:
    """retry/timeout이 설정된 SQS client 생성

    Raises:
        ConfigError: 세션 또는 client 생성 실패
    """
    from core.parallel.client import get_client

    session = get_session(profile_name, region)
    try:
        return get_client(session, "sqs", region_name=session.region_name)
    except BotoCoreError as e:
        raise ConfigError("sqs_client", "SQS client 생성 실패", cause=e) from e
