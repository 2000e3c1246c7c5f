# core/__init__.py
"""
core - sqscli 인프라

CLI와 SQS 엔진이 공유하는 인프라 패키지입니다.
세션 생성, 병렬 처리, 설정, 예외 계층을 통합합니다.

아키텍처:
    core/
    ├── auth/           # boto3 세션/SQS client 생성
    ├── parallel/       # 병렬 처리 (executor, retry, 에러 분류)
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    # 설정 사용
    from core.config import settings, get_default_region
    region = get_default_region()  # "ap-northeast-2"

    # 예외 처리
    from core.exceptions import TransportError, is_not_found
    try:
        url = directory.resolve("orders")
    except TransportError as e:
        if is_not_found(e):
            print("큐가 없습니다")

    # 세션
    from core.auth import get_sqs_client
    client = get_sqs_client(profile_name="dev", region="ap-northeast-2")
"""

from core import auth, config, exceptions, parallel

__all__: list[str] = [
    # 서브패키지
    "auth",
    "parallel",
    # 모듈
    "config",
    "exceptions",
]
