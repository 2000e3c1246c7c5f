# core/auth/__init__.py
"""
AWS 세션 모듈 (core/auth)

프로파일/리전으로 boto3 Session을 만들고 SQS client를 생성합니다.
자격 증명 해석(SSO, 정적 키, 환경변수, 인스턴스 역할)은 boto3 기본 체인에 맡깁니다.

사용 예시:
    from core.auth import get_session, get_sqs_client

    session = get_session(profile_name="dev")
    client = get_sqs_client(profile_name="dev", region="us-east-1")
"""

from .session import get_session, get_sqs_client

__all__ = [
    "get_session",
    "get_sqs_client",
]
