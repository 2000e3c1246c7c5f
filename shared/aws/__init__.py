"""AWS 관련 공유 유틸리티.

하위 모듈:
- sqs: SQS 큐 목록/속성 조회, 메시지 이동, 파일 저장, 전송
"""

from . import sqs

__all__ = ["sqs"]
