"""공유 유틸리티 - CLI에서 사용하는 AWS 엔진.

- aws: AWS 서비스별 엔진 (SQS 큐 조회, 메시지 이동/저장/전송)

의존성 구조:
    core (인프라)
       ↑
    shared (AWS 엔진)
       ↑
    cli
"""

from . import aws

__all__ = ["aws"]
