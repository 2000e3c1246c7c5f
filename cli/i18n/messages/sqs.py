"""
cli/i18n/messages/sqs.py - SQS Command Messages

Output strings for ls / mv / send / download.
"""

from __future__ import annotations

SQS_MESSAGES = {
    # =========================================================================
    # ls
    # =========================================================================
    "no_queues": {
        "ko": "큐가 없습니다",
        "en": "No queues",
    },
    "queue_table_title": {
        "ko": "SQS 큐",
        "en": "SQS Queues",
    },
    "fetch_failed": {
        "ko": "큐 {count}개 속성 조회 실패",
        "en": "Failed to fetch attributes for {count} queue(s)",
    },
    # =========================================================================
    # mv
    # =========================================================================
    "moving_limited": {
        "ko": "메시지 {total}개 중 {limit}개 이동 중, 잠시 기다려 주세요...",
        "en": "Moving {limit} out of {total} messages, please wait...",
    },
    "moving_all": {
        "ko": "메시지 {total}개 이동 중, 잠시 기다려 주세요...",
        "en": "Moving {total} messages, please wait...",
    },
    "moved": {
        "ko": "메시지 {count}개 이동 완료",
        "en": "Moved {count} messages",
    },
    # =========================================================================
    # send / download
    # =========================================================================
    "sent": {
        "ko": "메시지 전송 완료, ID: {message_id}",
        "en": "Sent message id: {message_id}",
    },
    "downloaded": {
        "ko": "메시지 {count}개 다운로드 완료",
        "en": "Downloaded {count} messages",
    },
}
