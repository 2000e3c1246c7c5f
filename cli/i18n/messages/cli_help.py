"""
cli/i18n/messages/cli_help.py - CLI Command Messages

Contains translations for Click CLI help text.
"""

from __future__ import annotations

CLI_MESSAGES = {
    "help_intro": {
        "ko": "SQS 큐 조회, 메시지 이동/다운로드/전송을 위한 CLI 도구입니다.",
        "en": "A CLI tool for listing SQS queues and moving, downloading and sending messages.",
    },
    "help_ls": {
        "ko": "큐 목록 및 속성 조회",
        "en": "List queues and their attributes",
    },
    "help_mv": {
        "ko": "큐 간 메시지 이동",
        "en": "Move messages from one queue to another",
    },
    "help_send": {
        "ko": "큐로 메시지 전송 (본문은 stdin)",
        "en": "Send a message to a queue (body from stdin)",
    },
    "help_download": {
        "ko": "큐 메시지를 파일로 다운로드",
        "en": "Download messages from a queue to files",
    },
}
