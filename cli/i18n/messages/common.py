"""
cli/i18n/messages/common.py - Common Messages

Shared status and error strings used across commands.
"""

from __future__ import annotations

COMMON_MESSAGES = {
    "invalid_attribute": {
        "ko": "잘못된 속성 형식입니다 (key=value): {value}",
        "en": "Invalid attribute format (key=value): {value}",
    },
    "empty_body": {
        "ko": "메시지 본문이 비어 있습니다 (stdin)",
        "en": "Message body is empty (stdin)",
    },
}
