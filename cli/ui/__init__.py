# cli/ui - 콘솔 출력 컴포넌트 (rich)
"""
콘솔 출력 모듈

CLI 전용 출력 함수들 (상태 메시지, 테이블)
"""

from .console import (
    SYMBOL_ERROR,
    SYMBOL_WARNING,
    console,
    get_console,
    print_error,
    print_table,
    print_warning,
)

__all__ = [
    "SYMBOL_ERROR",
    "SYMBOL_WARNING",
    "console",
    "get_console",
    "print_error",
    "print_table",
    "print_warning",
]
