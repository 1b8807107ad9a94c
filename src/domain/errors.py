"""
Error definitions for the editor server.

규칙:
- 클라이언트 입력 오류 → EditorError로 명시적 실패 (400)
- 인덱스 파싱 실패 → 빈 인덱스로 복구 + warning 로그 (raise 안 함)
- 파일시스템 쓰기 실패 → 그대로 전파
"""

from typing import Any


class EditorError(Exception):
    """
    에디터 서버에서 클라이언트에 돌려줄 에러.

    Usage:
        raise EditorError(ErrorCodes.INVALID_INPUT, "Missing slug", slug_raw=raw)
    """

    def __init__(
        self,
        code: str,
        message: str,
        http_status: int = 400,
        **context: Any,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        if ctx_str:
            return f"[{self.code}] {self.message} ({ctx_str})"
        return f"[{self.code}] {self.message}"


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Client input (400) ===
    INVALID_INPUT = "INVALID_INPUT"  # slug가 sanitize 후 빈 문자열
    NO_IMAGE_FILE = "NO_IMAGE_FILE"

    # === Recovered (warning only, not raised) ===
    INDEX_PARSE_FAILURE = "INDEX_PARSE_FAILURE"
    INDEX_NOT_A_LIST = "INDEX_NOT_A_LIST"
    HTML_READ_FAILURE = "HTML_READ_FAILURE"
