"""
Error definitions for the document shell.

규칙:
- 설정 오버라이드 누락 → 에러 아님 (기본값으로 대체)
- 스트림 실패 → 감싸지 않고 그대로 전파
- 해제된 렌더링 컨텍스트 접근 → ShellError(CONTEXT_DISPOSED), 프로그래밍 오류
"""

from typing import Any


class ShellError(Exception):
    """
    문서 셸 조립 중 발생하는 에러.

    정상 동작에서는 발생하지 않아야 하는 경우에만 사용:
    - 잘못된 설정 (site_addr 형식, 포트 범위)
    - 해제된 렌더링 컨텍스트 재사용
    - 등록되지 않은 컨텍스트 조회

    Usage:
        raise ShellError("CONFIG_INVALID", field="site_addr", value=addr)
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Config ===
    CONFIG_INVALID = "CONFIG_INVALID"

    # === Rendering Context ===
    CONTEXT_NOT_FOUND = "CONTEXT_NOT_FOUND"
    CONTEXT_DISPOSED = "CONTEXT_DISPOSED"

    # === Assets ===
    ASSET_NOT_FOUND = "ASSET_NOT_FOUND"
