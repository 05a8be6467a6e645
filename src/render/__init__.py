"""
Render layer: HTML 문서 셸 조립.

역할:
- 셸 (head/tail) + 본문 스트림 + 메타데이터 → 최종 HTML 문서
- 개발 모드 live-reload 스크립트 주입
"""

from .reload import live_reload_script
from .shell import ShellBuilder, html_parts, html_parts_separated
from .stream import build_async_response, stream_document

__all__ = [
    "html_parts",
    "html_parts_separated",
    "ShellBuilder",
    "live_reload_script",
    "build_async_response",
    "stream_document",
]
