"""
Application Services.

역할:
- ssr: 뷰 → 완성 문서 응답 / 스트리밍 응답
"""

from .ssr import View, render_app_async, render_app_to_stream

__all__ = [
    "View",
    "render_app_async",
    "render_app_to_stream",
]
