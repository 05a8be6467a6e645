"""
FastAPI Routes.

페이지 라우트 (서버 렌더링 HTML) + 번들 에셋 라우트
"""

from . import assets, pages

__all__ = ["assets", "pages"]
