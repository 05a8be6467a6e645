"""
Core layer: 설정 해석, 메타데이터 컨텍스트, 렌더링 세션.

역할:
- 환경 변수/설정 파일 → RenderOptions, ShellEnvironment (여기서만 os.environ 접근)
- 요청 단위 MetaContext와 세션 수명 관리
"""

from .config import load_config, load_render_options, resolve_environment
from .meta import AttributeSet, MetaContext
from .runtime import RenderingContext, RenderingSession, RuntimeRegistry

__all__ = [
    # config
    "load_config",
    "load_render_options",
    "resolve_environment",
    # meta
    "AttributeSet",
    "MetaContext",
    # runtime
    "RenderingContext",
    "RenderingSession",
    "RuntimeRegistry",
]
