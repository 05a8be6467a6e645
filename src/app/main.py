"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: HYDRATE_WATCH=1 uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from src.app.routes import assets, pages
from src.core.config import load_config, load_render_options
from src.core.runtime import RuntimeRegistry

logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 세션 registry 초기화
    종료 시: 해제되지 않은 세션 경고
    """
    # Startup
    app.state.registry = RuntimeRegistry()

    yield

    # Shutdown
    leaked = app.state.registry.active_count
    if leaked:
        logger.warning(f"{leaked} rendering sessions were never disposed")


# =============================================================================
# App Factory
# =============================================================================


def create_app(config_path: Path | None = None) -> FastAPI:
    """
    앱 생성.

    Args:
        config_path: 설정 파일 경로 (None이면 프로젝트 루트 default.yaml)

    Returns:
        FastAPI 앱

    Raises:
        ShellError: CONFIG_INVALID
    """
    config = load_config(config_path)
    options = load_render_options(config)

    app = FastAPI(
        title="Hydrate Shell",
        description="Server-rendered HTML documents for hydrated client bundles",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.render_options = options
    # lifespan 없이 쓰는 경우(테스트 등)를 위한 기본값
    app.state.registry = RuntimeRegistry()

    # 번들 에셋 (/<pkg_dir>/...)
    app.include_router(assets.router, prefix=f"/{options.site_pkg_dir}", tags=["Assets"])

    @app.get("/health")
    async def health() -> dict[str, str]:
        """헬스 체크."""
        return {"status": "ok"}

    # 페이지 라우트 (HTML)
    app.include_router(pages.router, tags=["Pages"])

    return app


app = create_app()


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    options = app.state.render_options
    uvicorn.run(
        "src.app.main:app",
        host=options.site_host,
        port=options.site_port,
        reload=True,
    )
