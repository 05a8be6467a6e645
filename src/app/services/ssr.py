"""
SSR service: 뷰(본문 조각 스트림) → FastAPI 응답.

뷰는 RenderingSession을 받아 본문 조각을 순서대로 내보내는 async generator.
메타데이터는 session.meta()로 등록한다.

- render_app_async(): 모든 조각을 모은 뒤 한 번에 응답 (suspense 이후 메타데이터 반영)
- render_app_to_stream(): 조각을 도착 순서대로 흘려보내는 응답
"""

import logging
from collections.abc import AsyncIterator, Callable

from fastapi import Request
from fastapi.responses import HTMLResponse, StreamingResponse

from src.core.config import resolve_environment
from src.core.runtime import RenderingSession, RuntimeRegistry
from src.domain.schemas import RenderOptions
from src.render.stream import build_async_response, stream_document

logger = logging.getLogger(__name__)

View = Callable[[RenderingSession], AsyncIterator[str]]


def get_render_options(request: Request) -> RenderOptions:
    """Request에서 render_options 가져오기."""
    return request.app.state.render_options


def get_registry(request: Request) -> RuntimeRegistry:
    """Request에서 세션 registry 가져오기."""
    return request.app.state.registry


async def render_app_async(request: Request, view: View) -> HTMLResponse:
    """
    완성된 문서를 한 번에 응답.

    Args:
        request: FastAPI Request
        view: 본문 조각을 내보내는 뷰

    Returns:
        HTMLResponse
    """
    options = get_render_options(request)
    env = resolve_environment()

    # 실패/취소 시에도 세션이 남지 않도록 open_session 사용
    async with get_registry(request).open_session() as session:
        document = await build_async_response(view(session), options, session, env)

    return HTMLResponse(content=document)


def render_app_to_stream(request: Request, view: View) -> StreamingResponse:
    """
    문서를 조각 단위로 흘려보내는 응답.

    세션은 응답 본문을 처음 읽을 때 생성된다.
    클라이언트가 첫 조각 전에 끊으면 세션은 만들어지지 않는다.
    """
    options = get_render_options(request)
    env = resolve_environment()
    registry = get_registry(request)

    async def body() -> AsyncIterator[str]:
        async with registry.open_session() as session:
            async for part in stream_document(view(session), options, session, env):
                yield part

    return StreamingResponse(
        body(),
        media_type="text/html",
    )
