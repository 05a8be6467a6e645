"""
Page Routes: 서버 렌더링 HTML 문서.

- GET / → 완성 문서 (suspense 이후 메타데이터 반영)
- GET /stream → 조각 단위 스트리밍 문서
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, StreamingResponse

from src.app.services.ssr import render_app_async, render_app_to_stream
from src.app.views import home_view

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def home_page(request: Request) -> HTMLResponse:
    """홈 화면 (완성 문서)."""
    return await render_app_async(request, home_view)


@router.get("/stream", response_class=HTMLResponse)
async def home_stream(request: Request) -> StreamingResponse:
    """홈 화면 (스트리밍)."""
    return render_app_to_stream(request, home_view)
