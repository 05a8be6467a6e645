"""
Demo views: Jinja2 부분 템플릿으로 본문 조각을 내보내는 뷰.

첫 조각은 바로 렌더링되는 골격, 이후 조각은 데이터 로딩(suspense) 뒤에 도착한다.
제목은 데이터가 도착한 뒤에야 확정된다.
"""

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.core.runtime import RenderingSession

templates_dir = Path(__file__).parent / "templates"
jinja_env = Environment(
    loader=FileSystemLoader(templates_dir),
    autoescape=select_autoescape(["html"]),
    keep_trailing_newline=True,
)

SITE_TITLE = "Hydrate Shell"


def render_fragment(name: str, **context: Any) -> str:
    """부분 템플릿 렌더링."""
    return jinja_env.get_template(name).render(**context)


async def load_greeting() -> dict[str, Any]:
    """데이터 의존성 (데모용)."""
    await asyncio.sleep(0)
    return {
        "title": "Welcome",
        "message": "Rendered on the server, hydrated in the browser.",
        "items": ["streamed", "hydrated", "live-reloaded"],
    }


async def home_view(session: RenderingSession) -> AsyncIterator[str]:
    """홈 화면."""
    meta = session.meta()
    if meta is not None:
        meta.html.set("lang", "en")
        meta.set_title("Loading", formatter=lambda t: f"{t} | {SITE_TITLE}")
        meta.add_meta(name="description", content="Server-rendered demo page")

    yield render_fragment(
        "home.html",
        heading=SITE_TITLE,
        lead="This section renders immediately.",
    )

    greeting = await load_greeting()
    if meta is not None:
        meta.set_title(greeting["title"])
        meta.body.add_class("loaded")

    yield render_fragment("components/greeting.html", greeting=greeting)
