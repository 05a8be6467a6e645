#!/usr/bin/env python3
"""
render_page.py - 데모 뷰를 완성된 HTML 문서로 렌더링

서버를 띄우지 않고 셸 + 본문 + 메타데이터 조립 결과를 확인한다.

사용법:
    # stdout으로 출력 (완성 문서 방식)
    uv run python scripts/render_page.py

    # 스트리밍 방식으로 조립, 파일로 저장
    uv run python scripts/render_page.py --stream --output out/index.html

    # live-reload 스크립트 포함
    HYDRATE_WATCH=1 uv run python scripts/render_page.py
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

# 프로젝트 루트를 path에 추가
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

from src.app.views import home_view
from src.core.config import load_config, load_render_options, resolve_environment
from src.core.runtime import RuntimeRegistry
from src.domain.errors import ShellError
from src.domain.schemas import RenderOptions
from src.render.stream import build_async_response, stream_document

# 로깅 설정
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


async def render_document(options: RenderOptions, stream: bool = False) -> str:
    """
    데모 뷰를 완성 문서로 렌더링.

    Args:
        options: 렌더링 옵션
        stream: True면 stream_document 조각을 이어 붙임

    Returns:
        HTML 문서
    """
    registry = RuntimeRegistry()
    env = resolve_environment()

    if stream:
        session = registry.create_session()
        parts = [
            chunk
            async for chunk in stream_document(home_view(session), options, session, env)
        ]
        return "".join(parts)

    async with registry.open_session() as session:
        return await build_async_response(home_view(session), options, session, env)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="데모 뷰 HTML 문서 렌더링",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="설정 파일 경로 (기본: default.yaml)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="출력 파일 경로 (기본: stdout)",
    )
    parser.add_argument(
        "--stream",
        action="store_true",
        help="스트리밍 방식으로 조립",
    )

    args = parser.parse_args(argv)

    # .env 파일 로드
    load_dotenv()

    config_path = Path(args.config) if args.config else None
    try:
        options = load_render_options(load_config(config_path))
    except ShellError as e:
        logger.error(f"설정 오류: {e}")
        return 1

    document = asyncio.run(render_document(options, stream=args.stream))

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document, encoding="utf-8")
        logger.info(f"문서 저장: {output_path} ({len(document)} bytes)")
    else:
        sys.stdout.write(document)

    return 0


if __name__ == "__main__":
    sys.exit(main())
