"""
Document shell: 렌더링된 본문을 감싸는 (head, tail) 문자열 생성.

두 가지 형태:
- html_parts(): 메타데이터를 head에 끼워 넣지 않는 기본 셸
  (wasm 접미사는 빌드 시점 output name 오버라이드로 결정)
- html_parts_separated(): dehydrate()한 메타데이터를 viewport 메타 태그 뒤,
  번들 로딩 스크립트 앞에 삽입 (wasm 접미사는 요청 시점 오버라이드로 결정)

head는 <head>를 닫지 않는다. 호출자가 "</head><body...>" 와 본문을 이어 쓴다.
"""

import logging

from src.core.config import resolve_environment
from src.core.meta import MetaContext
from src.domain.constants import (
    DOCTYPE,
    DOCUMENT_TAIL,
    WASM_BG_SUFFIX,
    WASM_MIME_TYPE,
)
from src.domain.schemas import HtmlParts, RenderOptions, ShellEnvironment
from src.render.reload import live_reload_script

logger = logging.getLogger(__name__)


def wasm_output_name(output_name: str, override: str | None) -> str:
    """
    WebAssembly 산출물 기본 파일명.

    wasm-pack은 항상 "_bg"를 붙인다. 빌드 도구가 output name을 직접
    지정한 경우(override 존재)에는 이미 규칙이 적용된 것으로 보고 붙이지 않는다.
    """
    if override is None:
        return f"{output_name}{WASM_BG_SUFFIX}"
    return output_name


class ShellBuilder:
    """
    문서 셸 빌더.

    Usage:
        builder = ShellBuilder(options)
        head, tail = builder.separated(meta)
    """

    def __init__(self, options: RenderOptions, env: ShellEnvironment | None = None):
        """
        Args:
            options: 렌더링 옵션
            env: 해석된 환경 값 (None이면 지금 os.environ에서 해석)
        """
        self.options = options
        self.env = env if env is not None else resolve_environment()

    def combined(self, meta: MetaContext | None = None) -> HtmlParts:
        """메타데이터를 head에 삽입하지 않는 셸."""
        wasm_name = wasm_output_name(
            self.options.output_name, self.env.build_output_name_override
        )
        return self._build(meta, head_metadata="", wasm_name=wasm_name)

    def separated(self, meta: MetaContext | None = None) -> HtmlParts:
        """dehydrate()한 메타데이터를 번들 스크립트 앞에 삽입한 셸."""
        wasm_name = wasm_output_name(
            self.options.output_name, self.env.output_name_override
        )
        head_metadata = meta.dehydrate() if meta is not None else ""
        return self._build(meta, head_metadata=head_metadata, wasm_name=wasm_name)

    def _build(
        self,
        meta: MetaContext | None,
        head_metadata: str,
        wasm_name: str,
    ) -> HtmlParts:
        pkg_path = self.options.site_pkg_dir
        output_name = self.options.output_name
        html_metadata = meta.render_html_attributes() if meta is not None else ""

        js_href = f"/{pkg_path}/{output_name}.js"
        wasm_href = f"/{pkg_path}/{wasm_name}.wasm"

        lines = [
            DOCTYPE,
            f"<html{html_metadata}>",
            "<head>",
            '<meta charset="utf-8">',
            '<meta name="viewport" content="width=device-width, initial-scale=1">',
        ]
        # 스타일시트 등은 모듈 스크립트 실행 전에 있어야 함
        if head_metadata:
            lines.append(head_metadata)
        lines += [
            f'<link rel="modulepreload" href="{js_href}">',
            f'<link rel="preload" href="{wasm_href}" as="fetch" '
            f'type="{WASM_MIME_TYPE}" crossorigin="">',
            f"<script type=\"module\">import init, {{ hydrate }} from '{js_href}'; "
            f"init('{wasm_href}').then(hydrate);</script>",
        ]
        autoreload = live_reload_script(self.options, self.env)
        if autoreload:
            lines.append(autoreload)

        head = "\n".join(lines) + "\n"
        logger.debug(
            f"Shell built: wasm={wasm_href}, metadata={len(head_metadata)} bytes, "
            f"live_reload={bool(autoreload)}"
        )
        return HtmlParts(head=head, tail=DOCUMENT_TAIL)


def html_parts(
    options: RenderOptions,
    meta: MetaContext | None = None,
    env: ShellEnvironment | None = None,
) -> HtmlParts:
    """
    기본 셸 (간편 함수).

    Args:
        options: 렌더링 옵션
        meta: 메타데이터 컨텍스트 (<html> 속성만 사용)
        env: 해석된 환경 값

    Returns:
        HtmlParts(head, tail)
    """
    return ShellBuilder(options, env).combined(meta)


def html_parts_separated(
    options: RenderOptions,
    meta: MetaContext | None = None,
    env: ShellEnvironment | None = None,
) -> HtmlParts:
    """
    메타데이터 분리 셸 (간편 함수).

    Args:
        options: 렌더링 옵션
        meta: 메타데이터 컨텍스트 (dehydrate() 결과를 head에 삽입)
        env: 해석된 환경 값

    Returns:
        HtmlParts(head, tail)
    """
    return ShellBuilder(options, env).separated(meta)
