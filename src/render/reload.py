"""
Live-reload 클라이언트 스크립트 생성.

watch 모드(HYDRATE_WATCH 존재)에서만 <script> 블록을 만든다.
프로덕션 문서에는 reload 채널 참조가 전혀 들어가지 않는다.
"""

import logging
from functools import cache
from pathlib import Path

from src.core.config import resolve_environment
from src.domain.constants import LIVE_RELOAD_PATH
from src.domain.schemas import RenderOptions, ShellEnvironment

logger = logging.getLogger(__name__)

ASSETS_DIR = Path(__file__).parent / "assets"


@cache
def hot_reload_js() -> str:
    """빌드 도구가 제공하는 patch 헬퍼 (patch(view) 정의)."""
    return (ASSETS_DIR / "hot_reload.js").read_text(encoding="utf-8")


def reload_address(options: RenderOptions, env: ShellEnvironment) -> tuple[str, str]:
    """
    외부에서 보이는 live-reload host/port.

    환경 변수 오버라이드 > RenderOptions 값.
    """
    host = env.external_hostname if env.external_hostname is not None else options.site_host
    port = env.external_port if env.external_port is not None else str(options.reload_port)
    return host, port


def live_reload_script(
    options: RenderOptions,
    env: ShellEnvironment | None = None,
) -> str:
    """
    개발용 자동 reload 스크립트.

    Args:
        options: 렌더링 옵션
        env: 해석된 환경 값 (None이면 os.environ에서 해석)

    Returns:
        <script> 블록 문자열 (watch 모드가 아니면 "")
    """
    if env is None:
        env = resolve_environment()

    if not env.watch:
        return ""

    host, port = reload_address(options, env)
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    ws_url = f"ws://{host}:{port}{LIVE_RELOAD_PATH}"
    logger.debug(f"Live reload enabled: {ws_url}")

    return f"""<script crossorigin="">(function () {{
{hot_reload_js()}
var ws = new WebSocket('{ws_url}');
ws.onmessage = (ev) => {{
    let msg = JSON.parse(ev.data);
    if (msg.all) {{
        window.location.reload();
    }} else if (msg.css) {{
        let found = false;
        document.querySelectorAll("link").forEach((link) => {{
            let href = link.getAttribute('href');
            if (href && href.includes(msg.css)) {{
                link.setAttribute('href', '/' + msg.css + '?version=' + Date.now());
                found = true;
            }}
        }});
        if (!found) console.warn(`CSS hot-reload: Could not find a <link href=/"${{msg.css}}"> element`);
    }} else if (msg.view) {{
        patch(msg.view);
    }}
}};
ws.onclose = () => console.warn('Live-reload stopped. Manual reload necessary.');
}})()
</script>"""
