"""
Configuration: 설정 파일 + 환경 변수 → RenderOptions / ShellEnvironment.

환경 변수는 여기서만 읽는다. 셸 생성 함수들은 해석된 값만 받는다.

- load_render_options(): 프로세스 시작 시 1회 (잘못된 설정은 ShellError)
- resolve_environment(): 요청마다 1회 (절대 실패하지 않음)
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from src.domain.constants import (
    DEFAULT_OUTPUT_NAME,
    DEFAULT_RELOAD_PORT,
    DEFAULT_SITE_ADDR,
    DEFAULT_SITE_PKG_DIR,
    DEFAULT_SITE_ROOT,
    ENV_EXTERNAL_HOSTNAME,
    ENV_EXTERNAL_PORT,
    ENV_OUTPUT_NAME,
    ENV_RELOAD_PORT,
    ENV_SITE_ADDR,
    ENV_SITE_PKG_DIR,
    ENV_SITE_ROOT,
    ENV_WATCH,
)
from src.domain.errors import ErrorCodes, ShellError
from src.domain.schemas import RenderOptions, ShellEnvironment

logger = logging.getLogger(__name__)

# 빌드 시점 output name: 모듈 임포트 시 한 번만 읽고 이후 고정
BUILD_OUTPUT_NAME: str | None = os.environ.get(ENV_OUTPUT_NAME)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "default.yaml"


# =============================================================================
# Config File
# =============================================================================


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """설정 파일 로드 (없으면 빈 dict)."""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[str, Any] | None = yaml.safe_load(f)
        return data or {}


# =============================================================================
# Render Options
# =============================================================================


def parse_site_addr(addr: str) -> tuple[str, int]:
    """
    host:port 형식 주소 파싱.

    Args:
        addr: "127.0.0.1:3000" 또는 "[::1]:3000"

    Returns:
        (host, port)

    Raises:
        ShellError: CONFIG_INVALID
    """
    host, sep, port_str = addr.rpartition(":")
    if not sep or not host or not port_str.isdigit():
        raise ShellError(ErrorCodes.CONFIG_INVALID, field="site_addr", value=addr)

    if host.startswith("["):
        if not host.endswith("]"):
            raise ShellError(ErrorCodes.CONFIG_INVALID, field="site_addr", value=addr)
        host = host[1:-1]
    elif ":" in host:
        # 대괄호 없는 IPv6는 포트와 구분 불가
        raise ShellError(ErrorCodes.CONFIG_INVALID, field="site_addr", value=addr)

    port = int(port_str)
    _check_port("site_addr", port, addr)
    return host, port


def _check_port(field: str, port: int, raw: Any) -> None:
    if not 1 <= port <= 65535:
        raise ShellError(ErrorCodes.CONFIG_INVALID, field=field, value=raw)


def load_render_options(
    config: dict[str, Any] | None = None,
    environ: Mapping[str, str] | None = None,
) -> RenderOptions:
    """
    설정 dict와 환경 변수로 RenderOptions 생성.

    우선순위: 환경 변수 > 설정 파일 site 섹션 > 기본값

    Args:
        config: load_config() 결과 (None이면 기본 경로에서 로드)
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        검증된 RenderOptions

    Raises:
        ShellError: CONFIG_INVALID
    """
    if config is None:
        config = load_config()
    if environ is None:
        environ = os.environ

    site: dict[str, Any] = config.get("site") or {}

    site_addr = environ.get(ENV_SITE_ADDR) or str(site.get("addr", DEFAULT_SITE_ADDR))
    parse_site_addr(site_addr)

    raw_port = environ.get(ENV_RELOAD_PORT) or site.get("reload_port", DEFAULT_RELOAD_PORT)
    try:
        reload_port = int(raw_port)
    except (TypeError, ValueError) as e:
        raise ShellError(
            ErrorCodes.CONFIG_INVALID, field="reload_port", value=raw_port
        ) from e
    _check_port("reload_port", reload_port, raw_port)

    pkg_dir = environ.get(ENV_SITE_PKG_DIR) or str(site.get("pkg_dir", DEFAULT_SITE_PKG_DIR))
    pkg_dir = pkg_dir.strip("/")
    if not pkg_dir:
        raise ShellError(ErrorCodes.CONFIG_INVALID, field="pkg_dir", value=pkg_dir)

    output_name = environ.get(ENV_OUTPUT_NAME) or str(
        site.get("output_name", DEFAULT_OUTPUT_NAME)
    )
    if not output_name:
        raise ShellError(ErrorCodes.CONFIG_INVALID, field="output_name", value=output_name)

    site_root = environ.get(ENV_SITE_ROOT) or str(site.get("root", DEFAULT_SITE_ROOT))

    options = RenderOptions(
        site_addr=site_addr,
        reload_port=reload_port,
        site_pkg_dir=pkg_dir,
        output_name=output_name,
        site_root=site_root,
    )
    logger.debug(f"Render options loaded: {options.to_dict()}")
    return options


# =============================================================================
# Shell Environment
# =============================================================================


def resolve_environment(environ: Mapping[str, str] | None = None) -> ShellEnvironment:
    """
    요청 시점 환경 값 해석.

    누락된 값은 None으로 남겨 두고, 사용하는 쪽에서 설정값으로 대체한다.
    빌드 시점 output name은 environ과 무관하게 BUILD_OUTPUT_NAME을 사용.

    Args:
        environ: 환경 변수 매핑 (None이면 os.environ)

    Returns:
        ShellEnvironment
    """
    if environ is None:
        environ = os.environ

    return ShellEnvironment(
        watch=ENV_WATCH in environ,
        external_hostname=environ.get(ENV_EXTERNAL_HOSTNAME),
        external_port=environ.get(ENV_EXTERNAL_PORT),
        output_name_override=environ.get(ENV_OUTPUT_NAME),
        build_output_name_override=BUILD_OUTPUT_NAME,
    )
