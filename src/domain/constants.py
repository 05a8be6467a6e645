"""
Domain Constants: 문서 셸 전역 상수.

환경 변수 이름, 번들 파일명 규칙, 고정 태그 등
시스템 전반에서 사용되는 값들.
"""

# =============================================================================
# Environment Variables (환경 변수)
# =============================================================================
# 요청 시점 / 빌드 시점에 읽는 값들. 없으면 설정값으로 대체 (에러 아님)

ENV_WATCH = "HYDRATE_WATCH"  # 존재 여부만 확인 (값 무관)
ENV_EXTERNAL_HOSTNAME = "HYDRATE_SITE_EXTERNAL_HOSTNAME"
ENV_EXTERNAL_PORT = "HYDRATE_SITE_EXTERNAL_PORT"
ENV_OUTPUT_NAME = "HYDRATE_OUTPUT_NAME"

# RenderOptions 오버라이드
ENV_SITE_ADDR = "HYDRATE_SITE_ADDR"
ENV_RELOAD_PORT = "HYDRATE_RELOAD_PORT"
ENV_SITE_PKG_DIR = "HYDRATE_SITE_PKG_DIR"
ENV_SITE_ROOT = "HYDRATE_SITE_ROOT"

# =============================================================================
# Defaults (기본 설정)
# =============================================================================

DEFAULT_SITE_ADDR = "127.0.0.1:3000"
DEFAULT_RELOAD_PORT = 3001
DEFAULT_SITE_PKG_DIR = "pkg"
DEFAULT_OUTPUT_NAME = "app"
DEFAULT_SITE_ROOT = "target/site"

# =============================================================================
# Bundle Naming (번들 파일명 규칙)
# =============================================================================
# wasm-pack 기본 규칙: <output_name>_bg.wasm
# 빌드 도구가 output name을 직접 지정한 경우 접미사를 붙이지 않음

WASM_BG_SUFFIX = "_bg"
WASM_MIME_TYPE = "application/wasm"

# =============================================================================
# Document Fragments (고정 문서 조각)
# =============================================================================

DOCTYPE = "<!DOCTYPE html>"
DOCUMENT_TAIL = "</body></html>"
LIVE_RELOAD_PATH = "/live_reload"

# =============================================================================
# MIME Types (빌드 산출물 서빙용)
# =============================================================================

MIME_TYPES = {
    ".js": "text/javascript",
    ".mjs": "text/javascript",
    ".wasm": WASM_MIME_TYPE,
    ".css": "text/css",
    ".map": "application/json",
    ".json": "application/json",
    ".html": "text/html",
    ".svg": "image/svg+xml",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".ico": "image/x-icon",
    ".woff2": "font/woff2",
}


def get_mime_type(filename: str) -> str:
    """
    파일명에서 MIME 타입 추출.

    Args:
        filename: 파일명 (확장자 포함)

    Returns:
        MIME 타입 문자열 (알 수 없으면 octet-stream)
    """
    import os

    ext = os.path.splitext(filename)[1].lower()
    return MIME_TYPES.get(ext, "application/octet-stream")
