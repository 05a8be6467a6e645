"""
Pytest fixtures for the document shell tests.

테스트 구성:
- 환경 변수는 테스트마다 초기화 (HYDRATE_* 제거)
- 세션 해제 순서는 기록용 세션으로 검증
"""

from collections.abc import AsyncIterator, Iterable
from pathlib import Path

import pytest

import src.core.config as config_module
from src.core.meta import MetaContext
from src.domain.errors import ErrorCodes, ShellError
from src.domain.schemas import RenderOptions, ShellEnvironment

HYDRATE_ENV_VARS = (
    "HYDRATE_WATCH",
    "HYDRATE_SITE_EXTERNAL_HOSTNAME",
    "HYDRATE_SITE_EXTERNAL_PORT",
    "HYDRATE_OUTPUT_NAME",
    "HYDRATE_SITE_ADDR",
    "HYDRATE_RELOAD_PORT",
    "HYDRATE_SITE_PKG_DIR",
    "HYDRATE_SITE_ROOT",
)

# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """HYDRATE_* 환경 변수와 빌드 시점 output name 초기화."""
    for name in HYDRATE_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "BUILD_OUTPUT_NAME", None)


@pytest.fixture
def project_root() -> Path:
    """프로젝트 루트 경로."""
    return Path(__file__).parent.parent


# =============================================================================
# Options Fixtures
# =============================================================================


@pytest.fixture
def render_options() -> RenderOptions:
    """기본 렌더링 옵션."""
    return RenderOptions(
        site_addr="127.0.0.1:3000",
        reload_port=3001,
        site_pkg_dir="pkg",
        output_name="app",
    )


@pytest.fixture
def prod_env() -> ShellEnvironment:
    """watch 모드 없음, 오버라이드 없음."""
    return ShellEnvironment()


@pytest.fixture
def watch_env() -> ShellEnvironment:
    """watch 모드, 오버라이드 없음."""
    return ShellEnvironment(watch=True)


# =============================================================================
# Metadata Fixtures
# =============================================================================


@pytest.fixture
def meta() -> MetaContext:
    """제목과 스타일시트가 등록된 MetaContext."""
    meta = MetaContext()
    meta.html.set("lang", "en")
    meta.set_title("Home")
    meta.add_stylesheet("/pkg/app.css")
    return meta


# =============================================================================
# Stream Helpers
# =============================================================================


async def chunk_stream(chunks: Iterable[str]) -> AsyncIterator[str]:
    """조각 목록 → async 스트림."""
    for chunk in chunks:
        yield chunk


class RecordingSession:
    """
    호출 순서를 기록하는 세션.

    해제 이후 읽기, 두 번 해제는 즉시 테스트 실패로 처리된다.
    """

    def __init__(self, meta: MetaContext | None = None) -> None:
        self._meta = meta
        self.events: list[str] = []
        self.disposed = False

    def meta(self) -> MetaContext | None:
        if self.disposed:
            pytest.fail("metadata read after dispose")
        self.events.append("read")
        return self._meta

    def dispose(self) -> None:
        if self.disposed:
            raise ShellError(ErrorCodes.CONTEXT_DISPOSED, operation="dispose")
        self.events.append("dispose")
        self.disposed = True


@pytest.fixture
def recording_session(meta: MetaContext) -> RecordingSession:
    """MetaContext가 연결된 기록용 세션."""
    return RecordingSession(meta)
