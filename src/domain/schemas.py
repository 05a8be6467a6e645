"""
Data schemas for the document shell.

규칙:
- RenderOptions: 프로세스당 1회 생성, 요청 간 읽기 전용 공유
- ShellEnvironment: 요청(또는 빌드)당 1회 해석된 환경 값, 순수 데이터
- HtmlParts: (head, tail) 쌍, 호출자가 본문을 사이에 기록
"""

from dataclasses import dataclass
from typing import Any, NamedTuple

from src.domain.constants import (
    DEFAULT_OUTPUT_NAME,
    DEFAULT_RELOAD_PORT,
    DEFAULT_SITE_ADDR,
    DEFAULT_SITE_PKG_DIR,
    DEFAULT_SITE_ROOT,
)

# =============================================================================
# Render Options
# =============================================================================


@dataclass(frozen=True)
class RenderOptions:
    """
    렌더링 옵션 (빌드 도구 설정).

    필드:
    - site_addr: 서버 바인딩 주소 (host:port)
    - reload_port: 개발용 live-reload 채널 포트
    - site_pkg_dir: 클라이언트 번들이 서빙되는 경로 세그먼트
    - output_name: 클라이언트 번들 기본 파일명 (확장자 제외)
    - site_root: 빌드 산출물 루트 디렉터리
    """
    site_addr: str = DEFAULT_SITE_ADDR
    reload_port: int = DEFAULT_RELOAD_PORT
    site_pkg_dir: str = DEFAULT_SITE_PKG_DIR
    output_name: str = DEFAULT_OUTPUT_NAME
    site_root: str = DEFAULT_SITE_ROOT

    @property
    def site_host(self) -> str:
        """site_addr의 host 부분 (IPv6는 대괄호 제거)."""
        host, _, _ = self.site_addr.rpartition(":")
        return host.strip("[]")

    @property
    def site_port(self) -> int:
        """site_addr의 port 부분."""
        return int(self.site_addr.rpartition(":")[2])

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화용."""
        return {
            "addr": self.site_addr,
            "reload_port": self.reload_port,
            "pkg_dir": self.site_pkg_dir,
            "output_name": self.output_name,
            "root": self.site_root,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderOptions":
        """설정 파일의 site 섹션에서 생성 (검증 없음, config.py 참조)."""
        return cls(
            site_addr=str(data.get("addr", DEFAULT_SITE_ADDR)),
            reload_port=int(data.get("reload_port", DEFAULT_RELOAD_PORT)),
            site_pkg_dir=str(data.get("pkg_dir", DEFAULT_SITE_PKG_DIR)),
            output_name=str(data.get("output_name", DEFAULT_OUTPUT_NAME)),
            site_root=str(data.get("root", DEFAULT_SITE_ROOT)),
        )


# =============================================================================
# Shell Environment
# =============================================================================


@dataclass(frozen=True)
class ShellEnvironment:
    """
    셸 생성에 필요한 환경 값 스냅샷.

    os.environ을 로직 내부에서 직접 읽지 않고,
    resolve_environment()에서 한 번 해석한 뒤 이 객체로 전달한다.

    output name 오버라이드는 두 가지 형태가 공존:
    - build_output_name_override: 임포트(빌드) 시점에 고정된 값 → html_parts
    - output_name_override: 요청 시점에 읽은 값 → html_parts_separated
    """
    watch: bool = False
    external_hostname: str | None = None
    external_port: str | None = None
    output_name_override: str | None = None
    build_output_name_override: str | None = None


# =============================================================================
# Rendered Document Parts
# =============================================================================


class HtmlParts(NamedTuple):
    """문서 셸: head 문자열과 tail 문자열."""
    head: str
    tail: str


@dataclass(frozen=True)
class FinalMetadata:
    """스트림 소진 후 읽은 최종 메타데이터."""
    head: str = ""  # dehydrate() 결과
    body: str = ""  # <body> 태그 속성 문자열
