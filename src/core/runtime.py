"""
Rendering sessions: (runtime, scope) 핸들과 메타데이터 컨텍스트 수명 관리.

규칙:
- 세션은 생성한 요청이 단독 소유
- dispose()는 정확히 한 번, 모든 메타데이터 읽기 이후
- 해제 이후 읽기/재해제 → ShellError(CONTEXT_DISPOSED), 프로그래밍 오류
"""

import logging
import uuid
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from src.core.meta import MetaContext
from src.domain.errors import ErrorCodes, ShellError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderingContext:
    """렌더링 세션 식별자 쌍."""
    runtime: str
    scope: str


class RenderingSession:
    """
    렌더링 컨텍스트 소유 핸들.

    dispose()가 소유권을 소비한다. 이후 meta() 호출은 실패한다.

    Usage:
        session = registry.create_session()
        meta = session.meta()
        ...
        session.dispose()
    """

    def __init__(self, registry: "RuntimeRegistry", context: RenderingContext) -> None:
        self._registry = registry
        self._context = context
        self._disposed = False

    @property
    def context(self) -> RenderingContext:
        return self._context

    @property
    def disposed(self) -> bool:
        return self._disposed

    def _ensure_alive(self, operation: str) -> None:
        if self._disposed:
            raise ShellError(
                ErrorCodes.CONTEXT_DISPOSED,
                operation=operation,
                runtime=self._context.runtime,
                scope=self._context.scope,
            )

    def meta(self) -> MetaContext | None:
        """세션에 연결된 MetaContext 조회 (없으면 None)."""
        self._ensure_alive("meta")
        return self._registry.use_meta(self._context)

    def dispose(self) -> None:
        """세션 해제. 두 번 호출하면 ShellError."""
        self._ensure_alive("dispose")
        self._registry.dispose(self._context)
        self._disposed = True


class RuntimeRegistry:
    """
    살아 있는 렌더링 세션 저장소.

    세션마다 MetaContext 하나를 보관한다. 요청 간 공유 상태는 없다.
    """

    def __init__(self) -> None:
        self._contexts: dict[RenderingContext, MetaContext | None] = {}

    @property
    def active_count(self) -> int:
        """해제되지 않은 세션 수."""
        return len(self._contexts)

    def create_session(
        self, meta: MetaContext | None = None, with_meta: bool = True
    ) -> RenderingSession:
        """
        새 렌더링 세션 생성.

        Args:
            meta: 연결할 MetaContext (None이면 새로 생성)
            with_meta: False면 MetaContext 없이 생성 (메타데이터 미수집 응답)

        Returns:
            RenderingSession
        """
        context = RenderingContext(runtime=uuid.uuid4().hex, scope=uuid.uuid4().hex)
        if meta is None and with_meta:
            meta = MetaContext()
        self._contexts[context] = meta
        logger.debug(f"Rendering session created: runtime={context.runtime}")
        return RenderingSession(self, context)

    def session(self, context: RenderingContext) -> RenderingSession:
        """기존 컨텍스트에 대한 핸들."""
        if context not in self._contexts:
            raise ShellError(
                ErrorCodes.CONTEXT_NOT_FOUND,
                runtime=context.runtime,
                scope=context.scope,
            )
        return RenderingSession(self, context)

    def use_meta(self, context: RenderingContext) -> MetaContext | None:
        """(runtime, scope)로 MetaContext 조회."""
        if context not in self._contexts:
            raise ShellError(
                ErrorCodes.CONTEXT_DISPOSED,
                operation="meta",
                runtime=context.runtime,
                scope=context.scope,
            )
        return self._contexts[context]

    def dispose(self, context: RenderingContext) -> None:
        """컨텍스트 제거."""
        if self._contexts.pop(context, _MISSING) is _MISSING:
            raise ShellError(
                ErrorCodes.CONTEXT_DISPOSED,
                operation="dispose",
                runtime=context.runtime,
                scope=context.scope,
            )
        logger.debug(f"Rendering session disposed: runtime={context.runtime}")

    @asynccontextmanager
    async def open_session(
        self, meta: MetaContext | None = None, with_meta: bool = True
    ) -> AsyncGenerator[RenderingSession, None]:
        """
        세션 생성 후, 블록 종료 시 아직 해제되지 않았으면 해제.

        렌더링이 취소되거나 실패해도 세션이 남지 않도록 한다.
        """
        session = self.create_session(meta, with_meta)
        try:
            yield session
        finally:
            if not session.disposed:
                session.dispose()


_MISSING = object()
