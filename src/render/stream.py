"""
Streaming response assembly: 본문 조각 스트림 + 늦게 확정되는 메타데이터 → HTML 문서.

두 가지 방식:
- build_async_response(): 스트림을 끝까지 모은 뒤 완성된 문서 문자열 반환
  (suspense가 모두 풀린 뒤의 메타데이터를 사용)
- stream_document(): 첫 조각(동기 렌더링 셸) 이후 순서대로 흘려보내는 async generator

세션 해제는 항상 마지막 메타데이터 읽기 이후에 한 번만 일어난다.
"""

import logging
from collections.abc import AsyncGenerator, AsyncIterable

from src.core.meta import MetaContext
from src.core.runtime import RenderingSession
from src.domain.schemas import FinalMetadata, RenderOptions, ShellEnvironment
from src.render.shell import html_parts, html_parts_separated

logger = logging.getLogger(__name__)


# =============================================================================
# Metadata Reads
# =============================================================================


def skeleton_metadata(session: RenderingSession) -> MetaContext | None:
    """셸(head 골격) 생성용 메타데이터 읽기."""
    return session.meta()


def final_metadata(session: RenderingSession) -> FinalMetadata:
    """
    스트림 소진 후의 최종 메타데이터 읽기.

    suspense가 풀리면서 추가된 <title> 등을 반영한다.
    """
    meta = session.meta()
    if meta is None:
        return FinalMetadata()
    return FinalMetadata(head=meta.dehydrate(), body=meta.body.as_string())


# =============================================================================
# Buffered (async) Response
# =============================================================================


async def build_async_response(
    stream: AsyncIterable[str],
    options: RenderOptions,
    session: RenderingSession,
    env: ShellEnvironment | None = None,
) -> str:
    """
    스트림을 모두 소비한 뒤 완성된 HTML 문서 생성.

    순서:
    1. 스트림 소진 (도착 순서대로 이어 붙임)
    2. 셸 생성 (skeleton_metadata)
    3. 최종 메타데이터 읽기 (final_metadata)
    4. 세션 해제
    5. 문서 조립

    Args:
        stream: 본문 조각 스트림
        options: 렌더링 옵션
        session: 렌더링 세션 (이 함수가 해제함)
        env: 해석된 환경 값

    Returns:
        완성된 HTML 문서

    Raises:
        스트림에서 발생한 예외 (그대로 전파, 이 경우 세션은 해제하지 않음)
    """
    chunks: list[str] = []
    try:
        async for chunk in stream:
            chunks.append(chunk)
    except Exception as e:
        logger.error(
            f"Body stream failed after {len(chunks)} chunks: {e}", exc_info=True
        )
        raise

    body = "".join(chunks)
    head, tail = html_parts_separated(options, skeleton_metadata(session), env)

    # 메타데이터 확정값은 suspense가 모두 풀린 지금 읽는다
    final = final_metadata(session)

    session.dispose()

    logger.debug(
        f"Async response assembled: {len(chunks)} chunks, {len(body)} body bytes"
    )
    return f"{head}{final.head}</head><body{final.body}>{body}{tail}"


# =============================================================================
# In-order Streaming
# =============================================================================


async def stream_document(
    stream: AsyncIterable[str],
    options: RenderOptions,
    session: RenderingSession,
    env: ShellEnvironment | None = None,
) -> AsyncGenerator[str, None]:
    """
    본문 조각을 도착 순서대로 흘려보내는 문서 스트림.

    첫 조각이 도착하면 그 시점의 메타데이터로 head를 만들어 함께 내보내고,
    이후 조각은 그대로, 마지막에 tail을 내보낸다.
    세션은 generator가 끝나거나 실패하거나 중간에 닫힐 때 해제된다.

    Args:
        stream: 본문 조각 스트림
        options: 렌더링 옵션
        session: 렌더링 세션 (이 generator가 해제함)
        env: 해석된 환경 값

    Yields:
        문서 조각
    """
    iterator = aiter(stream)
    count = 0
    try:
        try:
            first = await anext(iterator)
            count = 1
        except StopAsyncIteration:
            first = ""

        meta = skeleton_metadata(session)
        head, tail = html_parts(options, meta, env)
        head_metadata = meta.dehydrate() if meta is not None else ""
        body_metadata = meta.body.as_string() if meta is not None else ""

        yield f"{head}{head_metadata}</head><body{body_metadata}>{first}"

        async for chunk in iterator:
            count += 1
            yield chunk

        yield tail
        logger.debug(f"Document streamed: {count} chunks")
    except Exception as e:
        logger.error(f"Document stream failed after {count} chunks: {e}", exc_info=True)
        raise
    finally:
        if not session.disposed:
            session.dispose()
