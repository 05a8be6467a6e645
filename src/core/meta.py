"""
Page metadata: 렌더링 중 컴포넌트가 등록하는 <html>/<head>/<body> 메타데이터.

컴포넌트 트리가 렌더링되면서 title, meta, link 태그와
<html>/<body> 속성을 추가한다. 쓰기는 추가/병합만 허용되며,
스트림이 끝난 뒤에만 최종값을 읽는다.
"""

import html
from collections.abc import Callable

# =============================================================================
# Attributes
# =============================================================================


def render_attributes(attrs: dict[str, str | None]) -> str:
    """
    속성 dict → ' name="value"' 문자열.

    값이 None이면 불리언 속성으로 이름만 출력.
    """
    parts = []
    for name, value in attrs.items():
        if value is None:
            parts.append(f" {name}")
        else:
            parts.append(f' {name}="{html.escape(value, quote=True)}"')
    return "".join(parts)


class AttributeSet:
    """
    <html> 또는 <body> 태그에 병합될 속성 모음.

    Usage:
        body = AttributeSet()
        body.set("lang", "ko")
        body.add_class("dark")
        body.as_string()  # ' lang="ko" class="dark"'
    """

    def __init__(self) -> None:
        self._attrs: dict[str, str | None] = {}
        self._classes: list[str] = []

    def set(self, name: str, value: str | None = None) -> None:
        """속성 설정 (같은 이름이면 덮어씀)."""
        if name == "class":
            self._classes = []
            self.add_class(*(value or "").split())
            return
        self._attrs[name] = value

    def add_class(self, *names: str) -> None:
        """class 추가 (중복 무시)."""
        for name in names:
            if name and name not in self._classes:
                self._classes.append(name)

    def is_empty(self) -> bool:
        return not self._attrs and not self._classes

    def as_string(self) -> str:
        """태그에 붙일 속성 문자열 (비어 있으면 "")."""
        attrs = dict(self._attrs)
        if self._classes:
            attrs["class"] = " ".join(self._classes)
        return render_attributes(attrs)


# =============================================================================
# Meta Context
# =============================================================================


class MetaContext:
    """
    요청 단위 메타데이터 컨텍스트.

    - html: <html> 태그 속성
    - body: <body> 태그 속성
    - title + head 태그 목록: dehydrate()로 직렬화

    dehydrate()는 여러 번 호출 가능하며, 호출 시점의 상태를 반영한다.
    """

    def __init__(self) -> None:
        self.html = AttributeSet()
        self.body = AttributeSet()
        self._title: str | None = None
        self._title_formatter: Callable[[str], str] | None = None
        self._tags: dict[str, str] = {}
        self._next_index = 0

    # -------------------------------------------------------------------------
    # Title
    # -------------------------------------------------------------------------

    def set_title(
        self,
        text: str | None = None,
        formatter: Callable[[str], str] | None = None,
    ) -> None:
        """
        페이지 제목 설정.

        Args:
            text: 제목 (None이면 기존 값 유지)
            formatter: 제목 포맷터 (예: lambda t: f"{t} | Site")
        """
        if text is not None:
            self._title = text
        if formatter is not None:
            self._title_formatter = formatter

    @property
    def title(self) -> str | None:
        """포맷터가 적용된 제목."""
        if self._title is None:
            return None
        if self._title_formatter is not None:
            return self._title_formatter(self._title)
        return self._title

    # -------------------------------------------------------------------------
    # Head Tags
    # -------------------------------------------------------------------------

    def add_tag(self, markup: str, key: str | None = None) -> None:
        """
        렌더링된 head 태그 등록.

        같은 key로 다시 등록하면 기존 위치에서 교체된다.
        """
        if key is None:
            key = f"#{self._next_index}"
            self._next_index += 1
        self._tags[key] = markup

    def add_meta(self, key: str | None = None, **attrs: str) -> None:
        """<meta> 태그 등록 (예: add_meta(name="description", content="..."))."""
        self.add_tag(f"<meta{render_attributes(_normalize(attrs))}>", key)

    def add_link(self, key: str | None = None, **attrs: str) -> None:
        """<link> 태그 등록."""
        self.add_tag(f"<link{render_attributes(_normalize(attrs))}>", key)

    def add_stylesheet(self, href: str, id: str | None = None) -> None:
        """스타일시트 등록 (href 기준 중복 제거)."""
        attrs: dict[str, str] = {"rel": "stylesheet", "href": href}
        if id is not None:
            attrs["id"] = id
        self.add_link(key=f"stylesheet:{href}", **attrs)

    def add_script(self, src: str | None = None, body: str = "", **attrs: str) -> None:
        """<script> 태그 등록 (src가 있으면 src 기준 중복 제거)."""
        script_attrs = _normalize(attrs)
        if src is not None:
            script_attrs = {"src": src, **script_attrs}
        key = f"script:{src}" if src is not None else None
        self.add_tag(f"<script{render_attributes(script_attrs)}>{body}</script>", key)

    def add_style(self, css: str, id: str | None = None) -> None:
        """인라인 <style> 등록."""
        attrs = {"id": id} if id is not None else {}
        key = f"style:{id}" if id is not None else None
        self.add_tag(f"<style{render_attributes(attrs)}>{css}</style>", key)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def render_html_attributes(self) -> str:
        """<html> 태그에 병합할 속성 문자열."""
        return self.html.as_string()

    def dehydrate(self) -> str:
        """
        현재까지 수집된 head 메타데이터 직렬화.

        Returns:
            <title> + 등록 순서대로의 태그 문자열 (없으면 "")
        """
        parts = []
        title = self.title
        if title is not None:
            parts.append(f"<title>{html.escape(title, quote=False)}</title>")
        parts.extend(self._tags.values())
        return "".join(parts)


def _normalize(attrs: dict[str, str]) -> dict[str, str | None]:
    """파이썬 키워드 → HTML 속성 이름 (http_equiv → http-equiv, class_ → class)."""
    return {name.rstrip("_").replace("_", "-"): value for name, value in attrs.items()}
