"""
test_meta.py - MetaContext 테스트

DoD:
- <html>/<body> 속성 문자열 (비어 있으면 "")
- dehydrate(): 호출 시점 상태 반영, 변경 없으면 동일 결과
- 같은 key 재등록 시 제자리 교체
"""

from src.core.meta import AttributeSet, MetaContext

# =============================================================================
# AttributeSet 테스트
# =============================================================================


class TestAttributeSet:
    """AttributeSet 테스트."""

    def test_empty_is_empty_string(self):
        attrs = AttributeSet()

        assert attrs.is_empty()
        assert attrs.as_string() == ""

    def test_leading_space_and_order(self):
        """삽입 순서 유지, 앞 공백 포함."""
        attrs = AttributeSet()
        attrs.set("lang", "en")
        attrs.set("dir", "ltr")

        assert attrs.as_string() == ' lang="en" dir="ltr"'

    def test_classes_merged(self):
        """class는 병합되고 중복 제거."""
        attrs = AttributeSet()
        attrs.add_class("dark")
        attrs.add_class("wide", "dark")

        assert attrs.as_string() == ' class="dark wide"'

    def test_set_class_replaces(self):
        attrs = AttributeSet()
        attrs.add_class("old")
        attrs.set("class", "a b")

        assert attrs.as_string() == ' class="a b"'

    def test_boolean_attribute(self):
        attrs = AttributeSet()
        attrs.set("hidden")

        assert attrs.as_string() == " hidden"

    def test_values_escaped(self):
        """값의 따옴표/꺾쇠 이스케이프."""
        attrs = AttributeSet()
        attrs.set("data-x", '"><script>')

        assert attrs.as_string() == ' data-x="&quot;&gt;&lt;script&gt;"'


# =============================================================================
# MetaContext 테스트
# =============================================================================


class TestMetaContext:
    """MetaContext 테스트."""

    def test_empty_dehydrate(self):
        meta = MetaContext()

        assert meta.dehydrate() == ""
        assert meta.render_html_attributes() == ""

    def test_title(self):
        meta = MetaContext()
        meta.set_title("Home")

        assert meta.dehydrate() == "<title>Home</title>"

    def test_title_formatter(self):
        """포맷터는 나중에 바뀐 제목에도 적용."""
        meta = MetaContext()
        meta.set_title("Loading", formatter=lambda t: f"{t} | Site")
        meta.set_title("Welcome")

        assert meta.title == "Welcome | Site"

    def test_title_escaped(self):
        meta = MetaContext()
        meta.set_title("<b>Tom & Jerry</b>")

        assert meta.dehydrate() == "<title>&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;</title>"

    def test_tags_in_registration_order(self):
        meta = MetaContext()
        meta.add_meta(name="description", content="demo")
        meta.add_stylesheet("/pkg/app.css")
        meta.add_script(src="/js/extra.js", defer="")

        assert meta.dehydrate() == (
            '<meta name="description" content="demo">'
            '<link rel="stylesheet" href="/pkg/app.css">'
            '<script src="/js/extra.js" defer=""></script>'
        )

    def test_title_precedes_tags(self):
        meta = MetaContext()
        meta.add_meta(charset="utf-8")
        meta.set_title("T")

        assert meta.dehydrate().startswith("<title>T</title>")

    def test_same_stylesheet_once(self):
        """같은 href 스타일시트는 한 번만."""
        meta = MetaContext()
        meta.add_stylesheet("/a.css")
        meta.add_stylesheet("/b.css")
        meta.add_stylesheet("/a.css", id="main")

        assert meta.dehydrate() == (
            '<link rel="stylesheet" href="/a.css" id="main">'
            '<link rel="stylesheet" href="/b.css">'
        )

    def test_keyword_attribute_names(self):
        """http_equiv → http-equiv."""
        meta = MetaContext()
        meta.add_meta(http_equiv="refresh", content="5")

        assert meta.dehydrate() == '<meta http-equiv="refresh" content="5">'

    def test_style(self):
        meta = MetaContext()
        meta.add_style("body{margin:0}", id="reset")

        assert meta.dehydrate() == '<style id="reset">body{margin:0}</style>'

    def test_no_self_closing_tags(self):
        meta = MetaContext()
        meta.add_meta(name="a", content="b")
        meta.add_link(rel="icon", href="/favicon.ico")

        assert "/>" not in meta.dehydrate()

    def test_dehydrate_idempotent(self, meta: MetaContext):
        """변경 없이 두 번 호출하면 동일."""
        assert meta.dehydrate() == meta.dehydrate()

    def test_dehydrate_reflects_later_mutation(self, meta: MetaContext):
        """호출 시점 상태 반영."""
        before = meta.dehydrate()
        meta.set_title("Later")
        after = meta.dehydrate()

        assert "<title>Home</title>" in before
        assert "<title>Later</title>" in after

    def test_html_attributes(self, meta: MetaContext):
        assert meta.render_html_attributes() == ' lang="en"'
