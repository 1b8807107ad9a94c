"""
test_html_meta.py - HTML 메타데이터 추출 테스트

우선순위:
- title: <title> (소유자 접미사 제거) → <h1> → 빈 문자열
- image: 첫 <img>의 src
"""

from src.core.html_meta import parse_meta_from_html


class TestTitle:
    """제목 추출 테스트."""

    def test_title_with_owner_suffix_stripped(self):
        html = "<html><head><title>Orphan Page | Site Owner</title></head></html>"

        meta = parse_meta_from_html(html, site_owner="Site Owner")

        assert meta.title == "Orphan Page"

    def test_owner_suffix_case_insensitive(self):
        html = "<TITLE>Work  |  site owner  </TITLE>"

        assert parse_meta_from_html(html, site_owner="Site Owner").title == "Work"

    def test_other_suffix_kept(self):
        """소유자가 아닌 접미사는 그대로."""
        html = "<title>Work | Someone Else</title>"

        assert parse_meta_from_html(html, site_owner="Site Owner").title == "Work | Someone Else"

    def test_default_owner(self):
        html = "<title>Case Study | Sharva Paralkar</title>"

        assert parse_meta_from_html(html).title == "Case Study"

    def test_owner_name_with_regex_characters(self):
        """소유자 이름의 특수문자는 문자 그대로 매칭."""
        html = "<title>Demo | A.B (Studio)</title>"

        assert parse_meta_from_html(html, site_owner="A.B (Studio)").title == "Demo"

    def test_title_attributes_allowed(self):
        html = '<title data-x="1">  Spaced Title  </title>'

        assert parse_meta_from_html(html).title == "Spaced Title"

    def test_falls_back_to_h1(self):
        html = "<body><h1 class='hero'> Big Heading </h1><h1>Second</h1></body>"

        assert parse_meta_from_html(html).title == "Big Heading"

    def test_title_only_suffix_falls_back_to_h1(self):
        """접미사 제거 후 비면 <h1> 사용."""
        html = "<title> | Site Owner</title><h1>Heading</h1>"

        assert parse_meta_from_html(html, site_owner="Site Owner").title == "Heading"

    def test_no_title_no_h1(self):
        assert parse_meta_from_html("<p>nothing</p>").title == ""

    def test_nested_markup_in_title_does_not_match(self):
        """<title> 안에 태그가 있으면 매칭 안 됨 (정규식 한계)."""
        html = "<title><b>x</b></title><h1>Fallback</h1>"

        assert parse_meta_from_html(html).title == "Fallback"


class TestImage:
    """대표 이미지 추출 테스트."""

    def test_first_img_src(self):
        html = '<img src="public/images/a.png"><img src="public/images/b.png">'

        assert parse_meta_from_html(html).image == "public/images/a.png"

    def test_single_quotes_and_attributes_before_src(self):
        html = "<IMG alt='cover' class=\"x\" src='https://example.com/c.jpg'>"

        assert parse_meta_from_html(html).image == "https://example.com/c.jpg"

    def test_no_img(self):
        assert parse_meta_from_html("<title>x</title>").image == ""


class TestMalformedMarkup:
    """깨진 마크업에서도 예외 없음."""

    def test_empty_string(self):
        meta = parse_meta_from_html("")

        assert meta.title == ""
        assert meta.image == ""

    def test_unclosed_tags(self):
        html = "<title>Broken<h1>Also broken<img src=>"

        meta = parse_meta_from_html(html)

        assert meta.title == ""
        assert meta.image == ""

    def test_binary_like_garbage(self):
        meta = parse_meta_from_html("\x00\x01<<<>>>�<title></title>")

        assert meta.title == ""
