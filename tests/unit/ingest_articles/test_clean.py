"""Tests for ingest_articles.clean_articles.clean module."""

from ingest_articles.clean_articles.clean import (
    clean_text,
    extract_image_url,
    is_valid_rss_url,
    is_valid_url,
    sanitize_text,
)


class TestSanitizeText:
    def test_removes_script_blocks(self) -> None:
        assert sanitize_text("Hello<script>alert(1)</script> world") == "Hello world"

    def test_removes_javascript_scheme_and_handlers(self) -> None:
        result = sanitize_text('<a href="javascript:void(0)" onclick="x()">Link</a>')
        assert "javascript:" not in result
        assert "onclick=" not in result

    def test_removes_data_html(self) -> None:
        assert "data:" not in sanitize_text('<img src="data: text/html;base64,xx">')

    def test_none_returns_empty(self) -> None:
        assert sanitize_text(None) == ""

    def test_non_string_returns_empty(self) -> None:
        assert sanitize_text(42) == ""


class TestCleanText:
    def test_strips_html_tags(self) -> None:
        assert clean_text("<h1>Title</h1> <p>Body</p>") == "Title Body"

    def test_unescapes_entities(self) -> None:
        assert clean_text("Fish &amp; chips&nbsp;today") == "Fish & chips today"

    def test_removes_escaped_quotes(self) -> None:
        assert clean_text('He said \\"hello\\"') == 'He said "hello"'

    def test_collapses_whitespace(self) -> None:
        assert clean_text("multiple   spaces   here") == "multiple spaces here"

    def test_none_returns_none(self) -> None:
        assert clean_text(None) is None

    def test_whitespace_only_returns_none(self) -> None:
        assert clean_text("   \n\t ") is None


class TestUrlValidation:
    def test_valid_url(self) -> None:
        assert is_valid_url("https://www.bbc.co.uk/news/world-1")

    def test_rejects_relative_and_other_schemes(self) -> None:
        assert not is_valid_url("/news/world-1")
        assert not is_valid_url("ftp://example.com/file")
        assert not is_valid_url("javascript:alert(1)")
        assert not is_valid_url(None)

    def test_rss_url_by_extension(self) -> None:
        assert is_valid_rss_url("https://rss.nytimes.com/services/xml/rss/nyt/US.xml")

    def test_rss_url_by_feed_path(self) -> None:
        assert is_valid_rss_url("https://techcrunch.com/feed/")

    def test_rss_url_by_host(self) -> None:
        assert is_valid_rss_url("https://feeds.example.com/latest")

    def test_rejects_plain_page(self) -> None:
        assert not is_valid_rss_url("https://example.com/about")

    def test_rejects_non_http_feed(self) -> None:
        assert not is_valid_rss_url("ftp://example.com/rss.xml")


class TestExtractImageUrl:
    def test_prefers_enclosure(self) -> None:
        entry = {
            "enclosures": [{"href": "https://img/enclosure.jpg"}],
            "media_content": [{"url": "https://img/media.jpg"}],
        }
        assert extract_image_url(entry) == "https://img/enclosure.jpg"

    def test_media_content(self) -> None:
        entry = {"media_content": [{"url": "https://img/media.jpg"}]}
        assert extract_image_url(entry) == "https://img/media.jpg"

    def test_media_thumbnail(self) -> None:
        entry = {"media_thumbnail": [{"url": "https://img/thumb.jpg"}]}
        assert extract_image_url(entry) == "https://img/thumb.jpg"

    def test_img_tag_in_content(self) -> None:
        entry = {"content": [{"value": '<p><img alt="x" src="https://img/inline.jpg"></p>'}]}
        assert extract_image_url(entry) == "https://img/inline.jpg"

    def test_img_tag_in_summary(self) -> None:
        entry = {"summary": '<img src="https://img/summary.jpg"/> Text'}
        assert extract_image_url(entry) == "https://img/summary.jpg"

    def test_no_image(self) -> None:
        assert extract_image_url({"summary": "Plain text"}) is None
        assert extract_image_url(None) is None
