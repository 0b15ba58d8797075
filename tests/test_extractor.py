"""Tests for src/pkgdocs/sources/extractor.py."""

import httpx
import pytest

from pkgdocs.sources.extractor import (
    DocsFetchError,
    extract_content,
    find_truncate_point,
    parse_html,
)


class TestParseHtml:
    def test_main_content_preferred(self):
        html = """
        <html><body>
          <header>Site header</header>
          <nav>Home | Docs</nav>
          <main><h1>Routing</h1><p>Define   routes
          here.</p><script>track()</script></main>
          <footer>Copyright</footer>
        </body></html>
        """
        result = parse_html(html, "https://x.dev/docs/routing", 1000)
        assert result.content == "Routing Define routes here."
        assert result.url == "https://x.dev/docs/routing"
        assert result.truncated is False

    def test_article_used_without_main(self):
        html = "<body><div class='sidebar'>Menu</div><article>Body text</article></body>"
        assert parse_html(html, "u", 1000).content == "Body text"

    def test_body_fallback(self):
        html = "<body><div>Plain page</div><style>p{}</style></body>"
        assert parse_html(html, "u", 1000).content == "Plain page"

    def test_truncation_marks_result(self):
        html = "<main>" + "word " * 500 + "</main>"
        result = parse_html(html, "u", 100)
        assert result.truncated is True
        assert result.content.endswith("...")
        assert len(result.content) <= 103


class TestFindTruncatePoint:
    def test_cuts_after_late_sentence(self):
        content = "a" * 90 + ". " + "b" * 50
        assert find_truncate_point(content, 100) == 92

    def test_ignores_early_sentence(self):
        content = "a" * 10 + ". " + "b" * 200
        assert find_truncate_point(content, 100) == 100

    def test_no_sentence_end(self):
        assert find_truncate_point("x" * 300, 100) == 100


class TestExtractContent:
    @pytest.mark.asyncio
    async def test_success(self, mock_http):
        mock_http.get("https://x.dev/docs/a").mock(
            return_value=httpx.Response(200, html="<main><p>Hello docs</p></main>")
        )
        result = await extract_content("https://x.dev/docs/a")
        assert result.content == "Hello docs"
        assert result.url == "https://x.dev/docs/a"

    @pytest.mark.asyncio
    async def test_reports_final_url_after_redirect(self, mock_http):
        mock_http.get("https://x.dev/old").mock(
            return_value=httpx.Response(301, headers={"Location": "https://x.dev/new"})
        )
        mock_http.get("https://x.dev/new").mock(
            return_value=httpx.Response(200, html="<main>Moved</main>")
        )
        result = await extract_content("https://x.dev/old")
        assert result.url == "https://x.dev/new"
        assert result.content == "Moved"

    @pytest.mark.asyncio
    async def test_max_length_override(self, mock_http):
        mock_http.get("https://x.dev/long").mock(
            return_value=httpx.Response(200, html="<main>" + "z" * 500 + "</main>")
        )
        result = await extract_content("https://x.dev/long", max_length=50)
        assert result.truncated is True
        assert result.content == "z" * 50 + "..."

    @pytest.mark.asyncio
    async def test_http_error_raises(self, mock_http):
        mock_http.get("https://x.dev/missing").mock(return_value=httpx.Response(404))
        with pytest.raises(DocsFetchError, match="HTTP 404"):
            await extract_content("https://x.dev/missing")

    @pytest.mark.asyncio
    async def test_network_error_raises(self, mock_http):
        mock_http.get("https://x.dev/down").mock(side_effect=httpx.ConnectError("refused"))
        with pytest.raises(DocsFetchError):
            await extract_content("https://x.dev/down")

    @pytest.mark.asyncio
    async def test_invalid_url(self):
        with pytest.raises(ValueError):
            await extract_content("javascript:alert(1)")

    def test_fetch_error_is_runtime_error(self):
        assert issubclass(DocsFetchError, RuntimeError)
