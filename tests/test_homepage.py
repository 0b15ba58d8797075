"""Tests for src/pkgdocs/sources/homepage.py: docs link detection on homepages."""

import httpx
import pytest

from pkgdocs.sources.homepage import extract_docs_link, find_docs_link

HOMEPAGE = "https://mylib.io/"


class TestExtractDocsLink:
    def test_relative_href_resolved_against_origin(self):
        html = '<a href="/pricing">Pricing</a><a href="/docs/intro">Start</a>'
        assert extract_docs_link(html, "https://mylib.io/home/") == "https://mylib.io/docs/intro"

    def test_matches_link_text(self):
        html = '<a href="/learn-more">Read the Documentation</a>'
        assert extract_docs_link(html, HOMEPAGE) == "https://mylib.io/learn-more"

    def test_matches_docs_host(self):
        html = '<a href="https://docs.mylib.dev/">Learn</a>'
        assert extract_docs_link(html, HOMEPAGE) == "https://docs.mylib.dev/"

    def test_api_reference(self):
        html = '<a href="/api-reference/v2">v2</a>'
        assert extract_docs_link(html, HOMEPAGE) == "https://mylib.io/api-reference/v2"

    def test_first_match_wins(self):
        html = '<a href="/guide/">Guide</a><a href="/docs/">Docs</a>'
        assert extract_docs_link(html, HOMEPAGE) == "https://mylib.io/guide/"

    def test_skips_anchors_and_scripts(self):
        html = (
            '<a href="#docs">Docs</a>'
            '<a href="javascript:openDocs()">Docs</a>'
            '<a href="mailto:docs@mylib.io">Docs team</a>'
        )
        assert extract_docs_link(html, HOMEPAGE) is None

    def test_no_match(self):
        html = '<a href="/blog">Blog</a><a href="/about">About</a>'
        assert extract_docs_link(html, HOMEPAGE) is None

    def test_malformed_href_skipped(self):
        html = '<a href="http://[bad/docs">Docs</a><a href="/guide/start">Start</a>'
        assert extract_docs_link(html, HOMEPAGE) == "https://mylib.io/guide/start"

    def test_malformed_markup(self):
        html = '<div><a href="/docs"<<<>>>Docs</a><p><span></div>'
        # Must not raise; whatever the parser recovers is acceptable
        extract_docs_link(html, HOMEPAGE)


class TestFindDocsLink:
    @pytest.mark.asyncio
    async def test_found(self, mock_http):
        route = mock_http.get(HOMEPAGE).mock(
            return_value=httpx.Response(
                200, html='<nav><a href="/docs/getting-started">Docs</a></nav>'
            )
        )
        assert await find_docs_link(HOMEPAGE) == "https://mylib.io/docs/getting-started"
        assert "pkgdocs" in route.calls.last.request.headers["User-Agent"]

    @pytest.mark.asyncio
    async def test_http_error(self, mock_http):
        mock_http.get(HOMEPAGE).mock(return_value=httpx.Response(503))
        assert await find_docs_link(HOMEPAGE) is None

    @pytest.mark.asyncio
    async def test_network_error(self, mock_http):
        mock_http.get(HOMEPAGE).mock(side_effect=httpx.ConnectTimeout("timeout"))
        assert await find_docs_link(HOMEPAGE) is None
