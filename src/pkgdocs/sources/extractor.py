"""Reduce a documentation page to readable text."""

import re

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from pkgdocs.config import settings
from pkgdocs.models import ExtractResult
from pkgdocs.sources.patterns import is_http_url
from pkgdocs.sources.verifier import request_headers

_NOISE_SELECTORS = (
    "script, style, nav, footer, header, .nav, .navigation, .sidebar, .footer, .header"
)

_MAIN_SELECTORS = (
    "main",
    '[role="main"]',
    ".content",
    "#content",
    ".main-content",
    ".documentation",
    "article",
    ".markdown-body",
)

_SENTENCE_ENDINGS = (". ", ".\n", "! ", "!\n", "? ", "?\n")


class DocsFetchError(RuntimeError):
    """A documentation page could not be fetched."""


def find_truncate_point(content: str, max_length: int) -> int:
    """Index to cut at: the last sentence end in the final 20%, else max_length."""
    best = -1
    for ending in _SENTENCE_ENDINGS:
        idx = content.rfind(ending, 0, max_length + 1)
        if idx > max_length * 0.8:
            best = max(best, idx + len(ending))
    return best if best > 0 else max_length


def parse_html(html: str, url: str, max_length: int) -> ExtractResult:
    soup = BeautifulSoup(html, "html.parser")
    for el in soup.select(_NOISE_SELECTORS):
        el.decompose()

    content = ""
    for selector in _MAIN_SELECTORS:
        element = soup.select_one(selector)
        if element is not None:
            content = element.get_text(" ")
            break
    if not content and soup.body is not None:
        content = soup.body.get_text(" ")
    if not content:
        content = soup.get_text(" ")

    content = re.sub(r"\s+", " ", content).strip()

    truncated = False
    if len(content) > max_length:
        truncated = True
        content = content[: find_truncate_point(content, max_length)] + "..."

    return ExtractResult(content=content, url=url, truncated=truncated)


async def extract_content(url: str, max_length: int | None = None) -> ExtractResult:
    """Fetch ``url`` and return its main text content.

    Raises:
        ValueError: ``url`` is not an absolute http(s) URL.
        DocsFetchError: the page could not be fetched.
    """
    if not is_http_url(url):
        raise ValueError(f"Not an http(s) URL: {url!r}")

    limit = max_length or settings.extract_max_length
    try:
        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout,
            follow_redirects=True,
            headers=request_headers(),
        ) as client:
            resp = await client.get(url)
    except Exception as e:
        raise DocsFetchError(f"Failed to fetch {url}: {e}") from e

    if not resp.is_success:
        raise DocsFetchError(f"Failed to fetch {url}: HTTP {resp.status_code}")

    result = parse_html(resp.text, str(resp.url), limit)
    logger.debug(
        f"Extracted {len(result.content)} chars from {url}"
        f"{' (truncated)' if result.truncated else ''}"
    )
    return result
