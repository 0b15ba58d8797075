"""Documentation site crawler.

Given an accepted documentation URL, discovers the site's navigable
structure so a topic can later be mapped to a page:

1. Sidebar / table-of-contents links on the page itself
2. ``sitemap.xml`` entries with documentation-shaped paths
3. Probing conventional entry paths (``/docs``, ``/guide``, ...) when
   neither of the above yields anything

Every step is best-effort. A page that cannot be fetched produces an
empty, invalid ``CrawlResult`` rather than an error.
"""

import asyncio
import html as html_lib
import re
from urllib.parse import urljoin, urlparse, urlunparse

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from pkgdocs.config import settings
from pkgdocs.models import CrawlResult, DocSection
from pkgdocs.sources.extractor import extract_content
from pkgdocs.sources.patterns import (
    is_doc_heading,
    is_doc_shaped_path,
    is_docs_url,
    is_http_url,
    matches_doc_pattern,
    normalize_path,
    path_depth,
    title_from_path,
)
from pkgdocs.sources.verifier import request_headers, url_exists

# Sidebar / nav containers, generic first, then static-site generators
NAV_SELECTORS = (
    ".sidebar nav",
    ".sidebar-nav",
    ".docs-sidebar",
    ".documentation-sidebar",
    '[class*="sidebar"] nav',
    '[class*="sidebar"] ul',
    "aside nav",
    "aside ul",
    ".docs-nav",
    ".doc-nav",
    ".toc",
    ".table-of-contents",
    '[class*="toc"]',
    ".VPSidebar",  # VitePress
    ".sidebar-links",  # VuePress
    ".menu-list",  # Bulma-based
    '[class*="DocsSidebar"]',
    ".nextra-sidebar",  # Nextra
    ".gitbook-root nav",  # GitBook
)

_CODE_BLOCK_SELECTOR = "pre code, .highlight, .code-block"

SITEMAP_PATHS = ("/sitemap.xml", "/sitemap_index.xml", "/docs/sitemap.xml")

COMMON_DOC_PATHS = (
    "/docs",
    "/documentation",
    "/guide",
    "/api",
    "/reference",
    "/getting-started",
    "/introduction",
    "/overview",
    "/quickstart",
)

_LOC_RE = re.compile(r"<loc>\s*(.*?)\s*</loc>", re.IGNORECASE | re.DOTALL)
_SKIP_HREF_PREFIXES = ("#", "mailto:", "javascript:", "tel:")
_MAX_TITLE_LEN = 100
_MAX_CHILD_SITEMAPS = 5


# ---------------------------------------------------------------------------
# Page analysis (pure)
# ---------------------------------------------------------------------------


def extract_title(soup: BeautifulSoup) -> str | None:
    if soup.title is not None:
        title = soup.title.get_text(strip=True)
        if title:
            return title
    h1 = soup.find("h1")
    if h1 is not None:
        return h1.get_text(" ", strip=True) or None
    return None


def looks_like_documentation(soup: BeautifulSoup, url: str) -> bool:
    """Heuristic verdict on whether a page is documentation."""
    if is_docs_url(url):
        return True
    if soup.select_one(_CODE_BLOCK_SELECTOR) is not None:
        return True
    if soup.select_one(", ".join(NAV_SELECTORS)) is not None:
        return True
    return any(is_doc_heading(h.get_text(" ")) for h in soup.find_all(["h2", "h3"]))


def extract_navigation(soup: BeautifulSoup, base_url: str) -> list[DocSection]:
    """Collect in-origin documentation links from the first usable nav container."""
    base = urlparse(base_url)

    for selector in NAV_SELECTORS:
        nav = soup.select_one(selector)
        if nav is None:
            continue

        sections: list[DocSection] = []
        seen: set[str] = set()
        for anchor in nav.select("a[href]"):
            href = str(anchor.get("href", "")).strip()
            title = anchor.get_text(" ", strip=True)
            if not href or not title or len(title) > _MAX_TITLE_LEN:
                continue
            if href.lower().startswith(_SKIP_HREF_PREFIXES):
                continue

            try:
                parsed = urlparse(urljoin(base_url, href))
            except ValueError:
                continue
            if parsed.scheme not in ("http", "https") or parsed.netloc != base.netloc:
                continue

            path = normalize_path(parsed.path)
            if path in seen:
                continue
            # Unconventional paths are admitted only when nested
            if not is_doc_shaped_path(path) and path_depth(path) < 2:
                continue

            seen.add(path)
            url = urlunparse((parsed.scheme, parsed.netloc, parsed.path or "/", "", "", ""))
            sections.append(DocSection(title=title, path=path, url=url))

        if sections:
            logger.debug(f"Navigation via '{selector}': {len(sections)} sections")
            return sections

    return []


def parse_sitemap_locs(xml: str) -> list[str]:
    return [html_lib.unescape(loc) for loc in _LOC_RE.findall(xml) if loc]


def sitemap_sections(
    locs: list[str], base_url: str, max_urls: int | None = None
) -> list[DocSection]:
    """Keep same-host, documentation-shaped sitemap entries."""
    base_netloc = urlparse(base_url).netloc
    limit = max_urls or settings.sitemap_max_urls

    sections: list[DocSection] = []
    seen: set[str] = set()
    for loc in locs[:limit]:
        try:
            parsed = urlparse(loc)
        except ValueError:
            continue
        if parsed.netloc != base_netloc:
            continue
        if not (matches_doc_pattern(parsed.path) or "/docs/" in loc or "/guide/" in loc):
            continue
        path = normalize_path(parsed.path)
        if path in seen:
            continue
        seen.add(path)
        sections.append(DocSection(title=title_from_path(path), path=path, url=loc))
    return sections


def merge_sections(
    primary: list[DocSection], secondary: list[DocSection]
) -> list[DocSection]:
    """Primary sections first; secondary ones only fill missing paths."""
    merged = list(primary)
    existing = {s.path for s in primary}
    for section in secondary:
        if section.path not in existing:
            existing.add(section.path)
            merged.append(section)
    return merged


# ---------------------------------------------------------------------------
# Topic resolution
# ---------------------------------------------------------------------------


def _squash(text: str) -> str:
    return re.sub(r"[-_\s]", "", text.lower())


def find_section(result: CrawlResult | None, topic: str) -> DocSection | None:
    """First section whose path or title matches ``topic``."""
    if result is None or not topic:
        return None
    wanted = _squash(topic)
    if not wanted:
        return None
    for section in result.sections:
        path = _squash(section.path)
        last_segment = path.rstrip("/").split("/")[-1]
        if (
            wanted in path
            or wanted in _squash(section.title)
            or (last_segment and last_segment in wanted)
        ):
            return section
    return None


def resolve_topic_url(
    docs_url: str, topic: str | None, crawl_result: CrawlResult | None = None
) -> str:
    """Map a topic to a page URL, falling back to ``<docs origin>/<topic>``."""
    if not topic:
        return docs_url
    section = find_section(crawl_result, topic)
    if section is not None:
        return section.url
    return urljoin(docs_url, "/" + topic.lstrip("/"))


# ---------------------------------------------------------------------------
# Crawler
# ---------------------------------------------------------------------------


class DocsCrawler:
    """Discovers the structure of a documentation site.

    Results are not cached here; callers that crawl repeatedly should
    keep the ``CrawlResult`` themselves.
    """

    def __init__(self, sitemap_max_urls: int | None = None):
        self._sitemap_max_urls = sitemap_max_urls

    async def crawl(self, url: str) -> CrawlResult:
        """Crawl ``url`` and return its navigable sections.

        Raises:
            ValueError: ``url`` is not an absolute http(s) URL.
        """
        if not is_http_url(url):
            raise ValueError(f"Not an http(s) URL: {url!r}")

        page = await self._fetch_page(url)
        if page is None:
            return CrawlResult(base_url=url)

        title: str | None = None
        is_valid = False
        nav_sections: list[DocSection] = []
        try:
            soup = BeautifulSoup(page, "html.parser")
            title = extract_title(soup)
            is_valid = looks_like_documentation(soup, url)
            nav_sections = extract_navigation(soup, url)
        except Exception as e:
            logger.warning(f"Failed to analyze {url}: {e}")

        map_sections = await self._try_sitemap(url)
        sections = merge_sections(nav_sections, map_sections)

        if not sections:
            sections = await self._probe_common_paths(url)

        logger.info(
            f"Crawled {url}: {len(sections)} sections "
            f"(nav={len(nav_sections)}, sitemap={len(map_sections)}, valid={is_valid})"
        )
        return CrawlResult(
            base_url=url,
            is_valid_docs=is_valid,
            title=title,
            sections=sections,
            sitemap_found=bool(map_sections),
            navigation_found=bool(nav_sections),
        )

    async def fetch_doc_content(self, url: str) -> str:
        """Readable text of one documentation page.

        Raises ``DocsFetchError`` when the page cannot be fetched.
        """
        result = await extract_content(url)
        return result.content

    async def _fetch_page(self, url: str) -> str | None:
        try:
            async with httpx.AsyncClient(
                timeout=settings.fetch_timeout,
                follow_redirects=True,
                headers=request_headers(),
            ) as client:
                resp = await client.get(url)
                if not resp.is_success:
                    logger.debug(f"Crawl {url}: HTTP {resp.status_code}")
                    return None
                return resp.text
        except Exception as e:
            logger.debug(f"Crawl {url} failed: {e}")
            return None

    async def _try_sitemap(self, base_url: str) -> list[DocSection]:
        """Documentation sections from the first usable sitemap."""
        parsed = urlparse(base_url)
        origin = f"{parsed.scheme}://{parsed.netloc}"

        try:
            async with httpx.AsyncClient(
                timeout=settings.fetch_timeout,
                follow_redirects=True,
                headers=request_headers(),
            ) as client:
                for path in SITEMAP_PATHS:
                    sitemap_url = f"{origin}{path}"
                    try:
                        resp = await client.get(sitemap_url)
                        if not resp.is_success:
                            continue
                        text = resp.text
                        if "<urlset" in text:
                            locs = parse_sitemap_locs(text)
                        elif "<sitemapindex" in text:
                            locs = await self._read_child_sitemaps(
                                client, parse_sitemap_locs(text)
                            )
                        else:
                            continue
                    except Exception as e:
                        logger.debug(f"Sitemap {sitemap_url} failed: {e}")
                        continue

                    sections = sitemap_sections(locs, base_url, self._sitemap_max_urls)
                    if sections:
                        logger.debug(f"Sitemap {sitemap_url}: {len(sections)} doc URLs")
                        return sections
        except Exception as e:
            logger.debug(f"Sitemap lookup failed for {base_url}: {e}")

        return []

    async def _read_child_sitemaps(
        self, client: httpx.AsyncClient, sitemap_urls: list[str]
    ) -> list[str]:
        locs: list[str] = []
        for sub_url in sitemap_urls[:_MAX_CHILD_SITEMAPS]:
            try:
                resp = await client.get(sub_url)
                if resp.is_success:
                    locs.extend(parse_sitemap_locs(resp.text))
            except Exception as e:
                logger.debug(f"Child sitemap {sub_url} failed: {e}")
        return locs

    async def _probe_common_paths(self, base_url: str) -> list[DocSection]:
        """Existence-check conventional doc entry paths concurrently."""
        parsed = urlparse(base_url)
        origin = f"{parsed.scheme}://{parsed.netloc}"
        urls = [f"{origin}{path}" for path in COMMON_DOC_PATHS]

        found = await asyncio.gather(*(url_exists(u) for u in urls))

        return [
            DocSection(
                title=title_from_path(path, default="Documentation"),
                path=normalize_path(path),
                url=url,
            )
            for path, url, ok in zip(COMMON_DOC_PATHS, urls, found, strict=True)
            if ok
        ]
