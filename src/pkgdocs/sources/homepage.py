"""Find a documentation link on a project homepage."""

from urllib.parse import urljoin, urlparse

import httpx
from bs4 import BeautifulSoup
from loguru import logger

from pkgdocs.config import settings
from pkgdocs.sources.patterns import has_docs_indicator, host_of, is_http_url
from pkgdocs.sources.verifier import request_headers

_SKIP_HREF_PREFIXES = ("#", "mailto:", "javascript:", "tel:")


def extract_docs_link(html: str, homepage_url: str) -> str | None:
    """Return the first anchor on the page that points at documentation.

    An anchor qualifies when its href or visible text contains a docs
    indicator, or when it points at a ``docs.*`` host. Relative hrefs are
    resolved against the homepage origin.
    """
    parsed = urlparse(homepage_url)
    origin = f"{parsed.scheme}://{parsed.netloc}"
    homepage_norm = homepage_url.rstrip("/")

    soup = BeautifulSoup(html, "html.parser")
    for anchor in soup.find_all("a", href=True):
        href = str(anchor.get("href", "")).strip()
        if not href or href.lower().startswith(_SKIP_HREF_PREFIXES):
            continue

        try:
            absolute = urljoin(origin + "/", href)
            if not is_http_url(absolute) or absolute.rstrip("/") == homepage_norm:
                continue
            docs_host = host_of(absolute).startswith("docs.")
        except ValueError:
            continue

        text = anchor.get_text(" ", strip=True)
        if has_docs_indicator(href) or has_docs_indicator(text) or docs_host:
            return absolute

    return None


async def find_docs_link(homepage_url: str) -> str | None:
    """Fetch a homepage and pick its most plausible documentation link.

    Any fetch or parse failure yields None.
    """
    try:
        async with httpx.AsyncClient(
            timeout=settings.fetch_timeout,
            follow_redirects=True,
            headers=request_headers(),
        ) as client:
            resp = await client.get(homepage_url)
            if not resp.is_success:
                logger.debug(f"Homepage {homepage_url}: HTTP {resp.status_code}")
                return None
            html = resp.text
    except Exception as e:
        logger.debug(f"Homepage fetch failed for {homepage_url}: {e}")
        return None

    try:
        link = extract_docs_link(html, homepage_url)
    except Exception as e:
        logger.debug(f"Homepage parse failed for {homepage_url}: {e}")
        return None

    if link:
        logger.debug(f"Found docs link on {homepage_url}: {link}")
    return link
