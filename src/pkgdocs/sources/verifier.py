"""Lightweight existence checks for candidate documentation URLs."""

import httpx
from loguru import logger

from pkgdocs.config import settings


def request_headers() -> dict[str, str]:
    """Return headers identifying pkgdocs to third-party hosts."""
    return {"User-Agent": settings.user_agent}


async def url_exists(url: str, timeout: float | None = None) -> bool:
    """Check whether ``url`` answers a HEAD request with a 2xx status.

    Redirects are followed, nothing is retried. Any error, timeout or
    non-2xx status counts as "does not exist"; this never raises.
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout or settings.verify_timeout,
            follow_redirects=True,
            headers=request_headers(),
        ) as client:
            resp = await client.head(url)
            if resp.is_success:
                return True
            logger.debug(f"Probe {url}: HTTP {resp.status_code}")
            return False
    except Exception as e:
        logger.debug(f"Probe {url} failed: {e}")
        return False
