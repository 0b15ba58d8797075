"""npm registry client.

Fetches the package document, resolves the ``latest`` dist-tag and merges
version-specific fields over package-level ones. Everything past this
module sees only ``PackageMetadata``.
"""

import re
from typing import Any
from urllib.parse import quote, urlparse

import httpx
from loguru import logger

from pkgdocs.config import settings
from pkgdocs.models import PackageMetadata
from pkgdocs.sources.verifier import request_headers

# npm shorthand: "owner/repo" or "github:owner/repo"
_SHORTHAND_RE = re.compile(r"^(?:github:)?([\w.-]+)/([\w.-]+)$")


def registry_package_url(name: str) -> str:
    """Registry JSON URL for a package (scope ``@`` kept, ``/`` encoded)."""
    return f"{settings.npm_registry_url.rstrip('/')}/{quote(name, safe='@')}"


def npm_package_url(name: str) -> str:
    """Human-facing registry page for a package. Always derivable."""
    return f"{settings.npm_site_url.rstrip('/')}/{name}"


def _str_or_none(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _link_field(value: Any) -> str | dict[str, Any] | None:
    """Keep a repository/bugs field only if it is a string or a dict."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, dict):
        return value
    return None


def _keywords(value: Any) -> list[str] | None:
    if not isinstance(value, list):
        return None
    return [k for k in value if isinstance(k, str)]


def parse_metadata(name: str, data: Any) -> PackageMetadata | None:
    """Normalize a registry package document.

    Returns None when the payload is not a JSON object.
    """
    if not isinstance(data, dict):
        return None

    dist_tags = data.get("dist-tags")
    latest = dist_tags.get("latest") if isinstance(dist_tags, dict) else None
    if not isinstance(latest, str) or not latest:
        latest = None

    versions = data.get("versions")
    ver_info: dict[str, Any] = {}
    if latest and isinstance(versions, dict) and isinstance(versions.get(latest), dict):
        ver_info = versions[latest]

    def pick(field: str) -> Any:
        value = ver_info.get(field)
        return value if value else data.get(field)

    return PackageMetadata(
        name=name,
        version=latest or "unknown",
        description=_str_or_none(pick("description")),
        homepage=_str_or_none(pick("homepage")),
        repository=_link_field(pick("repository")),
        bugs=_link_field(pick("bugs")),
        keywords=_keywords(pick("keywords")),
    )


async def get_metadata(name: str) -> PackageMetadata | None:
    """Query the npm registry for package metadata.

    Fails soft: network errors, non-2xx responses and malformed payloads
    all return None.
    """
    url = registry_package_url(name)
    try:
        async with httpx.AsyncClient(
            timeout=settings.registry_timeout,
            follow_redirects=True,
            headers=request_headers(),
        ) as client:
            resp = await client.get(url)
            if not resp.is_success:
                logger.debug(f"npm lookup for {name}: HTTP {resp.status_code}")
                return None
            data = resp.json()
    except Exception as e:
        logger.debug(f"npm lookup failed for {name}: {e}")
        return None

    metadata = parse_metadata(name, data)
    if metadata is None:
        logger.debug(f"npm lookup for {name}: unexpected payload")
    return metadata


def extract_github_url(repository: str | dict[str, Any] | None) -> str | None:
    """Canonicalize a repository field to an https GitHub URL.

    Returns None when the repository is missing or not hosted on GitHub.
    """
    if not repository:
        return None

    if isinstance(repository, dict):
        url = repository.get("url")
        if not isinstance(url, str) or not url:
            return None
    else:
        url = repository

    url = url.strip()
    m = _SHORTHAND_RE.match(url)
    if m:
        url = f"https://github.com/{m.group(1)}/{m.group(2)}"

    url = re.sub(r"^git\+", "", url)
    url = re.sub(r"\.git$", "", url)
    url = re.sub(r"^git://", "https://", url)
    url = re.sub(r"^ssh://git@github\.com", "https://github.com", url)
    url = re.sub(r"^git@github\.com:", "https://github.com/", url)
    url = re.sub(r"^http://", "https://", url)

    host = (urlparse(url).hostname or "").lower()
    if host in ("github.com", "www.github.com"):
        return url.rstrip("/")
    return None
