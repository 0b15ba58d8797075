"""Candidate documentation URL generators and URL/text heuristics.

Everything here is pure: no network access, no logging. Generators
return candidates most-likely-correct first; callers probe them in order
and accept the first that exists.
"""

import re
from typing import Any, NamedTuple
from urllib.parse import urlparse

from pkgdocs.models import Confidence

# Substrings that mark a URL or link text as documentation
DOCS_INDICATORS = ("docs", "documentation", "guide", "api-reference")

# Repository and registry hosts are never documentation sites themselves
REPOSITORY_HOSTS = frozenset({"github.com", "gitlab.com", "bitbucket.org"})
REGISTRY_HOSTS = frozenset({"npmjs.com", "npmjs.org"})

# TLDs that documentation-first project sites favour
_DOCS_TLDS = (".dev", ".io")

DOC_PATH_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"^/docs?/",
        r"^/guide/",
        r"^/api/",
        r"^/reference/",
        r"^/learn/",
        r"^/tutorial",
        r"^/getting-started",
        r"^/introduction",
        r"^/overview",
    )
)

DOC_HEADING_TERMS = (
    "api",
    "usage",
    "installation",
    "getting started",
    "props",
    "methods",
    "options",
)

_DOCS_URL_MARKERS = (
    "/docs",
    "/documentation",
    "/guide",
    "/api",
    "/reference",
    "docs.",
    "documentation.",
)


class Candidate(NamedTuple):
    url: str
    confidence: Confidence


# ---------------------------------------------------------------------------
# URL predicates
# ---------------------------------------------------------------------------


def host_of(url: str) -> str:
    """Lowercased hostname without a leading ``www.`` ('' if unparsable)."""
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""
    return host.removeprefix("www.")


def is_http_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def is_github_pages(url: str) -> bool:
    return host_of(url).endswith(".github.io")


def is_repository_host(url: str) -> bool:
    """True for exact repository hosts; ``*.github.io`` sites are not."""
    return host_of(url) in REPOSITORY_HOSTS


def is_disqualified_homepage(url: str) -> bool:
    """Homepages that cannot be accepted as documentation directly."""
    if not is_http_url(url):
        return True
    host = host_of(url)
    return host in REPOSITORY_HOSTS or host in REGISTRY_HOSTS


def has_docs_indicator(text: str) -> bool:
    lowered = text.lower()
    return any(marker in lowered for marker in DOCS_INDICATORS)


def homepage_confidence(url: str) -> Confidence:
    """Rate an accepted homepage.

    ``high`` when the URL itself looks like documentation, uses a
    documentation-favoured TLD, or is a GitHub Pages site.
    """
    if has_docs_indicator(url) or is_github_pages(url):
        return "high"
    if host_of(url).endswith(_DOCS_TLDS):
        return "high"
    return "medium"


def is_docs_url(url: str) -> bool:
    """URL path or host alone suggests a documentation page."""
    lowered = url.lower()
    return any(marker in lowered for marker in _DOCS_URL_MARKERS)


def matches_doc_pattern(path: str) -> bool:
    return any(p.search(path) for p in DOC_PATH_PATTERNS)


def is_doc_shaped_path(path: str) -> bool:
    """Conventional doc path, or a path mentioning doc/guide/api anywhere."""
    if matches_doc_pattern(path):
        return True
    lowered = path.lower()
    return "doc" in lowered or "guide" in lowered or "api" in lowered


def path_depth(path: str) -> int:
    return len([part for part in path.split("/") if part])


def is_doc_heading(text: str) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in DOC_HEADING_TERMS)


def normalize_path(path: str) -> str:
    """Strip query, fragment and trailing slash; root stays ``/``."""
    path = path.split("#", 1)[0].split("?", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    return path.rstrip("/") or "/"


def title_from_path(path: str, default: str = "Unknown") -> str:
    """Readable title from the last path segment: ``/docs/getting-started`` -> ``Getting Started``."""
    parts = [p for p in path.split("/") if p]
    if not parts:
        return default
    segment = re.sub(r"\.html?$", "", parts[-1], flags=re.IGNORECASE)
    segment = segment.replace("-", " ").replace("_", " ").strip()
    if not segment:
        return default
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), segment)


# ---------------------------------------------------------------------------
# Organization patterns (scoped packages)
# ---------------------------------------------------------------------------

# Templates accept {name} (unscoped name after prefix stripping and
# special-case substitution) and {pkg} (raw unscoped name).
_ORG_PATTERNS: dict[str, dict[str, Any]] = {
    "aws-sdk": {
        "templates": (
            "https://docs.aws.amazon.com/AWSJavaScriptSDK/v3/latest/client/{name}/",
            "https://docs.aws.amazon.com/AWSJavaScriptSDK/v3/latest/Package/-aws-sdk-{pkg}/",
        ),
        "strip_prefixes": ("client-",),
        "special": {
            "client-cognito-identity-provider": "cognito-identity-provider",
            "client-elastic-load-balancing-v2": "elastic-load-balancing-v2",
        },
    },
    "google-cloud": {
        "templates": ("https://cloud.google.com/nodejs/docs/reference/{name}/latest",),
    },
    "azure": {
        "templates": ("https://learn.microsoft.com/en-us/javascript/api/@azure/{name}/",),
    },
    "angular": {
        "templates": ("https://angular.dev/api/{name}", "https://angular.dev/overview"),
    },
    "tanstack": {
        "templates": (
            "https://tanstack.com/{name}/latest/docs",
            "https://tanstack.com/{name}/latest",
        ),
        "strip_prefixes": ("react-", "vue-", "solid-", "svelte-", "angular-"),
    },
    "mui": {
        "templates": ("https://mui.com/{name}/getting-started/", "https://mui.com/{name}/"),
        "special": {
            "material": "material-ui",
            "joy": "joy-ui",
            "base": "base-ui",
            "x-data-grid": "x/react-data-grid",
            "x-date-pickers": "x/react-date-pickers",
        },
    },
    "radix-ui": {
        "templates": ("https://www.radix-ui.com/primitives/docs/components/{name}",),
        "strip_prefixes": ("react-",),
    },
    "testing-library": {
        "templates": ("https://testing-library.com/docs/{name}/intro",),
        "special": {
            "react": "react-testing-library",
            "dom": "dom-testing-library",
            "vue": "vue-testing-library",
            "svelte": "svelte-testing-library",
            "jest-dom": "ecosystem-jest-dom",
        },
    },
    "prisma": {
        "templates": ("https://www.prisma.io/docs/orm/{name}",),
        "special": {"client": "prisma-client"},
    },
    "sentry": {
        "templates": (
            "https://docs.sentry.io/platforms/javascript/guides/{name}/",
            "https://docs.sentry.io/platforms/javascript/",
        ),
    },
    "nestjs": {"templates": ("https://docs.nestjs.com/",)},
    "storybook": {"templates": ("https://storybook.js.org/docs",)},
    "supabase": {
        "templates": ("https://supabase.com/docs/reference/javascript/introduction",),
    },
}


def split_scoped_name(name: str) -> tuple[str, str] | None:
    """``@org/pkg`` -> ``("org", "pkg")``; None for unscoped names."""
    if not name.startswith("@") or "/" not in name:
        return None
    scope, _, pkg = name[1:].partition("/")
    if not scope or not pkg:
        return None
    return scope.lower(), pkg


def _dedupe(candidates: list[Candidate]) -> list[Candidate]:
    seen: set[str] = set()
    unique: list[Candidate] = []
    for c in candidates:
        if c.url not in seen:
            seen.add(c.url)
            unique.append(c)
    return unique


def org_patterns(name: str) -> list[Candidate]:
    """Candidates for a scoped package from known organization conventions.

    Unscoped names and unknown organizations yield an empty list.
    """
    scoped = split_scoped_name(name)
    if scoped is None:
        return []
    org, pkg = scoped
    pattern = _ORG_PATTERNS.get(org)
    if pattern is None:
        return []

    special: dict[str, str] = pattern.get("special", {})
    if pkg in special:
        service = special[pkg]
    else:
        service = pkg
        for prefix in pattern.get("strip_prefixes", ()):
            if service.startswith(prefix) and len(service) > len(prefix):
                service = service[len(prefix):]
                break

    return _dedupe(
        [
            Candidate(template.format(name=service, pkg=pkg), "high")
            for template in pattern["templates"]
        ]
    )


# ---------------------------------------------------------------------------
# Generic patterns
# ---------------------------------------------------------------------------


def readthedocs_slug(name: str) -> str:
    """``@scope/pkg`` -> ``scope-pkg``; anything outside [a-z0-9-] hyphenated."""
    slug = name.lower().lstrip("@").replace("/", "-")
    slug = re.sub(r"[^a-z0-9-]+", "-", slug)
    return slug.strip("-")


def github_pages_url(github_url: str) -> str | None:
    """``https://github.com/owner/repo`` -> ``https://owner.github.io/repo/``."""
    m = re.search(r"github\.com/([^/]+)/([^/#?]+)", github_url)
    if not m:
        return None
    owner = m.group(1).lower()
    repo = m.group(2).removesuffix(".git")
    if repo.lower() == f"{owner}.github.io":
        return f"https://{owner}.github.io/"
    return f"https://{owner}.github.io/{repo}/"


def generic_patterns(
    name: str,
    homepage: str | None = None,
    github_url: str | None = None,
) -> list[Candidate]:
    """Conventional documentation locations for any package.

    Homepage-derived candidates are skipped for repository and registry
    homepages, where a docs subdomain or ``/docs`` path means something
    else entirely.
    """
    candidates: list[Candidate] = []

    if homepage and not is_disqualified_homepage(homepage):
        parsed = urlparse(homepage)
        base = f"{parsed.scheme}://{parsed.netloc}{parsed.path.rstrip('/')}"
        host = host_of(homepage)
        if not host.startswith("docs.") and not is_github_pages(homepage):
            candidates.append(Candidate(f"https://docs.{host}/", "high"))
        candidates.append(Candidate(f"{base}/docs", "high"))
        candidates.append(Candidate(f"{base}/documentation", "medium"))
        candidates.append(Candidate(f"{base}/guide", "medium"))

    if github_url:
        pages = github_pages_url(github_url)
        if pages:
            candidates.append(Candidate(pages, "medium"))

    slug = readthedocs_slug(name)
    if slug:
        candidates.append(Candidate(f"https://{slug}.readthedocs.io/", "medium"))

    return _dedupe(candidates)
