"""Documentation URL discovery engine.

Resolves a package name to the single best documentation URL through a
strict priority cascade. Each tier is consulted only when every earlier
tier produced nothing; the first acceptable candidate wins.

Tiers (tried in order):
1. Curated overrides (custom project config, then the built-in table)
2. Registry homepage, unless it is a repository or registry page
   (``high`` when it looks like documentation, else ``medium``)
3. Organization URL patterns for scoped packages (probed)
4. Generic URL patterns: docs subdomain, /docs, GitHub Pages, ReadTheDocs (probed)
5. Documentation link found on the homepage itself
6. GitHub repository
7. Registry package page (always available, ``low``)

When the registry lookup fails only an override can still answer;
otherwise the registry page is returned at ``low``.

Registry metadata is fetched for every package, override or not, so that
version, description, keywords and GitHub URL are always populated.
"""

import asyncio
from typing import NamedTuple

from loguru import logger

from pkgdocs.cache import DiscoveryCache
from pkgdocs.config import settings
from pkgdocs.models import Confidence, DiscoveredPackage
from pkgdocs.sources.homepage import find_docs_link
from pkgdocs.sources.overrides import get_known_docs_url
from pkgdocs.sources.patterns import (
    Candidate,
    generic_patterns,
    homepage_confidence,
    is_disqualified_homepage,
    org_patterns,
)
from pkgdocs.sources.registry import extract_github_url, get_metadata, npm_package_url
from pkgdocs.sources.verifier import url_exists


class _Accepted(NamedTuple):
    url: str
    confidence: Confidence
    source: str


async def probe_candidates(candidates: list[Candidate]) -> Candidate | None:
    """Probe candidates one at a time; the first that exists wins."""
    for candidate in candidates:
        if await url_exists(candidate.url):
            return candidate
    return None


class PackageScanner:
    """Discovers documentation URLs for npm packages.

    Results are memoized per package name for the lifetime of the
    instance. Concurrent requests for the same uncached package share one
    discovery run.
    """

    def __init__(
        self,
        cache: DiscoveryCache | None = None,
        extra_overrides: dict[str, str] | None = None,
        batch_size: int | None = None,
    ):
        self._cache = cache if cache is not None else DiscoveryCache()
        self._extra_overrides = dict(extra_overrides or {})
        self._batch_size = batch_size
        self._inflight: dict[str, asyncio.Task[DiscoveredPackage]] = {}

    @property
    def cache(self) -> DiscoveryCache:
        return self._cache

    async def discover_package(self, name: str) -> DiscoveredPackage:
        """Discover the documentation URL for one package.

        Never raises: every failure degrades to a lower tier, ending at the
        registry page with ``low`` confidence.
        """
        cached = self._cache.get(name)
        if cached is not None:
            return cached

        task = self._inflight.get(name)
        if task is None:
            task = asyncio.create_task(self._discover_and_store(name))
            self._inflight[name] = task
            task.add_done_callback(lambda t, n=name: self._forget_inflight(n, t))
        return await asyncio.shield(task)

    async def discover_packages(self, names: list[str]) -> dict[str, DiscoveredPackage]:
        """Discover many packages in sequential batches of concurrent lookups."""
        results: dict[str, DiscoveredPackage] = {}
        size = max(1, self._batch_size or settings.discovery_batch_size)

        for start in range(0, len(names), size):
            batch = names[start : start + size]
            outcomes = await asyncio.gather(
                *(self.discover_package(name) for name in batch),
                return_exceptions=True,
            )
            for name, outcome in zip(batch, outcomes, strict=True):
                if isinstance(outcome, BaseException):
                    logger.warning(f"Discovery failed for {name}: {outcome}")
                    outcome = self._fallback(name)
                results[name] = outcome

        logger.info(f"Discovered docs for {len(results)} packages")
        return results

    def clear_cache(self) -> None:
        """Forget every result so the next lookup rediscovers from scratch."""
        self._cache.clear()

    # -----------------------------------------------------------------------
    # Cascade
    # -----------------------------------------------------------------------

    def _forget_inflight(self, name: str, task: asyncio.Task) -> None:
        if self._inflight.get(name) is task:
            del self._inflight[name]

    def _fallback(self, name: str) -> DiscoveredPackage:
        npm_url = npm_package_url(name)
        return DiscoveredPackage(name=name, npm_url=npm_url, docs_url=npm_url)

    async def _discover_and_store(self, name: str) -> DiscoveredPackage:
        try:
            result = await self._discover(name)
        except Exception as e:
            logger.warning(f"Unexpected error discovering {name}: {e}")
            result = self._fallback(name)
        self._cache.set(name, result)
        return result

    async def _discover(self, name: str) -> DiscoveredPackage:
        npm_url = npm_package_url(name)
        override = self._override(name)
        metadata = await get_metadata(name)

        if metadata is None:
            accepted = override
            if accepted is None:
                logger.info(f"No registry metadata for {name}, using npm page")
                return self._fallback(name)
            return self._record(name, npm_url, accepted)

        github_url = extract_github_url(metadata.repository)
        accepted = override or await self._resolve(name, metadata.homepage, github_url)
        if accepted is None:
            accepted = _Accepted(npm_url, "low", "npm")

        return self._record(
            name,
            npm_url,
            accepted,
            version=metadata.version,
            description=metadata.description,
            keywords=metadata.keywords,
            github_url=github_url,
        )

    def _record(
        self, name: str, npm_url: str, accepted: _Accepted, **fields
    ) -> DiscoveredPackage:
        logger.info(
            f"Discovered {name} docs: {accepted.url} "
            f"(via {accepted.source}, confidence={accepted.confidence})"
        )
        return DiscoveredPackage(
            name=name,
            npm_url=npm_url,
            docs_url=accepted.url,
            confidence=accepted.confidence,
            source=accepted.source,
            **fields,
        )

    async def _resolve(
        self, name: str, homepage: str | None, github_url: str | None
    ) -> _Accepted | None:
        usable_homepage = (
            homepage if homepage and not is_disqualified_homepage(homepage) else None
        )

        return (
            self._tier_homepage(usable_homepage)
            or await self._tier_org_patterns(name)
            or await self._tier_generic_patterns(name, homepage, github_url)
            or await self._tier_homepage_link(usable_homepage)
            or self._tier_github(github_url)
        )

    def _override(self, name: str) -> _Accepted | None:
        if name in self._extra_overrides:
            return _Accepted(self._extra_overrides[name], "high", "custom")
        known = get_known_docs_url(name)
        if known:
            return _Accepted(known, "high", "override")
        return None

    def _tier_homepage(self, homepage: str | None) -> _Accepted | None:
        if not homepage:
            return None
        return _Accepted(homepage, homepage_confidence(homepage), "homepage")

    async def _tier_org_patterns(self, name: str) -> _Accepted | None:
        hit = await probe_candidates(org_patterns(name))
        if hit is None:
            return None
        return _Accepted(hit.url, hit.confidence, "org_pattern")

    async def _tier_generic_patterns(
        self, name: str, homepage: str | None, github_url: str | None
    ) -> _Accepted | None:
        hit = await probe_candidates(generic_patterns(name, homepage, github_url))
        if hit is None:
            return None
        return _Accepted(hit.url, hit.confidence, "generic_pattern")

    async def _tier_homepage_link(self, homepage: str | None) -> _Accepted | None:
        if not homepage:
            return None
        link = await find_docs_link(homepage)
        if link is None:
            return None
        return _Accepted(link, "high", "homepage_link")

    def _tier_github(self, github_url: str | None) -> _Accepted | None:
        if not github_url:
            return None
        return _Accepted(github_url, "medium", "github")
