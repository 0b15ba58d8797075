"""In-memory discovery cache.

One cache belongs to one ``PackageScanner``. Entries live for the
lifetime of the owning engine; ``clear`` forces full rediscovery with
fresh network state. Writes happen on the event loop thread only, so no
locking is needed.
"""

from loguru import logger

from pkgdocs.models import DiscoveredPackage


class DiscoveryCache:
    """Package name -> DiscoveredPackage memo."""

    def __init__(self) -> None:
        self._entries: dict[str, DiscoveredPackage] = {}
        self._hits = 0
        self._misses = 0

    def get(self, name: str) -> DiscoveredPackage | None:
        """Get the cached record for a package, if any."""
        entry = self._entries.get(name)
        if entry is None:
            self._misses += 1
            logger.debug(f"Discovery cache MISS: {name}")
            return None
        self._hits += 1
        logger.debug(f"Discovery cache HIT: {name}")
        return entry

    def set(self, name: str, result: DiscoveredPackage) -> None:
        self._entries[name] = result

    def clear(self) -> int:
        """Drop every entry. Returns the number of entries removed."""
        count = len(self._entries)
        self._entries.clear()
        if count:
            logger.debug(f"Cleared {count} discovery cache entries")
        return count

    def stats(self) -> dict[str, int]:
        return {"entries": len(self._entries), "hits": self._hits, "misses": self._misses}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)
