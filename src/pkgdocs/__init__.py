"""pkgdocs - documentation URL discovery for npm packages."""

from importlib.metadata import version

from pkgdocs.__main__ import _cli as main
from pkgdocs.discovery import PackageScanner
from pkgdocs.models import CrawlResult, DiscoveredPackage, DocSection
from pkgdocs.sources.crawler import DocsCrawler

__version__ = version("pkgdocs")
__all__ = [
    "CrawlResult",
    "DiscoveredPackage",
    "DocSection",
    "DocsCrawler",
    "PackageScanner",
    "main",
    "__version__",
]
