"""Data types shared by the registry client, discovery engine and crawler."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

Confidence = Literal["high", "medium", "low"]


class PackageMetadata(BaseModel):
    """Normalized registry metadata for the latest published version.

    Version-specific fields already take precedence over package-level
    ones by the time this record is built (see ``sources.registry``).
    """

    name: str
    version: str = "unknown"
    description: str | None = None
    homepage: str | None = None
    repository: str | dict[str, Any] | None = None
    bugs: str | dict[str, Any] | None = None
    keywords: list[str] | None = None


class DiscoveredPackage(BaseModel):
    """Best documentation answer for one package."""

    model_config = ConfigDict(frozen=True)

    name: str
    version: str = "unknown"
    description: str | None = None
    keywords: list[str] | None = None
    docs_url: str | None = None
    github_url: str | None = None
    npm_url: str
    confidence: Confidence = "low"
    # Tier that produced docs_url (diagnostic only)
    source: str = "npm"

    def to_dict(self) -> dict[str, Any]:
        """Return the camelCase shape consumed by tool adapters."""
        return {
            "name": self.name,
            "version": self.version,
            "description": self.description,
            "keywords": self.keywords,
            "docsUrl": self.docs_url,
            "githubUrl": self.github_url,
            "npmUrl": self.npm_url,
            "confidence": self.confidence,
        }


class DocSection(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    path: str
    url: str


class CrawlResult(BaseModel):
    """Navigable structure of a documentation site."""

    base_url: str
    is_valid_docs: bool = False
    title: str | None = None
    sections: list[DocSection] = []
    sitemap_found: bool = False
    navigation_found: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "baseUrl": self.base_url,
            "isValidDocs": self.is_valid_docs,
            "title": self.title,
            "sections": [s.model_dump() for s in self.sections],
            "sitemapFound": self.sitemap_found,
            "navigationFound": self.navigation_found,
        }


class ExtractResult(BaseModel):
    content: str
    url: str
    truncated: bool = False
