"""Configuration settings for pkgdocs."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """pkgdocs configuration.

    Environment variables:
    - NPM_REGISTRY_URL: Registry JSON API base (default: https://registry.npmjs.org)
    - NPM_SITE_URL: Registry package page base, used for the last-resort docs link
    - USER_AGENT: User-Agent sent with every probe and page fetch
    - REGISTRY_TIMEOUT / VERIFY_TIMEOUT / FETCH_TIMEOUT: Per-request timeouts (seconds)
    - DISCOVERY_BATCH_SIZE: Packages discovered concurrently per batch (default: 10)
    - SITEMAP_MAX_URLS: Cap on sitemap entries considered per crawl
    - EXTRACT_MAX_LENGTH: Max characters returned by the content extractor
    - CUSTOM_DOCS_FILES: Comma-separated config file names looked up in a project dir
    - LOG_LEVEL: Loguru level for the CLI (default: INFO)
    """

    # Registry
    npm_registry_url: str = "https://registry.npmjs.org"
    npm_site_url: str = "https://www.npmjs.com/package"

    # HTTP
    user_agent: str = "Mozilla/5.0 (compatible; pkgdocs/1.0)"
    registry_timeout: float = 10.0
    verify_timeout: float = 5.0
    fetch_timeout: float = 10.0

    # Discovery
    discovery_batch_size: int = 10

    # Crawler
    sitemap_max_urls: int = 200
    extract_max_length: int = 10000

    # Project scan
    custom_docs_files: str = ".pkgdocs.json,pkgdocs.json"

    # Logging
    log_level: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": False}

    def get_custom_docs_files(self) -> list[str]:
        """Return configured custom docs file names, in lookup order."""
        return [f.strip() for f in self.custom_docs_files.split(",") if f.strip()]


settings = Settings()
