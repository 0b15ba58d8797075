"""Pytest configuration and fixtures."""

import httpx
import pytest
import respx

REGISTRY = "https://registry.npmjs.org"


@pytest.fixture
def mock_http():
    """respx router for all httpx traffic.

    Requests without a matching route raise inside httpx, which the
    code under test treats like any other network failure.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


def _npm_document(
    name: str,
    version: str = "1.0.0",
    homepage: str | None = None,
    repository: str | dict | None = None,
    description: str | None = None,
    keywords: list[str] | None = None,
    top_level: dict | None = None,
) -> dict:
    """Minimal npm registry package document."""
    ver_info: dict = {"name": name, "version": version}
    if homepage is not None:
        ver_info["homepage"] = homepage
    if repository is not None:
        ver_info["repository"] = repository
    if description is not None:
        ver_info["description"] = description
    if keywords is not None:
        ver_info["keywords"] = keywords
    return {
        "name": name,
        "dist-tags": {"latest": version},
        "versions": {version: ver_info},
        **(top_level or {}),
    }


@pytest.fixture
def registry(mock_http):
    """Register an npm document (or a status code) for a package name."""

    def _register(name: str, document: dict | None = None, status: int = 200):
        route = mock_http.get(f"{REGISTRY}/{name}")
        if document is None:
            return route.mock(return_value=httpx.Response(status))
        return route.mock(return_value=httpx.Response(status, json=document))

    return _register


@pytest.fixture
def npm_doc():
    """Builder for npm registry package documents."""
    return _npm_document
