"""Project-level discovery: dependencies from package.json plus custom docs.

A project may pin documentation URLs in ``.pkgdocs.json`` (or
``pkgdocs.json``)::

    {"packages": [{"name": "my-lib", "docsUrl": "https://docs.example.com"}]}

Custom entries are trusted as-is and skip discovery entirely.
"""

import json
from pathlib import Path

from loguru import logger

from pkgdocs.config import settings
from pkgdocs.discovery import PackageScanner
from pkgdocs.models import DiscoveredPackage
from pkgdocs.sources.registry import npm_package_url

# Tooling packages whose docs are never worth discovering
SKIP_PACKAGES = frozenset(
    {
        "@types/node",
        "@types/react",
        "@types/react-dom",
        "typescript",
        "webpack",
        "rollup",
        "esbuild",
        "parcel",
        "turbo",
        "eslint",
        "prettier",
        "stylelint",
        "@eslint/js",
        "eslint-config-prettier",
        "eslint-plugin-prettier",
        "@typescript-eslint/eslint-plugin",
        "@typescript-eslint/parser",
        "typescript-eslint",
        "@vitest/coverage-v8",
        "@testing-library/jest-dom",
        "husky",
        "lint-staged",
        "semantic-release",
        "@semantic-release/changelog",
        "@semantic-release/git",
    }
)


def should_skip_package(name: str) -> bool:
    if name in SKIP_PACKAGES:
        return True
    if name.startswith("@types/"):
        return True
    return "eslint-config" in name or "eslint-plugin" in name


def read_dependencies(project_dir: Path) -> list[str]:
    """Names from ``dependencies`` and ``devDependencies``, in file order.

    Missing or malformed package.json yields an empty list.
    """
    package_json = project_dir / "package.json"
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.debug(f"No package.json in {project_dir}")
        return []
    except (OSError, ValueError) as e:
        logger.warning(f"Could not read {package_json}: {e}")
        return []

    if not isinstance(data, dict):
        return []

    names: list[str] = []
    for field in ("dependencies", "devDependencies"):
        deps = data.get(field)
        if isinstance(deps, dict):
            names.extend(n for n in deps if isinstance(n, str) and n not in names)
    return names


def load_custom_docs(project_dir: Path) -> list[DiscoveredPackage]:
    """Custom documentation entries from the first config file found."""
    for filename in settings.get_custom_docs_files():
        config_path = project_dir / filename
        if not config_path.is_file():
            continue
        try:
            data = json.loads(config_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring malformed {config_path}: {e}")
            return []

        packages = data.get("packages") if isinstance(data, dict) else None
        if not isinstance(packages, list):
            return []

        records: list[DiscoveredPackage] = []
        for entry in packages:
            if not isinstance(entry, dict):
                continue
            name, docs_url = entry.get("name"), entry.get("docsUrl")
            if not isinstance(name, str) or not isinstance(docs_url, str):
                logger.warning(f"Skipping custom docs entry without name/docsUrl: {entry}")
                continue
            description = entry.get("description")
            version = entry.get("version")
            records.append(
                DiscoveredPackage(
                    name=name,
                    version=version if isinstance(version, str) else "custom",
                    description=description if isinstance(description, str) else None,
                    docs_url=docs_url,
                    npm_url=npm_package_url(name),
                    confidence="high",
                    source="custom",
                )
            )
        logger.info(f"Loaded {len(records)} custom docs entries from {config_path.name}")
        return records

    return []


async def scan_project(
    project_dir: Path, scanner: PackageScanner | None = None
) -> dict[str, DiscoveredPackage]:
    """Discover documentation for every relevant dependency of a project."""
    scanner = scanner or PackageScanner()
    custom = {record.name: record for record in load_custom_docs(project_dir)}

    to_discover = [
        name
        for name in read_dependencies(project_dir)
        if name not in custom and not should_skip_package(name)
    ]
    discovered = await scanner.discover_packages(to_discover)
    return {**custom, **discovered}
