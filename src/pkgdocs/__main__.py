"""pkgdocs command-line entry point."""

import asyncio
import json
import sys
from pathlib import Path

from loguru import logger

_USAGE = """usage:
  pkgdocs discover NAME [NAME ...]   Find documentation URLs for packages
  pkgdocs crawl URL                  List the sections of a documentation site
  pkgdocs scan [DIR]                 Discover docs for a project's dependencies
"""


def _configure_logging() -> None:
    from pkgdocs.config import settings

    logger.remove()
    logger.add(sys.stderr, level=settings.log_level)


def _print_json(data: object) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _make_scanner(project_dir: Path):
    """Scanner that honours custom docs pinned in ``project_dir``."""
    from pkgdocs.discovery import PackageScanner
    from pkgdocs.project import load_custom_docs

    custom = {r.name: r.docs_url for r in load_custom_docs(project_dir) if r.docs_url}
    return PackageScanner(extra_overrides=custom)


async def _discover(names: list[str]) -> None:
    scanner = _make_scanner(Path.cwd())
    results = await scanner.discover_packages(names)
    _print_json({name: r.to_dict() for name, r in results.items()})


async def _crawl(url: str) -> None:
    from pkgdocs.sources.crawler import DocsCrawler

    result = await DocsCrawler().crawl(url)
    _print_json(result.to_dict())


async def _scan(project_dir: Path) -> None:
    from pkgdocs.project import scan_project

    results = await scan_project(project_dir, _make_scanner(project_dir))
    _print_json({name: r.to_dict() for name, r in results.items()})


def _cli() -> None:
    """CLI dispatcher: discover, crawl or scan."""
    args = sys.argv[1:]
    if not args or args[0] in ("-h", "--help"):
        print(_USAGE)
        return

    command, rest = args[0], args[1:]
    _configure_logging()

    if command == "discover" and rest:
        asyncio.run(_discover(rest))
    elif command == "crawl" and len(rest) == 1:
        try:
            asyncio.run(_crawl(rest[0]))
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)
    elif command == "scan" and len(rest) <= 1:
        project_dir = Path(rest[0]) if rest else Path.cwd()
        asyncio.run(_scan(project_dir.expanduser().resolve()))
    else:
        print(_USAGE, file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    _cli()
