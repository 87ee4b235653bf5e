"""Batch-migrate legacy HTML documentation pages into Astro pages."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from astro_migration import (
    DEFAULT_CONFIG,
    MigrationConfig,
    MigrationSummary,
    migrate_html_to_astro,
)
from config_loader import ConfigError, resolve_runtime_config

# Default record for programmatic reuse.
config: MigrationConfig = DEFAULT_CONFIG


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Return CLI arguments for the migration tool."""

    parser = argparse.ArgumentParser(
        description=(
            "Convert a folder of legacy HTML pages into Astro page"
            " components that share a generated Layout."
        ),
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON config file (defaults to migrate-astro.json).",
    )
    parser.add_argument("--source-dir", help="Override HTML source directory.")
    parser.add_argument(
        "--target-dir", help="Override Astro pages output directory."
    )
    parser.add_argument(
        "--extraction-mode",
        choices=("regex", "tree"),
        help="Locate page regions with regexes (default) or an HTML parser.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``migrate-to-astro`` CLI."""

    args = parse_args(argv)
    try:
        runtime = resolve_runtime_config(
            config_path=args.config,
            source_dir=args.source_dir,
            target_dir=args.target_dir,
            extraction_mode=args.extraction_mode,
        )
    except ConfigError as exc:
        raise SystemExit(f"Config error: {exc}") from exc

    if not runtime.source_dir.is_dir():
        raise SystemExit(f"Source directory not found: {runtime.source_dir}")

    summary: MigrationSummary = migrate_html_to_astro(runtime)
    return 1 if summary.failure_count else 0


__all__ = ["config", "main", "migrate_html_to_astro"]


if __name__ == "__main__":
    raise SystemExit(main())
