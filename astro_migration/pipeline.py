"""High-level orchestration for the HTML to Astro migration."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from .cleaning import clean_html_content
from .extraction import HTML_SUFFIX, extract_seo_info
from .layout import write_layout
from .models import (
    DEFAULT_CONFIG,
    FileOutcome,
    MigrationConfig,
    MigrationSummary,
    SourceDocument,
)
from .rendering import output_filename, render_page


def list_source_files(config: MigrationConfig) -> list[str]:
    """Return the ``.html`` entries of the source directory, sorted by name."""

    excluded = set(config.exclude_files)
    return sorted(
        name
        for name in os.listdir(config.source_dir)
        if name.endswith(HTML_SUFFIX) and name not in excluded
    )


def read_source(config: MigrationConfig, filename: str) -> SourceDocument:
    """Read ``filename`` from the source directory as UTF-8 text."""

    path = Path(config.source_dir) / filename
    return SourceDocument(
        filename=filename, text=path.read_text(encoding="utf-8")
    )


def migrate_document(
    document: SourceDocument, config: MigrationConfig
) -> FileOutcome:
    """Convert one source document and write its ``.astro`` page."""

    seo = extract_seo_info(
        document.text,
        document.filename,
        config.default_seo,
        mode=config.extraction_mode,
    )
    content = clean_html_content(document.text, mode=config.extraction_mode)
    page = render_page(
        document.filename, seo, content, layout_import=config.layout_import()
    )

    output_path = Path(config.target_dir) / output_filename(document.filename)
    payload = page.encode("utf-8")
    output_path.write_bytes(payload)

    return FileOutcome(
        filename=document.filename,
        success=True,
        output_path=output_path,
        bytes_written=len(payload),
        seo=seo,
        empty_content=not content,
    )


def migrate_html_to_astro(
    config: MigrationConfig = DEFAULT_CONFIG,
) -> MigrationSummary:
    """Migrate every qualifying HTML page and return the per-file outcomes.

    A failure in one file is reported and recorded, then the run moves on.
    Pages written before a failure stay on disk. Only failing to create the
    output directories aborts the run.
    """

    print("🚀 Migrating HTML pages to Astro...")

    target_dir = Path(config.target_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    layout_path = write_layout(config)

    files = list_source_files(config)
    total = len(files)
    print(f"📁 Found {total} HTML files to migrate")

    summary = MigrationSummary(target_dir=target_dir, layout_path=layout_path)
    for index, filename in enumerate(files, start=1):
        try:
            document = read_source(config, filename)
            outcome = migrate_document(document, config)
        except Exception as exc:
            print(
                f"❌ [{index}/{total}] Failed: {filename}: {exc}",
                file=sys.stderr,
            )
            summary.outcomes.append(
                FileOutcome(filename=filename, success=False, error=str(exc))
            )
            continue

        summary.outcomes.append(outcome)
        print(
            f"✅ [{index}/{total}] Migrated: {filename} ->"
            f" {output_filename(filename)}"
        )
        if outcome.seo is not None:
            print(f"   📝 SEO: {outcome.seo.title}")
        if outcome.empty_content:
            print(f"   ⚠️ No main content extracted from {filename}")

    report_summary(summary)
    return summary


def report_summary(summary: MigrationSummary) -> None:
    print("\n📊 Migration summary:")
    print(f"   ✅ Succeeded: {summary.success_count} files")
    print(f"   ❌ Failed: {summary.failure_count} files")
    print(f"   📁 Output directory: {summary.target_dir}")

    if summary.success_count > 0:
        print("\n🎉 Migration complete. Next steps:")
        print("   1. Run pnpm dev to start the development server")
        print("   2. Open http://localhost:4321 to review the pages")
        print("   3. Run pnpm build for a production build")
