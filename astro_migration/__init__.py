"""Convert legacy HTML documentation pages into Astro page components."""

from .cleaning import clean_html_content, process_code_blocks
from .extraction import extract_seo_info
from .layout import LAYOUT_TEMPLATE, write_layout
from .models import (
    DEFAULT_CONFIG,
    DEFAULT_SEO,
    FileOutcome,
    MigrationConfig,
    MigrationSummary,
    SeoInfo,
    SourceDocument,
)
from .pipeline import migrate_html_to_astro
from .rendering import clean_string, derive_route, render_page

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_SEO",
    "LAYOUT_TEMPLATE",
    "FileOutcome",
    "MigrationConfig",
    "MigrationSummary",
    "SeoInfo",
    "SourceDocument",
    "clean_html_content",
    "clean_string",
    "derive_route",
    "extract_seo_info",
    "migrate_html_to_astro",
    "process_code_blocks",
    "render_page",
    "write_layout",
]
