"""Shared dataclasses for the HTML to Astro migration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Optional

ExtractionMode = Literal["regex", "tree"]


@dataclass(frozen=True, slots=True)
class SeoInfo:
    """SEO fields injected into each generated page."""

    title: str
    description: str
    keywords: str
    image: str
    site_name: str


DEFAULT_SEO = SeoInfo(
    title="uView-Plus 免费组件文档",
    description=(
        "uView Plus Free 免费文档，涵盖丰富的前端组件示例与用法，"
        "免费无广告，无登录，无扫码，无授权"
    ),
    keywords=(
        "uview-plus-free, uview-plus 免费文档, uView Plus, uView-Plus, uView,"
        " 免费文档, 离线文档, 组件, 移动端组件, 前端, UI, 组件库, liusheng,"
        " liusheng22"
    ),
    image="/assets/logo.png",
    site_name="uView-Plus-Free 免费组件文档",
)


@dataclass(frozen=True, slots=True)
class MigrationConfig:
    """Immutable settings for a single migration run."""

    source_dir: Path = Path("html")
    target_dir: Path = Path("src/pages")
    layout_name: str = "Layout"
    exclude_files: tuple[str, ...] = ("test.html", "README.md")
    default_seo: SeoInfo = DEFAULT_SEO
    layouts_dir: Optional[Path] = None
    extraction_mode: ExtractionMode = "regex"

    def resolved_layouts_dir(self) -> Path:
        """Return the layouts directory, defaulting to a target sibling."""

        if self.layouts_dir is not None:
            return Path(self.layouts_dir)
        return Path(self.target_dir).parent / "layouts"

    def layout_path(self) -> Path:
        """Return the path the layout component is written to."""

        return self.resolved_layouts_dir() / f"{self.layout_name}.astro"

    def layout_import(self) -> str:
        """Return the layout import specifier as seen from the pages dir."""

        relative = os.path.relpath(self.layout_path(), self.target_dir)
        specifier = Path(relative).as_posix()
        if not specifier.startswith("."):
            specifier = f"./{specifier}"
        return specifier


DEFAULT_CONFIG = MigrationConfig()


@dataclass(frozen=True, slots=True)
class SourceDocument:
    """Raw text of one legacy HTML page."""

    filename: str
    text: str


@dataclass(slots=True)
class FileOutcome:
    """Per-file record produced by the orchestrator."""

    filename: str
    success: bool
    output_path: Optional[Path] = None
    bytes_written: int = 0
    error: Optional[str] = None
    seo: Optional[SeoInfo] = None
    empty_content: bool = False


def _empty_outcome_list() -> list[FileOutcome]:
    return []


@dataclass(slots=True)
class MigrationSummary:
    """Outcome of a full migration run."""

    target_dir: Path
    layout_path: Path
    outcomes: list[FileOutcome] = field(default_factory=_empty_outcome_list)

    @property
    def success_count(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.success)

    @property
    def failure_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.success)

    @property
    def written_paths(self) -> list[Path]:
        """Return output paths of successfully migrated pages."""

        return [
            outcome.output_path
            for outcome in self.outcomes
            if outcome.success and outcome.output_path is not None
        ]
