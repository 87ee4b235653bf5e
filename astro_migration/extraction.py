"""SEO metadata extraction from legacy HTML pages."""

from __future__ import annotations

import os
import re
from dataclasses import replace
from typing import Optional

from .models import ExtractionMode, SeoInfo
from .source_tree import SourceTree

HTML_SUFFIX = ".html"
TITLE_SUFFIX = " 组件"

_TITLE_RE = re.compile(r"<title[^>]*>([^<]+)</title>", re.IGNORECASE)
_DESCRIPTION_RE = re.compile(
    r'<div[^>]*class="main-content"[^>]*>.*?<p[^>]*>([^<]+)</p>',
    re.IGNORECASE | re.DOTALL,
)
_KEYWORDS_RE = re.compile(
    r'<meta[^>]*name="keywords"[^>]*content="([^"]+)"', re.IGNORECASE
)


def page_name(filename: str) -> str:
    """Return the base name of ``filename`` without its ``.html`` suffix."""

    name = os.path.basename(filename)
    if name.endswith(HTML_SUFFIX) and name != HTML_SUFFIX:
        return name[: -len(HTML_SUFFIX)]
    return name


def title_from_filename(filename: str) -> str:
    """Build a fallback title such as ``Up-form 组件`` from ``up-form.html``."""

    name = page_name(filename)
    return name[:1].upper() + name[1:] + TITLE_SUFFIX


def extract_seo_info(
    html: str,
    filename: str,
    defaults: SeoInfo,
    *,
    mode: ExtractionMode = "regex",
) -> SeoInfo:
    """Return SEO info for ``html``, falling back to ``defaults`` per field.

    Image and site name are never read from the page. Missing fields are
    not an error: each one silently keeps its default value.
    """

    if mode == "tree":
        title, description, keywords = _extract_with_tree(html)
    else:
        title, description, keywords = _extract_with_regex(html)

    return replace(
        defaults,
        title=title if title is not None else title_from_filename(filename),
        description=(
            description if description is not None else defaults.description
        ),
        keywords=keywords if keywords is not None else defaults.keywords,
    )


def _extract_with_regex(
    html: str,
) -> tuple[Optional[str], Optional[str], Optional[str]]:
    title_match = _TITLE_RE.search(html)
    description_match = _DESCRIPTION_RE.search(html)
    keywords_match = _KEYWORDS_RE.search(html)
    return (
        title_match.group(1).strip() if title_match else None,
        description_match.group(1).strip() if description_match else None,
        keywords_match.group(1) if keywords_match else None,
    )


def _extract_with_tree(
    html: str,
) -> tuple[Optional[str], Optional[str], Optional[str]]:
    tree = SourceTree(html)

    title: Optional[str] = None
    for title_tag in tree.soup.find_all("title"):
        text = tree.text_of(title_tag)
        if text is not None:
            title = text.strip()
            break

    description: Optional[str] = None
    main = tree.main_content()
    if main is not None:
        for paragraph in main.find_all_next("p"):
            text = tree.text_of(paragraph)
            if text is not None:
                description = text.strip()
                break

    keywords: Optional[str] = None
    for meta in tree.soup.find_all("meta"):
        match = _KEYWORDS_RE.match(tree.open_tag(meta))
        if match:
            keywords = match.group(1)
            break

    return title, description, keywords
