"""Render Astro page components from extracted page data."""

from __future__ import annotations

import re
from typing import Optional

from .extraction import page_name
from .models import SeoInfo

ASTRO_SUFFIX = ".astro"
INDEX_PAGE = "index"
DEFAULT_LAYOUT_IMPORT = "../layouts/Layout.astro"

_CONTROL_WHITESPACE_RE = re.compile(r"[\n\r\t]")
_WHITESPACE_RUN_RE = re.compile(r"\s+")


def clean_string(value: Optional[str]) -> str:
    """Return ``value`` as a single line safe inside a quoted JS literal."""

    if not value:
        return ""

    value = _CONTROL_WHITESPACE_RE.sub(" ", value)
    value = _WHITESPACE_RUN_RE.sub(" ", value)
    value = value.replace('"', '\\"').replace("'", "\\'")
    return value.strip()


def derive_route(filename: str) -> str:
    """Map ``index.html`` to ``/`` and ``name.html`` to ``/name``."""

    name = page_name(filename)
    return "/" if name == INDEX_PAGE else f"/{name}"


def output_filename(filename: str) -> str:
    """Return the ``.astro`` filename written for ``filename``."""

    return page_name(filename) + ASTRO_SUFFIX


def render_page(
    filename: str,
    seo: SeoInfo,
    content: str,
    *,
    layout_import: str = DEFAULT_LAYOUT_IMPORT,
) -> str:
    """Return the full source of the ``.astro`` page for ``filename``."""

    route = derive_route(filename)
    lines = [
        "---",
        f'const title = "{clean_string(seo.title)}";',
        f'const description = "{clean_string(seo.description)}";',
        f'const keywords = "{clean_string(seo.keywords)}";',
        f'const image = "{clean_string(seo.image)}";',
        f'const site_name = "{clean_string(seo.site_name)}";',
        f'const route = "{route}";',
        "",
        f"import Layout from '{layout_import}';",
        "---",
        "",
        "<Layout ",
        "  title={title} ",
        "  description={description} ",
        "  keywords={keywords}",
        "  image={image}",
        "  site_name={site_name}",
        "  route={route}",
        ">",
        f"  {content}",
        "</Layout>",
    ]
    return "\n".join(lines)
