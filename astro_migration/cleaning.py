"""Extract and escape the main-content region of a legacy page."""

from __future__ import annotations

import re

from .models import ExtractionMode
from .source_tree import SourceTree

# The phone preview div must directly follow the main-content div.
_MAIN_CONTENT_RE = re.compile(
    r'<div[^>]*class="main-content"[^>]*>([\s\S]*?)</div>\s*'
    r'<div[^>]*class="right-phone"',
    re.IGNORECASE,
)
_CODE_BLOCK_RE = re.compile(
    r"(<pre[^>]*>\s*<code[^>]*>)([\s\S]*?)(</code>\s*</pre>)",
    re.IGNORECASE,
)
_TAG_FRAGMENT_RE = re.compile(r"<[^>]*>")
_SPLIT_HYPHEN_RE = re.compile(r"([0-9A-Za-z_])\s*-\s*([0-9A-Za-z_])")

_ENTITY_DECODINGS = (("&lt;", "<"), ("&gt;", ">"), ("&amp;", "&"))
_ENTITY_ENCODINGS = (("&", "&amp;"), ("<", "&lt;"), (">", "&gt;"))
_BRACE_ENTITIES = (("{", "&#123;"), ("}", "&#125;"))


def clean_html_content(html: str, *, mode: ExtractionMode = "regex") -> str:
    """Return the escaped main-content markup, or ``""`` when not found."""

    if mode == "tree":
        content = SourceTree(html).main_content_markup()
    else:
        match = _MAIN_CONTENT_RE.search(html)
        content = match.group(1) if match else None

    if content is None:
        return ""

    content = process_code_blocks(content)
    content = escape_braces(content)
    return content.strip()


def process_code_blocks(content: str) -> str:
    """Normalize the escaping inside every ``<pre><code>`` block."""

    return _CODE_BLOCK_RE.sub(_normalize_code_block, content)


def _normalize_code_block(match: re.Match[str]) -> str:
    open_tag, code, close_tag = match.groups()

    # Undo any partial escaping first so nothing gets encoded twice.
    for entity, char in _ENTITY_DECODINGS:
        code = code.replace(entity, char)

    code = _TAG_FRAGMENT_RE.sub(
        lambda fragment: repair_split_hyphens(fragment.group(0)), code
    )

    for char, entity in _ENTITY_ENCODINGS:
        code = code.replace(char, entity)

    return open_tag + code + close_tag


def repair_split_hyphens(fragment: str) -> str:
    """Join hyphenated identifiers split by wrapping (``up - form``)."""

    return _SPLIT_HYPHEN_RE.sub(r"\1-\2", fragment)


def escape_braces(content: str) -> str:
    """Replace literal braces, which Astro treats as expressions."""

    for char, entity in _BRACE_ENTITIES:
        content = content.replace(char, entity)
    return content
