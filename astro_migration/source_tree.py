"""Parsed view of a legacy page that maps tags back to their source text."""

from __future__ import annotations

import re
from typing import Any, Optional

try:
    from bs4 import BeautifulSoup, NavigableString  # type: ignore[import-not-found]
except ImportError as exc:  # pragma: no cover - surfaced at runtime
    raise SystemExit(
        "Missing dependency 'beautifulsoup4'. Install with pip install"
        " beautifulsoup4"
    ) from exc

MAIN_CONTENT_CLASS = "main-content"
PHONE_PREVIEW_CLASS = "right-phone"
_DIV_CLOSE = "</div>"


class SourceTree:
    """BeautifulSoup tree whose tags can be sliced out of the raw markup.

    Only ``html.parser`` records where each tag starts, so the tree is used
    to locate elements and the returned text is always taken verbatim from
    the source. Entities, attribute quoting and void tags stay untouched.
    """

    def __init__(self, html: str) -> None:
        self.html = html
        self.soup: Any = BeautifulSoup(html, "html.parser")
        self._line_starts = [0]
        self._line_starts.extend(
            match.end() for match in re.finditer("\n", html)
        )

    def start_of(self, tag: Any) -> int:
        """Return the source offset of the ``<`` opening ``tag``."""

        return self._line_starts[tag.sourceline - 1] + tag.sourcepos

    def open_tag_end(self, tag: Any) -> int:
        """Return the source offset just past the ``>`` of the open tag."""

        return self.html.index(">", self.start_of(tag)) + 1

    def open_tag(self, tag: Any) -> str:
        return self.html[self.start_of(tag):self.open_tag_end(tag)]

    def text_of(self, tag: Any) -> Optional[str]:
        """Return the raw text of a tag holding one plain text node.

        Tags with child elements, comments, or no directly following
        closing tag yield None.
        """

        if len(tag.contents) != 1:
            return None
        if type(tag.contents[0]) is not NavigableString:
            return None
        start = self.open_tag_end(tag)
        end = self.html.find("<", start)
        closing = f"</{tag.name}>"
        if end <= start:
            return None
        if self.html[end:end + len(closing)].lower() != closing:
            return None
        return self.html[start:end]

    def main_content(self) -> Any:
        """Return the first ``div`` whose class is exactly main-content."""

        return self.soup.find(
            lambda tag: tag.name == "div"
            and tag.get("class") == [MAIN_CONTENT_CLASS]
        )

    def main_content_markup(self) -> Optional[str]:
        """Return the raw inner markup of the main-content region.

        The region counts only when its next element sibling is the
        phone-preview ``div``, separated by nothing but whitespace.
        """

        main = self.main_content()
        if main is None:
            return None
        sibling = main.find_next_sibling()
        if sibling is None or sibling.name != "div":
            return None
        if sibling.get("class") != [PHONE_PREVIEW_CLASS]:
            return None

        inner = self.html[self.open_tag_end(main):self.start_of(sibling)]
        inner = inner.rstrip()
        if inner[-len(_DIV_CLOSE):].lower() != _DIV_CLOSE:
            return None
        return inner[:-len(_DIV_CLOSE)]
