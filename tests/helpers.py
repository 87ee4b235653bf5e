"""Builders for legacy documentation pages used across the tests."""

from typing import Optional


def build_page(
    body: str = "<h1>Button</h1><p>Buttons trigger actions.</p>",
    *,
    title: Optional[str] = "Button 按钮",
    keywords: Optional[str] = None,
    with_phone: bool = True,
) -> str:
    """Return a legacy documentation page with the usual page regions."""
    head = ['<meta charset="UTF-8" />']
    if title is not None:
        head.append(f"<title>{title}</title>")
    if keywords is not None:
        head.append(f'<meta name="keywords" content="{keywords}" />')
    phone = (
        '<div class="right-phone"><iframe src="/h5"></iframe></div>'
        if with_phone
        else ""
    )
    return (
        "<!DOCTYPE html>\n<html>\n<head>\n"
        + "\n".join(head)
        + "\n</head>\n<body>\n"
        + '<div class="left-menu"><ul id="menu"></ul></div>\n'
        + f'<div class="main-content">\n{body}\n</div>\n'
        + phone
        + "\n</body>\n</html>\n"
    )
