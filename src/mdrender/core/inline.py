"""Inline transforms: links, images, color previews and emphasis spans"""

import re


LINK_RE        = re.compile(r'(?<!!)\[([^\]]+)\]\(([^)]+)\)')
IMAGE_RE       = re.compile(r'!\[([^\]]*)\]\(([^)]+)\)')
COLOR_CODE_RE  = re.compile(r'#(?:[A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})\b', re.ASCII)

# Order matters: bold before italic so `**x**` is not read as two italics.
INLINE_FORMATS: tuple[tuple[re.Pattern, str], ...] = (
    (re.compile(r'\*\*([^*]+)\*\*'), r'<strong>\1</strong>'),
    (re.compile(r'\*([^*]+)\*'),     r'<em>\1</em>'),
    (re.compile(r'~~([^~]+)~~'),     r'<del>\1</del>'),
    (re.compile(r'`([^`]+)`'),       r'<code>\1</code>'),
)


def parse_links(text: str) -> str:
    """`[text](url)` -> <a>. A `[` preceded by `!` is left for parse_images."""
    return LINK_RE.sub(r'<a href="\2">\1</a>', text)


def parse_images(text: str) -> str:
    return IMAGE_RE.sub(r'<img src="\2" alt="\1">', text)


def _color_preview(m: re.Match) -> str:
    hex_code = m.group(0)
    return (
        f'{hex_code}<span class="color-preview" data-hex="{hex_code}" '
        f'style="background-color:{hex_code};"></span>'
    )


def parse_color_codes(text: str) -> str:
    """Follow each `#rgb` / `#rrggbb` code with an inline preview swatch."""
    return COLOR_CODE_RE.sub(_color_preview, text)


def parse_inline_formats(text: str) -> str:
    """Bold, italic, strikethrough and inline code. Inline code is not escaped."""
    for pattern, repl in INLINE_FORMATS:
        text = pattern.sub(repl, text)
    return text
