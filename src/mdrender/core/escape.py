"""HTML escaping for fenced code content"""

import re


ESCAPE_MAP: dict[str, str] = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#039;',
}
ESCAPE_RE = re.compile(r'[&<>"\']')


def escape_html(text: str) -> str:
    """Replace the five reserved characters with entities in a single pass."""
    return ESCAPE_RE.sub(lambda m: ESCAPE_MAP[m.group(0)], text)
