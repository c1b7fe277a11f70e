"""Whitespace canonicalization before the pipeline and HTML cleanup after it"""

import re


BOM                  = '\ufeff'
EXCESS_NEWLINES_RE   = re.compile(r'\n{4,}')
TRAILING_SPACE_RE    = re.compile(r'[ \t]+$', re.MULTILINE)
SPACED_RULE_RE       = re.compile(r'\n{3,}(?:-{3,}|_{3,}|\*{3,})\n{3,}')
BULLET_GAP_RE        = re.compile(r'(\n- .*)\n{3,}(?=- )')
NUMBERED_GAP_RE      = re.compile(r'(\n[0-9]+\. .*)\n{3,}(?=[0-9]+\. )')

EMPTY_PARAGRAPH_RE   = re.compile(r'<p[^>]*>\s*</p>')
GAP_BETWEEN_TAGS_RE  = re.compile(r'>\n{3,}<')
SPACE_AFTER_TAG_RE   = re.compile(r'>\s{2,}')
SPACE_BEFORE_TAG_RE  = re.compile(r'\s{2,}<')


def normalize_spacing(text: str) -> str:
    """Trim the document and cap blank-line runs, including around rules and list items."""
    text = text.lstrip(BOM).strip()
    text = EXCESS_NEWLINES_RE.sub('\n\n\n', text)
    text = TRAILING_SPACE_RE.sub('', text)
    text = SPACED_RULE_RE.sub('\n\n---\n\n', text)
    text = BULLET_GAP_RE.sub(r'\1\n\n', text)
    return NUMBERED_GAP_RE.sub(r'\1\n\n', text)


def final_cleanup(html: str) -> str:
    """Drop empty paragraphs and squeeze whitespace around tags."""
    html = EMPTY_PARAGRAPH_RE.sub('', html)
    html = GAP_BETWEEN_TAGS_RE.sub('>\n\n<', html)
    html = SPACE_AFTER_TAG_RE.sub('> ', html)
    return SPACE_BEFORE_TAG_RE.sub(' <', html)
