"""Block transforms: headings, lists, blockquotes, rules, tables and paragraphs"""

import re


HEADING_RE       = re.compile(r'^(#{1,6})\s(.+)$', re.MULTILINE)
BULLET_ITEM_RE   = re.compile(r'^[*\-]\s(.+)$', re.MULTILINE)
NUMBERED_ITEM_RE = re.compile(r'^[0-9]+\.\s(.+)$', re.MULTILINE)
LIST_ITEMS_RE    = re.compile(r'(<li>.*</li>)', re.DOTALL)
BULLET_LIST_RE   = re.compile(r'<ul dir="auto">.*</ul>', re.DOTALL)
BLOCKQUOTE_RE    = re.compile(r'^>\s(.+)$', re.MULTILINE)
RULE_RE          = re.compile(r'^(?:[*\-_][ \t]*){3,}$', re.MULTILINE)
TABLE_RE         = re.compile(r'\|(.+)\|\n\|(?:[-:]+\|)+\n((?:\|.+\|\n?)*)')
STARTS_WITH_TAG  = re.compile(r'<[^>]+>')


def _heading(m: re.Match) -> str:
    level = len(m.group(1))
    return f"<h{level}>{m.group(2).strip()}</h{level}>"


def parse_headings(text: str) -> str:
    """`#`..`######` + space -> <h1>..<h6>. Seven or more hashes stay literal."""
    return HEADING_RE.sub(_heading, text)


def _wrap_ordered(text: str) -> str:
    """Wrap the first run of <li> markers that is not already inside the <ul>."""
    wrap = r'<ol dir="auto">\1</ol>'
    ul = BULLET_LIST_RE.search(text)
    if ul is None:
        return LIST_ITEMS_RE.sub(wrap, text, count=1)
    before, after = text[:ul.start()], text[ul.end():]
    if LIST_ITEMS_RE.search(before):
        return LIST_ITEMS_RE.sub(wrap, before, count=1) + ul.group(0) + after
    return before + ul.group(0) + LIST_ITEMS_RE.sub(wrap, after, count=1)


def parse_lists(text: str) -> str:
    """Convert list lines to <li> and wrap one span per list kind.

    Each wrap covers the first <li> through the last </li> it can see, so two
    separate bullet groups end up inside a single <ul> along with whatever
    sits between them.
    """
    text = BULLET_ITEM_RE.sub(r'<li>\1</li>', text)
    text = LIST_ITEMS_RE.sub(r'<ul dir="auto">\1</ul>', text, count=1)
    text = NUMBERED_ITEM_RE.sub(r'<li>\1</li>', text)
    return _wrap_ordered(text)


def parse_blockquotes(text: str) -> str:
    """Each `> ` line becomes its own <blockquote>; adjacent lines are not merged."""
    return BLOCKQUOTE_RE.sub(r'<blockquote dir="auto">\1</blockquote>', text)


def parse_horizontal_rules(text: str) -> str:
    return RULE_RE.sub('<hr>', text)


def _cells(row: str) -> list[str]:
    """Split a `|a|b|` row into trimmed, non-empty cell texts."""
    return [c.strip() for c in row.split('|') if c.strip()]


def _table(m: re.Match) -> str:
    head = ''.join(f"<th>{c}</th>" for c in _cells(m.group(1)))
    rows = '\n'.join(
        '<tr>' + ''.join(f"<td>{c}</td>" for c in _cells(row)) + '</tr>'
        for row in m.group(2).strip().split('\n')
    )
    return (
        '\n<table dir="auto">\n'
        f'<thead>\n<tr>{head}</tr>\n</thead>\n'
        f'<tbody>\n{rows}\n</tbody>\n'
        '</table>\n'
    )


def parse_tables(text: str) -> str:
    """Header row + `|---|` delimiter row + body rows -> <table>.

    Rows are not padded to the header width; each renders the cells it has.
    """
    return TABLE_RE.sub(_table, text)


def parse_paragraphs(text: str) -> str:
    """Wrap blank-line separated blocks in <p> unless they already open with a tag."""
    blocks = (b.strip() for b in text.split('\n\n'))
    return '\n\n'.join(
        b if STARTS_WITH_TAG.match(b) else f'<p dir="auto">{b}</p>'
        for b in blocks if b
    )
