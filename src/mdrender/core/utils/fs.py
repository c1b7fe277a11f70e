"""Markdown file discovery and output naming"""

import re
from pathlib import Path


MD_EXTENSIONS = {'.md', '.markdown'}
UNSAFE_CHARS_RE = re.compile(r'[^\w\s-]')
SEPARATORS_RE   = re.compile(r'[\s_-]+')


def slugify(stem: str, fallback: str = "index") -> str:
    """Turn a file stem into a lowercase, hyphen-joined output name; fallback if nothing is left."""
    name = SEPARATORS_RE.sub('-', UNSAFE_CHARS_RE.sub('', stem.lower())).strip('-')
    return name or fallback


def discover_files(path: Path) -> list[Path]:
    """Return sorted .md/.markdown files under path, or [path] if a single file."""
    if path.is_file():
        return [path] if path.suffix.lower() in MD_EXTENSIONS else []
    return sorted(p for p in path.rglob('*') if p.is_file() and p.suffix.lower() in MD_EXTENSIONS)


def output_path(src: Path, root: Path, output_dir: Path, ext: str) -> Path:
    """Mirror src's location under root into output_dir, named by slugified stem."""
    parent = src.parent.relative_to(root) if root.is_dir() else Path()
    name = slugify(src.stem)
    return output_dir / parent / f"{name}.{ext}"
