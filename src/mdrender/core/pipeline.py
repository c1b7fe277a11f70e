"""Pipeline orchestration: fixed stage order, renderer object, and file rendering"""

from pathlib import Path
from typing import Callable

from loguru import logger

from mdrender.config import RenderOptions
from mdrender.core.blocks import (
    parse_blockquotes,
    parse_headings,
    parse_horizontal_rules,
    parse_lists,
    parse_paragraphs,
    parse_tables,
)
from mdrender.core.inline import (
    parse_color_codes,
    parse_images,
    parse_inline_formats,
    parse_links,
)
from mdrender.core.spacing import final_cleanup, normalize_spacing
from mdrender.core.utils.fs import discover_files, output_path
from mdrender.core.vault import extract_code_blocks, restore_code_blocks


Stage = Callable[[str], str]

# Runs between code extraction and restoration, in this order.
STAGES: tuple[tuple[str, Stage], ...] = (
    ("headings",       parse_headings),
    ("lists",          parse_lists),
    ("links",          parse_links),
    ("images",         parse_images),
    ("color-codes",    parse_color_codes),
    ("inline-formats", parse_inline_formats),
    ("blockquotes",    parse_blockquotes),
    ("rules",          parse_horizontal_rules),
    ("tables",         parse_tables),
    ("paragraphs",     parse_paragraphs),
)


def render(markdown: str, options: RenderOptions = None) -> str:
    """Convert markdown text to an HTML fragment.

    Fenced code is lifted into a call-local vault before any other stage and
    put back, escaped, after the last one. options is accepted for API
    compatibility; no stage reads it.
    """
    html = normalize_spacing(markdown)
    html, vault = extract_code_blocks(html)
    for name, stage in STAGES:
        html = stage(html)
        logger.trace("Stage {} -> {} chars", name, len(html))
    html = restore_code_blocks(html, vault)
    return final_cleanup(html)


class MarkdownRenderer:
    """Reusable renderer holding options only; safe to share between callers."""

    def __init__(self, options: RenderOptions = None):
        self.options = options or RenderOptions()

    def parse(self, markdown: str) -> str:
        return render(markdown, self.options)


def run_render(
    path: str,
    output_dir: Path,
    options: RenderOptions = None,
    ext: str = "html",
    ) -> list[tuple[Path, Path]]:
    """Render path (file or directory) into output_dir. Returns (source, output) pairs.

    Raises RuntimeError before writing anything if two sources map to the
    same output file.
    """
    root = Path(path)
    renderer = MarkdownRenderer(options)
    planned: dict[Path, Path] = {}
    for p in discover_files(root):
        out_file = output_path(p, root, output_dir, ext)
        if out_file in planned:
            raise RuntimeError(f"Failed to render {p}: {planned[out_file]} already renders to {out_file}")
        planned[out_file] = p

    results = []
    for out_file, p in planned.items():
        try:
            out_file.parent.mkdir(parents=True, exist_ok=True)
            out_file.write_text(renderer.parse(p.read_text(encoding="utf-8-sig")), encoding="utf-8")
        except Exception as e:
            raise RuntimeError(f"Failed to render {p}: {e}") from e
        logger.info("Rendered {} -> {}", p, out_file)
        results.append((p, out_file))
    return results
