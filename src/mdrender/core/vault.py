"""Fenced code extraction into a per-call vault, and restoration as escaped HTML"""

import re

from loguru import logger

from mdrender.core.escape import escape_html
from mdrender.core.models import CodeBlock, CodeVault, CodeVaultError


FENCE_RE = re.compile(r'```([A-Za-z0-9_]*)\n(.*?)```', re.DOTALL)


def code_block_html(block: CodeBlock) -> str:
    """Return the <pre><code> markup for a single code block."""
    language_class = f"language-{block.language}" if block.language else ""
    return (
        f'<pre dir="ltr"><code class="{language_class}" data-language="{block.language}">'
        f'{escape_html(block.code)}</code></pre>'
    )


def extract_code_blocks(text: str) -> tuple[str, CodeVault]:
    """Replace each fenced block with the vault placeholder. Returns (text, vault).

    Blocks are stored in document order; each fence pair is matched against
    the nearest closing fence so one match never spans two blocks.
    """
    vault = CodeVault()

    def _stash(m: re.Match) -> str:
        vault.blocks.append(CodeBlock(language=m.group(1), code=m.group(2).strip()))
        return vault.placeholder

    text = FENCE_RE.sub(_stash, text)
    logger.debug("Extracted {} code block(s)", len(vault))
    return text, vault


def restore_code_blocks(text: str, vault: CodeVault) -> str:
    """Swap each placeholder, first occurrence first, for its block's HTML, then empty the vault.

    Raises CodeVaultError if the buffer holds a different number of
    placeholders than the vault holds blocks.
    """
    found = text.count(vault.placeholder)
    if found != len(vault):
        raise CodeVaultError(
            f"Expected {len(vault)} code block placeholder(s), found {found}"
        )
    for block in vault.blocks:
        text = text.replace(vault.placeholder, code_block_html(block), 1)
    logger.debug("Restored {} code block(s)", len(vault))
    vault.blocks.clear()
    return text


def render_code_blocks(text: str) -> str:
    """Render every fenced block in place without going through a vault."""
    return FENCE_RE.sub(
        lambda m: code_block_html(CodeBlock(language=m.group(1), code=m.group(2).strip())),
        text,
    )
