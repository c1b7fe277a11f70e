"""Intermediate data models for the render pipeline"""

from dataclasses import dataclass, field
from uuid import uuid4

from loguru import logger
from pydantic import BaseModel


# Silent unless an application opts in via configure_logging.
logger.disable("mdrender")

PLACEHOLDER_TEMPLATE = "<!--code-block:{nonce}-->"


class CodeVaultError(RuntimeError):
    """Placeholder count and stored code blocks disagree at restoration time."""


class CodeBlock(BaseModel):
    """A fenced code block lifted out of the document before other stages run."""
    language: str = ""      # empty when the opening fence carries no tag
    code: str               # raw content, surrounding whitespace stripped


@dataclass
class CodeVault:
    """Per-call store of extracted code blocks, consumed in document order.

    Each extraction call builds its own vault with a fresh placeholder, so two
    renders never share entries even when run on the same renderer.
    """
    placeholder: str = field(default_factory=lambda: PLACEHOLDER_TEMPLATE.format(nonce=uuid4().hex))
    blocks:      list[CodeBlock] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.blocks)
