"""Shared fixtures for pipeline integration tests"""

import pytest

from mdrender.config import RenderOptions
from mdrender.core.pipeline import MarkdownRenderer


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text.

## Heading 2

- item one
- item two

```python
print("<hello>")
```

---

Footer paragraph.
"""


@pytest.fixture(name="renderer")
def renderer_fixture():
    return MarkdownRenderer(RenderOptions())


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
