"""Root test configuration: isolate loguru state between tests"""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added by CLI runs so later tests never write to a closed stream."""
    yield
    logger.remove()
    logger.disable("mdrender")
