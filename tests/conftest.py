# tests/conftest.py

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so `import hyperlink_extractor` works
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from hyperlink_extractor.utils.logging_utils import reset_logging  # noqa: E402


@pytest.fixture
def loguru_messages():
    """
    Enable package logging into an in-memory list for the duration of a test.
    """
    from loguru import logger

    messages = []
    logger.enable("hyperlink_extractor")
    sink_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(sink_id)
    logger.disable("hyperlink_extractor")


@pytest.fixture(autouse=True)
def _silence_logging():
    yield
    reset_logging()
