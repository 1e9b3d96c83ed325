import os
import tempfile

import pytest

os.environ.setdefault("LOG_FILE", os.path.join(tempfile.gettempdir(), "summora-tests", "app.log"))
os.environ.setdefault("API_KEY", "test-key")

from backend.services.summary_config import SummaryConfig  # noqa: E402

TWELVE_WORDS = "The quick brown fox jumps over the lazy dog near the river"


@pytest.fixture
def long_text():
    return TWELVE_WORDS


@pytest.fixture
def default_config():
    return SummaryConfig()
