"""Root conftest — shared test configuration."""

import os

# Human-readable logs in test output; keep the API guard at its default
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("MAX_SEQUENCE_INDEX", "5000")
