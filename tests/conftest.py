"""Root conftest: shared test configuration."""

import os

# Keep test output quiet and independent of a developer's .env
os.environ.setdefault("PROMPT_ENHANCER_LOG_LEVEL", "WARNING")
os.environ.setdefault("PROMPT_ENHANCER_LOG_FORMAT", "text")
