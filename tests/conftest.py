"""Root conftest: shared test configuration."""

import os

# Never touch a real database file from the test run
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")
