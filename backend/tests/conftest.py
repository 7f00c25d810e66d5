"""Root conftest — shared test configuration."""

import os

# Must be set before app.config.get_settings() is first called (lru_cache)
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("JWT_SECRET", "test-secret-0123456789abcdef0123456789")
os.environ.setdefault("ADMIN_EMAIL", "owner@portfolio.dev")
os.environ.setdefault("LOG_FORMAT", "text")
