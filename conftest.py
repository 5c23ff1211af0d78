"""Настройка окружения для тестов."""
import os

os.environ.setdefault("GS_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BLOG_API_KEY", "test-api-key")

pytest_plugins = ["tests.fixture"]
