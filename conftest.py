import os

# Default to an in-memory SQLite database and quiet logs for tests
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")
