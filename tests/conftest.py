"""Pytest configuration for the catalog test suite."""

import os
from pathlib import Path

# Configuration is read when the runtime context is first imported
os.environ["APP_ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["LOG_FILE"] = ""
os.environ["APP_CONFIG_FILE"] = str(Path(__file__).resolve().parent.parent / "config.yaml")

from tests.fixtures import *  # noqa: E402,F401,F403
