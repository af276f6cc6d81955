"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/
    │   ├── domain/          # User aggregate, exceptions
    │   ├── application/     # Request validation, DTOs, UserService
    │   ├── infrastructure/  # In-memory repository, concurrency
    │   └── presentation/    # Settings, logging, exception mapping
    └── integration/
        └── api/             # Full HTTP round trips with TestClient
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from userhub_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load test overrides if present (same mechanism as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.test").exists():
    load_dotenv(CONFIG_DIR / ".env.test")


@pytest.fixture(autouse=True)
def fresh_settings_cache():
    """Ensure every test starts from freshly loaded settings."""
    clear_settings_cache()
    yield
    clear_settings_cache()
