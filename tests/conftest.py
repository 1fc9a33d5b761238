import os
import sys
from pathlib import Path

import pytest

# --- 1. Path Setup ---
# Add the project root to sys.path so the 'src' package can be found
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# --- 2. Environment Setup ---
os.environ["OPERATOR_LOG_DIR"] = str(PROJECT_ROOT / "tests" / "tmp_logs")


@pytest.fixture(autouse=True)
def no_provider_credentials(monkeypatch):
    """Keep real credentials from leaking into tests."""
    for name in ("BROWSERBASE_API_KEY", "BROWSERBASE_PROJECT_ID", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)
