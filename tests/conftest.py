import os
import sys

# Rate limiting would throttle the TestClient; settings are read at import time.
os.environ["RATE_LIMIT_ENABLED"] = "false"

# Ensure project root is on sys.path when pytest runs from a different CWD.
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from string_analyzer.main import app  # noqa: E402
from string_analyzer.store import store  # noqa: E402


@pytest.fixture(autouse=True)
def clear_store():
    """Clear the in-memory store before and after each test."""
    store.clear()
    yield
    store.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
