import os
import sys
from pathlib import Path

import pytest

# Keep log output plain and quiet during tests before settings import
os.environ.setdefault("LOG_SERIALIZE", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

# Add the backend directory so `rfm_api` package imports resolve during tests
BACKEND_DIR = Path(__file__).resolve().parents[1]
if str(BACKEND_DIR) not in sys.path:
    sys.path.append(str(BACKEND_DIR))

from rfm_api.core.config import settings  # noqa: E402
from rfm_api.core.rate_limit import limiter  # noqa: E402


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_rate_limits():
    limiter.reset()
    yield


@pytest.fixture
def no_submit_delay(monkeypatch):
    monkeypatch.setattr(settings, "SUBMIT_DELAY_MS", 0)
