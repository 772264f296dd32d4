# Puts the project root on sys.path (so 'data', 'services', 'config' import without install)
# and provides a LocalDataStore rooted in a temp dir.
import os
import sys
from datetime import datetime
from pathlib import Path

import pytest

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from data.local_store import LocalDataStore


class FakeClock:
    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture(autouse=True)
def _no_env_root(monkeypatch):
    monkeypatch.delenv("IPROMPT_DATA_ROOT", raising=False)


@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 1, 10, 0, 0))


@pytest.fixture
def store(tmp_path, clock):
    return LocalDataStore(data_root=tmp_path, clock=clock)
