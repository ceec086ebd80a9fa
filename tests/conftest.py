from datetime import datetime, timezone
import sys
from pathlib import Path

import pytest

# Ensure `import shelfaudit` works when running `pytest` without needing PYTHONPATH hacks.
PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def _freeze_export_filename_timestamp(monkeypatch) -> None:
    fixed_now = datetime(2026, 2, 8, 0, 0, 0, tzinfo=timezone.utc)
    monkeypatch.setattr("shelfaudit.core.exporters.utils._utcnow", lambda: fixed_now)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 3, 1, 12, 0, 0)
