from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
for path in (SRC, ROOT):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from call_governor.core.scheduling import ManualScheduler  # noqa: E402
from tests.shared.recording import CallRecorder  # noqa: E402


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def recorder(scheduler: ManualScheduler) -> CallRecorder:
    return CallRecorder(scheduler.now)
