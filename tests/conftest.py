import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Allow running the suite from a checkout without installing the package.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from favmedia.favorites import FavoritesStore  # noqa: E402
from favmedia.storage.memory import MemoryStorage  # noqa: E402


class StepClock:
    """Deterministic millisecond clock advancing by one on every call."""

    def __init__(self, start: int = 1_700_000_000_000) -> None:
        self.value = start

    def __call__(self) -> int:
        self.value += 1
        return self.value


@pytest.fixture()
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture()
def clock() -> StepClock:
    return StepClock()


@pytest.fixture()
def store(storage: MemoryStorage, clock: StepClock) -> FavoritesStore:
    return FavoritesStore(storage, clock=clock)
