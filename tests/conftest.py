import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "lwwdict"))

from lww_element_dict import LWWElementDict


class ManualClock:
    """Integer clock that only moves when a test tells it to."""

    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def new_dict(clock):
    def make(peer_id="peer1"):
        return LWWElementDict(peer_id=peer_id, clock=clock)

    return make


@pytest.fixture
def set_entry(clock):
    """Set a key, then advance the clock unless told not to."""

    def apply(dictionary, key, value, increment=True):
        dictionary.set(key, value)
        if increment:
            clock.now += 1

    return apply


@pytest.fixture
def remove_entry(clock):
    """Remove a key, then advance the clock unless told not to."""

    def apply(dictionary, key, increment=True):
        dictionary.remove(key)
        if increment:
            clock.now += 1

    return apply
