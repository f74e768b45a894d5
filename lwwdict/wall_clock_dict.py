"""LWW-Element-Dict stamped with wall-clock time and a random peer id."""

import time
import uuid
from typing import Any, Callable, Optional
from lww_element_dict import LWWElementDict


def wall_clock_dict(
    peer_id: Optional[Any] = None, clock: Callable[[], float] = time.time
) -> LWWElementDict:
    """Create a dictionary using real time for timestamps.

    A fresh UUID string is used as the peer id unless one is given.
    """
    if peer_id is None:
        peer_id = str(uuid.uuid4())
    return LWWElementDict(peer_id=peer_id, clock=clock)
