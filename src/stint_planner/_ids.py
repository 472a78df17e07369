"""Time-ordered UUIDs for schedule rows."""

from __future__ import annotations

import time
import uuid


def time_ordered_uuid() -> uuid.UUID:
    """Return a random UUID whose first two bytes follow the wall clock.

    Rows created close together share a prefix, so sorting by id keeps
    creation order for the lifetime of a plan.
    """
    prefix = (int(time.time() * 1000) // 60) % 65536
    random_bytes = uuid.uuid4().bytes
    return uuid.UUID(bytes=prefix.to_bytes(2, "big") + random_bytes[2:])
