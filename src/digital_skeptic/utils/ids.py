"""ID utilities."""

from __future__ import annotations

import uuid


def new_request_id() -> str:
    """Return a short random id used to correlate log lines of one analysis."""

    return uuid.uuid4().hex[:12]
