from __future__ import annotations

import threading
import time

_lock = threading.Lock()
_last = 0


def timestamp_id() -> str:
    """Millisecond timestamp id, bumped so consecutive ids never repeat."""
    global _last
    with _lock:
        _last = max(time.time_ns() // 1_000_000, _last + 1)
        return str(_last)
