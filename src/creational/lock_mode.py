from __future__ import annotations

from enum import Enum


class LockMode(Enum):
    """Select locking behavior for lazily created shared instances.

    Pass one of these values as ``LazySingleton(..., lock_mode=...)``.
    """

    THREAD = "thread"
    """Guard construction with ``threading.Lock``."""

    ASYNC = "async"
    """Guard construction with ``asyncio.Lock`` on ``aget``; ``get`` keeps a thread lock."""

    NONE = "none"
    """Disable locking around construction. Only safe for single-threaded callers."""
