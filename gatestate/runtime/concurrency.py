# gatestate/runtime/concurrency.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import threading
from typing import Optional


class HandOffLock:
    """
    Lock serialising state machine hand-offs, remembering which thread holds
    it.

    The underlying lock is not reentrant. Code running inside a hand-off
    (exit actions, state change listeners) that re-enters the machine must
    check held_by_current_thread() and back off instead of acquiring, or the
    thread would wait on itself forever.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._owner: Optional[int] = None

    @property
    def owner(self) -> Optional[int]:
        """Ident of the thread holding the lock, or None."""
        return self._owner

    def locked(self) -> bool:
        return self._lock.locked()

    def held_by_current_thread(self) -> bool:
        # Only the owning thread ever writes its own ident, so this unlocked
        # read cannot report True for any other thread.
        return self._owner == threading.get_ident()

    def __enter__(self) -> "HandOffLock":
        self._lock.acquire()
        self._owner = threading.get_ident()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._owner = None
        self._lock.release()
