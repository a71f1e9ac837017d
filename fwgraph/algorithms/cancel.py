"""Cooperative cancellation token shared between a caller and an algorithm."""

from __future__ import annotations

import threading


class CancelManager:
    """Thread-safe cancellation flag polled by algorithms at checkpoints.

    Setting the flag never interrupts work in progress; the algorithm stops at
    its next checkpoint. The same manager may be shared by several algorithms.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation. Safe to call from any thread."""
        self._event.set()

    def reset(self) -> None:
        """Clear a previous cancellation request."""
        self._event.clear()

    @property
    def is_cancelling(self) -> bool:
        return self._event.is_set()

    def __repr__(self) -> str:
        return f"CancelManager(is_cancelling={self.is_cancelling})"
