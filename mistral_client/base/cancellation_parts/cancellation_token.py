"""Cooperative cancellation token.

A token is a one-way latch: once cancelled it stays cancelled and keeps the
first reason it was given. The latch is a ``threading.Event``, so code that
needs to pause (the batch poller between status checks) can block on
:meth:`CancellationToken.wait` and is woken the moment another thread calls
:meth:`CancellationToken.cancel`.
"""

from __future__ import annotations

from threading import Event, Lock
from typing import List, Optional

from .cancelled_error import CancelledError


class CancellationToken:
    """Thread-safe cancellation signal with parent-to-child cascading.

    Parameters:
        parent: Optional parent token. Cancelling the parent cancels this
            token with the same reason; cancelling this token leaves the
            parent untouched. Linking to an already cancelled parent cancels
            the new token immediately.
    """

    def __init__(self, *, parent: Optional["CancellationToken"] = None) -> None:
        self._fired = Event()
        self._lock = Lock()
        self._reason: Optional[str] = None
        self._children: List[CancellationToken] = []
        if parent is not None:
            parent.link_child(self)

    @property
    def cancelled(self) -> bool:  # noqa: D401 - short form
        """Whether cancellation has been requested."""
        return self._fired.is_set()

    @property
    def reason(self) -> Optional[str]:  # noqa: D401 - short form
        """Reason given to the first ``cancel`` call."""
        return self._reason

    def cancel(self, reason: Optional[str] = None) -> None:
        """Fire the token, wake every waiter and cascade to children.

        Later calls are no-ops and do not replace the reason.
        """
        with self._lock:
            if self._fired.is_set():
                return
            self._reason = reason
            self._fired.set()
            children = tuple(self._children)
        for child in children:
            child.cancel(reason)

    def link_child(self, token: "CancellationToken") -> "CancellationToken":
        """Attach ``token`` so this token's cancellation reaches it."""
        with self._lock:
            self._children.append(token)
            fired = self._fired.is_set()
        if fired:
            token.cancel(self._reason)
        return token

    def child(self) -> "CancellationToken":
        """Return a new token linked to this one."""
        return CancellationToken(parent=self)

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Sleep up to ``timeout`` seconds, returning early on cancellation.

        Returns:
            ``True`` if the token fired, ``False`` if the timeout ran out.
        """
        return self._fired.wait(timeout)

    def raise_if_cancelled(self) -> None:
        """Raise :class:`CancelledError` once the token has fired."""
        if self._fired.is_set():
            raise CancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:  # pragma: no cover - introspection aid
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"


__all__ = ["CancellationToken"]
