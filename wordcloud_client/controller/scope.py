import asyncio
import time
from collections.abc import Callable


class TrackingScope:
    """Cancellation signal for the loops bound to one published identifier.

    ``sleep`` is the only place a loop waits between iterations, so a cancelled
    scope wakes a sleeping loop immediately. A loop that is awaiting a network
    response checks ``cancelled`` once the response arrives.
    """

    def __init__(
        self, identifier: str, version: int, parent: "TrackingScope | None" = None
    ) -> None:
        self.identifier = identifier
        self.version = version
        self._parent = parent
        self._cancelled = asyncio.Event()
        self._children: list["TrackingScope"] = []

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()
        children, self._children = self._children, []
        for child in children:
            child.cancel()
        if self._parent is not None:
            self._parent._detach(self)
            self._parent = None

    def child(self) -> "TrackingScope":
        """Scope for one sub-operation; cancelled with its parent or on its own."""
        scope = TrackingScope(self.identifier, self.version, parent=self)
        if self.cancelled:
            scope.cancel()
        else:
            self._children.append(scope)
        return scope

    async def sleep(self, seconds: float) -> bool:
        """Wait ``seconds``. Returns False if the scope was cancelled first."""
        if self.cancelled:
            return False
        try:
            await asyncio.wait_for(self._cancelled.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            return True
        return False

    def _detach(self, child: "TrackingScope") -> None:
        if child in self._children:
            self._children.remove(child)


class Deadline:
    """Optional time budget for one loop. ``None`` never expires."""

    def __init__(
        self,
        seconds: float | None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.seconds = seconds
        self._clock = clock
        self._expires_at = None if seconds is None else clock() + seconds

    @property
    def expired(self) -> bool:
        return self._expires_at is not None and self._clock() >= self._expires_at
