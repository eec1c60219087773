import shutil
from collections.abc import Callable

WidthListener = Callable[[int], None]


def terminal_width() -> int:
    return shutil.get_terminal_size().columns


class ViewportTracker:
    """Keeps the latest display width and tells listeners when it changes."""

    def __init__(self, width_source: Callable[[], int] = terminal_width) -> None:
        self._width_source = width_source
        self._width = width_source()
        self._listeners: list[WidthListener] = []

    @property
    def width(self) -> int:
        return self._width

    def refresh(self) -> int:
        """Re-read the width from the source."""
        return self.update(self._width_source())

    def update(self, width: int) -> int:
        if width != self._width:
            self._width = width
            for listener in list(self._listeners):
                listener(width)
        return self._width

    def subscribe(self, listener: WidthListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: WidthListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)
