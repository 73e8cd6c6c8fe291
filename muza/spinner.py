from __future__ import annotations

from rich.console import Console
from rich.status import Status


class Spinner:
    """Rich status line shown while a render runs; silent when not on a terminal.

    Pass the console the log handler writes to, so log records print above
    the status line instead of through it.
    """

    def __init__(
        self,
        message: str,
        *,
        console: Console | None = None,
        enabled: bool | None = None,
    ) -> None:
        self._message = message
        self._console = console or Console(stderr=True)
        self._enabled = self._console.is_terminal if enabled is None else enabled
        self._status: Status | None = None

    @property
    def message(self) -> str:
        return self._message

    def start(self) -> None:
        if not self._enabled or self._status is not None:
            return
        self._status = self._console.status(self._message)
        self._status.start()

    def update(self, message: str) -> None:
        self._message = message
        if self._status is not None:
            self._status.update(message)

    def stop(self) -> None:
        if self._status is None:
            return
        self._status.stop()
        self._status = None

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type: object, exc: object, tb: object) -> None:
        self.stop()
