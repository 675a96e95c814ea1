"""Background reading of standard input with a two-step timeout.

A short probe decides whether anything is being piped in at all. Only when
the first character has arrived does the caller wait, up to a longer bound, for
the background task to read, format and write the result.
"""
import threading
from concurrent.futures import Future
from concurrent.futures import TimeoutError as FutureTimeoutError
from typing import Callable, Generic, TextIO, TypeVar

from .exceptions import StdinTimeoutError

T = TypeVar("T")

DEFAULT_PROBE_TIMEOUT = 0.01
DEFAULT_TIMEOUT = 30.0


class StdinSession(Generic[T]):
    def __init__(
        self,
        stream: TextIO,
        handler: Callable[[str], T],
        probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.stream = stream
        self.handler = handler
        self.probe_timeout = probe_timeout
        self.timeout = timeout
        self._arrived = threading.Event()
        self._future: "Future[T | None]" = Future()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        # Daemon thread: an abandoned blocking read must not keep the process alive
        self._thread = threading.Thread(target=self._run, name="swiftformat-stdin", daemon=True)
        self._thread.start()

    def _run(self) -> None:
        try:
            first = self.stream.read(1)
            if not first:
                self._future.set_result(None)
                return
            self._arrived.set()
            text = first + self.stream.read()
            self._future.set_result(self.handler(text))
        except BaseException as e:
            self._future.set_exception(e)

    def wait_for_input(self) -> bool:
        """Wait up to the probe timeout for the first character; False if nothing came."""
        return self._arrived.wait(self.probe_timeout)

    def result(self) -> T | None:
        """Wait for the handler's result, re-raising anything it raised.

        Raises StdinTimeoutError once the long timeout elapses; the
        background thread is abandoned at that point.
        """
        try:
            return self._future.result(timeout=self.timeout)
        except FutureTimeoutError:
            raise StdinTimeoutError(
                f"timed out after {self.timeout:g}s waiting for input to be formatted"
            ) from None
