import io
import threading

import pytest

from swift_cli.exceptions import ParseError, StdinTimeoutError
from swift_cli.stdin import StdinSession


class TrickleStream:
    """Delivers the head at once and the tail only once released."""

    def __init__(self, head, tail=""):
        self.head = head
        self.tail = tail
        self.release = threading.Event()

    def read(self, size=-1):
        if 0 < size <= len(self.head):
            chunk, self.head = self.head[:size], self.head[size:]
            return chunk
        self.release.wait(5)
        text, self.head, self.tail = self.head + self.tail, "", ""
        return text


def test_no_input_reports_nothing_arrived():
    session = StdinSession(io.StringIO(""), str.upper, probe_timeout=0.5, timeout=1)
    session.start()
    assert session.wait_for_input() is False


def test_input_is_handled_once():
    calls = []

    def handler(text):
        calls.append(text)
        return text.upper()

    session = StdinSession(io.StringIO("let x=1\nlet y=2\n"), handler, probe_timeout=1, timeout=5)
    session.start()
    assert session.wait_for_input() is True
    assert session.result() == "LET X=1\nLET Y=2\n"
    assert calls == ["let x=1\nlet y=2\n"]


def test_handler_error_is_raised_in_foreground():
    def handler(text):
        raise ParseError("could not parse input")

    session = StdinSession(io.StringIO("}"), handler, probe_timeout=1, timeout=5)
    session.start()
    assert session.wait_for_input()
    with pytest.raises(ParseError):
        session.result()


def test_long_wait_times_out():
    stream = TrickleStream("let x = 1\n")
    session = StdinSession(stream, str.upper, probe_timeout=1, timeout=0.05)
    session.start()
    assert session.wait_for_input()
    with pytest.raises(StdinTimeoutError, match="timed out"):
        session.result()
    stream.release.set()


def test_partial_first_line_counts_as_input():
    stream = TrickleStream("let a", "=1\n")
    session = StdinSession(stream, str.upper, probe_timeout=1, timeout=5)
    session.start()
    assert session.wait_for_input() is True
    stream.release.set()
    assert session.result() == "LET A=1\n"
