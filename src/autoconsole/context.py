# autoconsole: Console I/O collaborators. ConsoleContext is the logging sink the console reports prompts, echoes, errors and status changes to; StdinTerminal is the line source behind terminal reads. Both are injected so tests can substitute scripted fakes.

import sys
import threading
from typing import Any, Optional, Protocol, TextIO

from .config import INVALID_MESSAGE


class ConsoleSink(Protocol):
    """Capability the console consumes for every operator-visible notification."""

    invalid_message: str

    def prompt(self, text: str) -> None: ...

    def echo_terminal(self, text: str) -> None: ...

    def echo_file(self, text: str) -> None: ...

    def error(self, err: Any) -> None: ...

    def state_change(self, previous: Any, current: Any) -> None: ...


class Terminal(Protocol):
    def read_line(self) -> str:
        """Return one raw line including its terminator; raise EOFError or OSError on failure."""
        ...


class ConsoleContext:
    """
    Thin wrapper around console output used as the console's logging sink.

    Each call holds the context lock only while it writes, so concurrent
    callers never interleave a single message and no lock is held across a
    blocking terminal read.
    """

    def __init__(
        self,
        *,
        invalid_message: str = INVALID_MESSAGE,
        verbose: bool = False,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None,
    ) -> None:
        self.invalid_message = invalid_message
        self.verbose = verbose
        self._out = out
        self._err = err
        self._lock = threading.Lock()

    @property
    def out(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the writes.
        return self._out or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def prompt(self, text: str) -> None:
        """Write a prompt without a trailing newline and flush it."""
        with self._lock:
            self.out.write(text)
            self.out.flush()

    def echo_terminal(self, text: str) -> None:
        """The operator already sees typed input; only trace it in verbose mode."""
        if self.verbose:
            self.log(f"accepted: {text}")

    def echo_file(self, text: str) -> None:
        """Complete the prompt line with the text read from the automation file."""
        with self._lock:
            print(text, file=self.out)

    def error(self, err: Any) -> None:
        """Print an error message to stderr."""
        with self._lock:
            print(f"Error: {err}", file=self.err)

    def state_change(self, previous: Any, current: Any) -> None:
        if self.verbose:
            self.log(f"status: {previous} -> {current}")

    def log(self, message: str) -> None:
        """Emit a lightweight log line to stdout, prefixed for readability."""
        with self._lock:
            print(f"[LOG] {message}", file=self.out)

    def send_to_user(self, message: str) -> None:
        with self._lock:
            print(message, file=self.out)


class StdinTerminal:
    """Terminal collaborator reading lines from a text stream (stdin by default)."""

    def __init__(self, stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._out = out

    def read_line(self) -> str:
        (self._out or sys.stdout).flush()
        line = (self._stream or sys.stdin).readline()
        if line == "":
            raise EOFError("end of terminal input")
        return line
