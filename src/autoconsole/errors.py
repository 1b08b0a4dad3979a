# autoconsole: Error kinds raised by the console, its input sources, the traversal engine and the automation loader. Every error carries a short kind tag so sinks can render it without isinstance chains.

from typing import Optional


class ConsoleError(Exception):
    """Base class for every failure the console reports to its caller and its sink."""

    kind = "Unknown"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.kind}: {self.message}"


class ConsoleIOError(ConsoleError):
    """Terminal or filesystem fault; wraps the lower-level OSError when there is one."""

    kind = "IoFailure"

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class InvalidInputError(ConsoleError):
    """Expected/found mismatch on a line of input."""

    kind = "InvalidInput"

    def __init__(self, expected: str, found: str) -> None:
        super().__init__(f"expected {expected}, found {found!r}")
        self.expected = expected
        self.found = found


class MalformedAutomationError(ConsoleError):
    """The automation file could not be parsed into an instruction tree."""

    kind = "MalformedAutomation"

    def __init__(self, detail: str, hint: str) -> None:
        super().__init__(f"{detail}\n{hint}")
        self.detail = detail
        self.hint = hint


class TraversalCorruptedError(ConsoleError):
    """Cursor contradiction or tree/index inconsistency."""

    kind = "TraversalCorrupted"


class ExhaustedError(ConsoleError):
    """No next node and no cycles remain."""

    kind = "Exhausted"


class UnknownConsoleError(ConsoleError):
    kind = "Unknown"
