from typing import Any, List, Tuple

import pytest

from autoconsole.console import Console


class ScriptedTerminal:
    """Terminal fake returning pre-loaded lines, then end of input."""

    def __init__(self, lines: List[str]) -> None:
        self.lines = list(lines)

    def read_line(self) -> str:
        if not self.lines:
            raise EOFError("no more scripted input")
        item = self.lines.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item


class RecordingSink:
    invalid_message = "invalid input."

    def __init__(self) -> None:
        self.events: List[Tuple[str, Any]] = []

    def prompt(self, text: str) -> None:
        self.events.append(("prompt", text))

    def echo_terminal(self, text: str) -> None:
        self.events.append(("echo_terminal", text))

    def echo_file(self, text: str) -> None:
        self.events.append(("echo_file", text))

    def error(self, err: Any) -> None:
        self.events.append(("error", err))

    def state_change(self, previous: Any, current: Any) -> None:
        self.events.append(("state_change", (previous, current)))

    def of(self, kind: str) -> List[Any]:
        return [payload for k, payload in self.events if k == kind]


AUTOMATION_YAML = """\
cycle_count: 2
instructions:
  - instruction: A
    sub_commands: [a1, a2]
  - instruction: B
"""


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def make_console(sink, tmp_path):
    def _make(lines: List[str], **kwargs: Any) -> Console:
        kwargs.setdefault("automation_dir", str(tmp_path))
        return Console(sink, terminal=ScriptedTerminal(lines), **kwargs)

    return _make


@pytest.fixture
def automation_file(tmp_path):
    path = tmp_path / "auto.yaml"
    path.write_text(AUTOMATION_YAML, encoding="utf-8")
    return path


@pytest.fixture
def scripted_terminal():
    return ScriptedTerminal
