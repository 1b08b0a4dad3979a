# autoconsole: Console façade. Composes validation, prompt state, the terminal and file input sources, the automation loader and the status controller behind read/setup/import_file/teardown.

import logging
import pathlib
from typing import Any, Callable, Optional

from . import config
from .context import ConsoleSink, StdinTerminal, Terminal
from .errors import (
    ConsoleError,
    ConsoleIOError,
    ExhaustedError,
    InvalidInputError,
    TraversalCorruptedError,
    UnknownConsoleError,
)
from .fs import normalize_path, read_to_string, safe_abs
from .loader import parse
from .models import AutomationState, AutomationTree, Cursor, PromptState, Status, ValidityFlags
from .status import resolve_status
from .traversal import current_node_text, poll
from .validation import check

LOGGER = logging.getLogger(__name__)

ReadToString = Callable[[pathlib.Path], str]
ParseAutomation = Callable[[str], AutomationTree]


class Console:
    """
    Interactive console that sources each command from the terminal or from a loaded automation file.

    Lifecycle:
      - created in Invalid with no automation tree
      - setup() moves to AcquireFromTerminal
      - every read() and import_file() ends with a status refresh, even when it fails
      - teardown() drops the tree and returns through Invalid to AcquireFromTerminal

    The sink's invalid_message is read once here and prefixed to every
    rejected-input report.
    """

    def __init__(
        self,
        sink: ConsoleSink,
        *,
        terminal: Optional[Terminal] = None,
        read_file: ReadToString = read_to_string,
        parse_automation: ParseAutomation = parse,
        main_prompt: str = config.MAIN_PROMPT,
        path_prompt: str = config.PATH_PROMPT,
        automation_dir: str = config.AUTOMATION_DIR,
    ) -> None:
        self.sink = sink
        self.invalid_message = sink.invalid_message
        self.terminal: Terminal = terminal if terminal is not None else StdinTerminal()
        self._read_to_string = read_file
        self._parse = parse_automation
        self.path_prompt = path_prompt
        self.automation_dir = pathlib.Path(automation_dir)

        self._status = Status.INVALID
        self._previous_status = Status.INVALID
        self.flags = ValidityFlags()
        self.prompts = PromptState(main_prompt)
        self.automation = AutomationState()
        self._current_instruction: Optional[str] = None
        self._current_command: Optional[str] = None

    # ---------- Read-only state ----------

    @property
    def status(self) -> Status:
        return self._status

    @property
    def previous_status(self) -> Status:
        return self._previous_status

    @property
    def current_instruction(self) -> Optional[str]:
        return self._current_instruction

    @property
    def current_command(self) -> Optional[str]:
        return self._current_command

    @property
    def tree(self) -> Optional[AutomationTree]:
        return self.automation.tree

    @property
    def cursor(self) -> Cursor:
        return self.automation.cursor

    @property
    def prompt_state(self) -> PromptState:
        return self.prompts

    # ---------- Lifecycle ----------

    def setup(self) -> None:
        """Perform the first transition out of Invalid."""
        self._refresh()

    def teardown(self) -> None:
        """Drop any loaded automation and restart terminal acquisition from a clean prompt."""
        self.automation.clear()
        self.prompts.reset()
        self._set_status(Status.INVALID)
        self._refresh()

    # ---------- Reads ----------

    def read(self, prompt: str) -> str:
        """
        Acquire the next command text from the source the current status allows.

        Raises:
            ConsoleError: any read, validation or traversal failure. The error is
            reported to the sink first and the status is refreshed regardless.
        """
        try:
            return self._acquire(prompt)
        except ConsoleError as e:
            self._report(e)
            raise
        finally:
            self._refresh()

    def read_or_default(self, prompt: str) -> str:
        """Like read(), but a failure (already reported to the sink) yields an empty string."""
        try:
            return self.read(prompt)
        except ConsoleError:
            return ""

    def _acquire(self, prompt: str) -> str:
        if self._status.from_terminal:
            return self._read_terminal(prompt)
        if self._status.from_file:
            return self._read_file(prompt)
        raise UnknownConsoleError("console is not set up; call setup() first")

    def _read_terminal(self, prompt: str) -> str:
        self.sink.prompt(self.prompts.render(prompt))
        try:
            raw = self.terminal.read_line()
        except (OSError, EOFError) as e:
            raise ConsoleIOError(f"terminal read failed: {e}", e)
        text = raw.rstrip("\r\n")
        check(text)
        self.flags.read_valid = True
        self._store(text)
        self.sink.echo_terminal(text)
        return text

    def _read_file(self, prompt: str) -> str:
        text = current_node_text(self.automation, acquisition=self._status.is_acquisition)
        if text is None:
            raise TraversalCorruptedError("no executable node at the automation cursor")
        # Advance before validating: a rejected node is not delivered again.
        try:
            poll(self.automation)
        except ExhaustedError:
            LOGGER.debug("automation exhausted after %r", text)
        self.sink.prompt(self.prompts.render(prompt))
        check(text)
        self.flags.read_valid = True
        self._store(text)
        self.sink.echo_file(text)
        return text

    def _store(self, text: str) -> None:
        if self._status.is_acquisition:
            self._current_instruction = text
            self._current_command = None
        else:
            self._current_command = text
        self.prompts.push(text)

    # ---------- Automation import ----------

    def import_file(self) -> None:
        """
        Ask for an automation file path, load it, and prime the traversal cursor.

        Any previously loaded tree is dropped first, so a failed import leaves
        the console without automation and the refresh routes it back to
        terminal acquisition.

        Raises:
            ConsoleError: path read, file read, parse or priming failure, after
            reporting it to the sink.
        """
        try:
            self._import()
        except ConsoleError as e:
            self._report(e)
            raise
        finally:
            self._refresh()

    def import_file_or_log(self) -> None:
        """Like import_file(), but a failure is only reported to the sink."""
        try:
            self.import_file()
        except ConsoleError:
            pass

    def _import(self) -> None:
        self.automation.clear()

        path_text = self._read_terminal(self.path_prompt)
        self.flags.file_valid = True

        try:
            path = safe_abs(self.automation_dir, path_text)
            contents = self._read_to_string(path)
        except OSError as e:
            raise ConsoleIOError(f"cannot read automation file {path_text!r}: {e}", e)
        except UnicodeDecodeError as e:
            raise ConsoleIOError(f"automation file {path_text!r} is not UTF-8 text: {e}", e)

        tree = self._parse(contents)
        # The declared path is informational; record where the tree actually came from.
        tree.path = normalize_path(str(path))

        state = AutomationState(tree=tree)
        poll(state)
        self.automation = state
        self.flags.import_valid = True
        LOGGER.debug(
            "imported %s: %d instruction(s), cycle_count=%s",
            tree.path,
            len(tree.instructions),
            tree.cycle_count,
        )

    # ---------- Status controller ----------

    def _refresh(self) -> None:
        """Apply one transition, resolve Invalid, notify on change, and clear the validity flags."""
        previous = self._status
        transition = resolve_status(previous, self.flags, self.automation.cursor)
        if transition.reset_prompt:
            self.prompts.reset()
        self._set_status(transition.status)
        self.flags.reset()

    def _set_status(self, status: Status) -> None:
        previous = self._status
        if status is previous:
            return
        self._previous_status = previous
        self._status = status
        self.sink.state_change(previous, status)

    # ---------- Errors ----------

    def _report(self, err: ConsoleError) -> None:
        if isinstance(err, InvalidInputError):
            self.sink.error(f"{self.invalid_message} {err}")
        else:
            self.sink.error(err)

    def err_log(self, err: Any) -> None:
        """Forward an arbitrary error to the sink."""
        self.sink.error(err)
