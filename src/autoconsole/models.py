# autoconsole: Data model shared by the console, the traversal engine and the loader. The automation tree is a strict Pydantic v2 model so a parsed file is validated in one place; runtime state (status, flags, prompts, cursor) uses plain dataclasses.

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, StrictInt, StrictStr

# Instructions and sub-commands are either integers or text in the automation file.
CommandValue = Union[StrictInt, StrictStr]

DEFAULT_MAIN_PROMPT = "> "
BREADCRUMB_SEPARATOR = " > "


def value_text(value: CommandValue) -> str:
    """Render a command value the way it is fed to validation and echoed."""
    return str(value)


class CustomBaseModel(BaseModel):
    """Pydantic base model configured to forbid unknown fields for strict validation."""
    model_config = ConfigDict(extra="forbid")


class InstructionNode(CustomBaseModel):
    instruction: CommandValue = Field(..., description="Top-level instruction (integer or string)")
    sub_commands: Optional[List[CommandValue]] = Field(
        default=None, description="Ordered sub-commands executed after the instruction"
    )


class AutomationTree(CustomBaseModel):
    """
    Loaded automation script: ordered instructions with optional sub-commands.

    cycle_count is the total number of passes over the instruction list; when
    absent the list is walked once. The traversal engine decrements it in place
    at the end of every pass, which is the only mutation the tree receives.
    """
    path: Optional[str] = Field(default=None, description="File the tree was loaded from")
    cycle_count: Optional[PositiveInt] = Field(default=None, description="Total passes over the instructions")
    instructions: List[InstructionNode] = Field(..., min_length=1, description="At least one instruction")


class Status(str, Enum):
    ACQUIRE_FROM_FILE = "AcquireFromFile"
    ACQUIRE_FROM_TERMINAL = "AcquireFromTerminal"
    EXECUTE_FROM_FILE = "ExecuteFromFile"
    EXECUTE_FROM_TERMINAL = "ExecuteFromTerminal"
    INVALID = "Invalid"

    @property
    def is_acquisition(self) -> bool:
        """Waiting for the next top-level instruction."""
        return self in (Status.ACQUIRE_FROM_FILE, Status.ACQUIRE_FROM_TERMINAL)

    @property
    def is_execution(self) -> bool:
        """Waiting for a sub-command of the current instruction."""
        return self in (Status.EXECUTE_FROM_FILE, Status.EXECUTE_FROM_TERMINAL)

    @property
    def from_file(self) -> bool:
        return self in (Status.ACQUIRE_FROM_FILE, Status.EXECUTE_FROM_FILE)

    @property
    def from_terminal(self) -> bool:
        return self in (Status.ACQUIRE_FROM_TERMINAL, Status.EXECUTE_FROM_TERMINAL)

    def __str__(self) -> str:
        return self.value


@dataclass
class ValidityFlags:
    """Per-refresh inputs to the state machine; all cleared after every refresh."""

    read_valid: bool = False
    file_valid: bool = False
    import_valid: bool = False

    def reset(self) -> None:
        self.read_valid = False
        self.file_valid = False
        self.import_valid = False


@dataclass
class PromptState:
    """Primary prompt plus the breadcrumb of inputs accepted in the current chain."""

    default_prompt: str = DEFAULT_MAIN_PROMPT
    main_prompt: str = field(init=False)
    sub_prompt: str = field(init=False, default="")

    def __post_init__(self) -> None:
        self.main_prompt = self.default_prompt

    def reset(self) -> None:
        self.main_prompt = self.default_prompt
        self.sub_prompt = ""

    def push(self, text: str) -> None:
        self.sub_prompt += f"{text}{BREADCRUMB_SEPARATOR}"

    def render(self, prompt: str) -> str:
        return f"{self.main_prompt}{self.sub_prompt}{prompt}"


@dataclass
class Cursor:
    """
    Node the traversal engine has pre-computed as the next one to emit.

    next_sub_command is only meaningful while next_instruction is set; the
    engine reports the opposite combination as corruption.
    """

    next_instruction: Optional[Tuple[int, CommandValue]] = None
    next_sub_command: Optional[Tuple[int, CommandValue]] = None

    def clear(self) -> None:
        self.next_instruction = None
        self.next_sub_command = None

    @property
    def is_empty(self) -> bool:
        return self.next_instruction is None and self.next_sub_command is None


@dataclass
class AutomationState:
    """Tree plus cursor; replaced wholesale on import."""

    tree: Optional[AutomationTree] = None
    cursor: Cursor = field(default_factory=Cursor)
    # Set once the last cycle ends; only clear() or a fresh state resets it.
    exhausted: bool = False

    def clear(self) -> None:
        self.tree = None
        self.cursor.clear()
        self.exhausted = False
