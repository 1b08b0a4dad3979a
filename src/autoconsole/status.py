# autoconsole: Status controller. next_status() is the raw transition table; resolve_status() adds the second pass that never lets Invalid survive a refresh.

from typing import NamedTuple

from .models import Cursor, Status, ValidityFlags


class Transition(NamedTuple):
    status: Status
    reset_prompt: bool = False


def _file_transition(cursor: Cursor) -> Transition:
    # Shared by both file statuses: the cursor alone decides.
    if cursor.next_sub_command is not None:
        return Transition(Status.EXECUTE_FROM_FILE)
    if cursor.next_instruction is not None:
        return Transition(Status.ACQUIRE_FROM_FILE, reset_prompt=True)
    return Transition(Status.INVALID)


def next_status(current: Status, flags: ValidityFlags, cursor: Cursor) -> Transition:
    """Compute the raw next status from the current status, the validity flags and the cursor."""
    if current is Status.INVALID:
        return Transition(Status.ACQUIRE_FROM_TERMINAL)

    if current is Status.ACQUIRE_FROM_FILE or current is Status.EXECUTE_FROM_FILE:
        return _file_transition(cursor)

    if current is Status.ACQUIRE_FROM_TERMINAL:
        if flags.read_valid:
            return Transition(Status.EXECUTE_FROM_TERMINAL)
        return Transition(Status.INVALID)

    if current is Status.EXECUTE_FROM_TERMINAL:
        if not flags.read_valid:
            return Transition(Status.INVALID)
        if not flags.file_valid:
            return Transition(Status.EXECUTE_FROM_TERMINAL)
        if cursor.next_instruction is not None:
            return Transition(Status.ACQUIRE_FROM_FILE, reset_prompt=True)
        # Path obtained but nothing loaded: fall back to terminal acquisition.
        return Transition(Status.INVALID)

    raise ValueError(f"unhandled console status: {current!r}")


def resolve_status(current: Status, flags: ValidityFlags, cursor: Cursor) -> Transition:
    """Run the transition table, then turn a resulting Invalid into AcquireFromTerminal with a prompt reset."""
    raw = next_status(current, flags, cursor)
    if raw.status is Status.INVALID:
        return Transition(Status.ACQUIRE_FROM_TERMINAL, reset_prompt=True)
    return raw
