# autoconsole: Cursor-advance algorithm over the loaded automation tree. poll() is the only mutator of the cursor; it walks instruction -> sub-commands -> next instruction and wraps around while cycles remain.

import logging
from typing import List, Optional

from .errors import ExhaustedError, TraversalCorruptedError
from .models import AutomationState, AutomationTree, CommandValue, Cursor, InstructionNode, value_text

LOGGER = logging.getLogger(__name__)


def _instruction_at(tree: AutomationTree, index: int) -> Optional[InstructionNode]:
    if 0 <= index < len(tree.instructions):
        return tree.instructions[index]
    return None


def _sub_command_at(node: InstructionNode, index: int) -> Optional[CommandValue]:
    subs: List[CommandValue] = node.sub_commands or []
    if 0 <= index < len(subs):
        return subs[index]
    return None


def _seed(tree: Optional[AutomationTree], cursor: Cursor) -> None:
    """Point the instruction cursor at the first instruction of the tree."""
    first = _instruction_at(tree, 0) if tree is not None else None
    if first is None:
        raise TraversalCorruptedError("automation tree is empty or was never loaded")
    cursor.next_instruction = (0, first.instruction)


def _apply_cycle_policy(tree: AutomationTree, cursor: Cursor) -> bool:
    """
    Called once the instruction list is exhausted and the cursor cleared.

    cycle_count counts total passes: a present count is decremented and a
    non-zero remainder reseeds the walk at the first instruction. An absent
    count means the single pass is over.

    Returns True when the walk was reseeded.
    """
    if tree.cycle_count is None:
        LOGGER.debug("automation pass finished, no cycles configured")
        return False
    remaining = tree.cycle_count - 1
    # A zero remainder is stored as None: the model only admits positive counts.
    tree.cycle_count = remaining if remaining > 0 else None
    if remaining > 0:
        LOGGER.debug("automation pass finished, %d pass(es) remaining", remaining)
        _seed(tree, cursor)
        return True
    LOGGER.debug("automation cycles exhausted")
    return False


def _advance(state: AutomationState) -> None:
    tree = state.tree
    cursor = state.cursor
    if state.exhausted:
        raise ExhaustedError("automation file has no further instructions")
    if cursor.next_instruction is None:
        if cursor.next_sub_command is not None:
            raise TraversalCorruptedError("command without instruction")
        _seed(tree, cursor)
        return

    if tree is None:
        cursor.clear()
        raise TraversalCorruptedError("cursor set but no automation tree is loaded")

    ins_index, _ = cursor.next_instruction
    node = _instruction_at(tree, ins_index)
    if node is None:
        cursor.clear()
        raise TraversalCorruptedError(f"lost main instruction at index {ins_index}")

    if cursor.next_sub_command is None:
        first_sub = _sub_command_at(node, 0)
        if first_sub is not None:
            cursor.next_sub_command = (0, first_sub)
            return
    else:
        sub_index, _ = cursor.next_sub_command
        following = _sub_command_at(node, sub_index + 1)
        if following is not None:
            cursor.next_sub_command = (sub_index + 1, following)
            return

    next_node = _instruction_at(tree, ins_index + 1)
    if next_node is not None:
        cursor.next_instruction = (ins_index + 1, next_node.instruction)
        cursor.next_sub_command = None
        return

    cursor.clear()
    if not _apply_cycle_policy(tree, cursor):
        state.exhausted = True


def poll(state: AutomationState) -> str:
    """
    Advance the cursor by one node and return the text of the node now pointed at.

    The sub-command cursor wins over the instruction cursor when both are set.
    Repeated calls keep advancing; this is not an idempotent peek.

    Raises:
        TraversalCorruptedError: empty tree, contradictory cursor, or an index
            that no longer exists in the tree.
        ExhaustedError: the walk is over and no cycles remain.
    """
    cursor = state.cursor
    _advance(state)
    if cursor.next_sub_command is not None:
        return value_text(cursor.next_sub_command[1])
    if cursor.next_instruction is not None:
        return value_text(cursor.next_instruction[1])
    raise ExhaustedError("automation file has no further instructions")


def current_node_text(state: AutomationState, acquisition: bool) -> Optional[str]:
    """Text of the node a file read would consume, or None when the cursor holds nothing."""
    cursor = state.cursor
    pair = cursor.next_instruction if acquisition else cursor.next_sub_command
    if pair is None:
        return None
    return value_text(pair[1])
