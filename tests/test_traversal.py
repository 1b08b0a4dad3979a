import pytest

from autoconsole.errors import ExhaustedError, TraversalCorruptedError
from autoconsole.models import AutomationState, AutomationTree, Cursor, InstructionNode
from autoconsole.traversal import current_node_text, poll


def make_state(cycle_count=None, instructions=None):
    instructions = instructions or [
        InstructionNode(instruction="A", sub_commands=["a1", "a2"]),
        InstructionNode(instruction="B"),
    ]
    return AutomationState(tree=AutomationTree(cycle_count=cycle_count, instructions=instructions))


def drain(state, limit=50):
    seen = []
    for _ in range(limit):
        try:
            seen.append(poll(state))
        except ExhaustedError:
            return seen
    raise AssertionError("poll never exhausted")


def test_two_cycles_wrap_around_then_exhaust():
    state = make_state(cycle_count=2)
    assert poll(state) == "A"  # priming
    assert drain(state) == ["a1", "a2", "B", "A", "a1", "a2", "B"]
    assert state.cursor.is_empty
    with pytest.raises(ExhaustedError):
        poll(state)


def test_absent_cycle_count_means_single_pass():
    state = make_state()
    assert drain(state) == ["A", "a1", "a2", "B"]
    assert state.tree.cycle_count is None


def test_cycle_count_one_is_single_pass():
    state = make_state(cycle_count=1)
    assert drain(state) == ["A", "a1", "a2", "B"]


def test_cycle_count_is_decremented_per_pass():
    state = make_state(cycle_count=3)
    for _ in range(4):
        poll(state)
    assert state.tree.cycle_count == 3
    poll(state)  # wraps to A
    assert state.tree.cycle_count == 2


def test_integer_values_are_rendered_as_text():
    state = make_state(instructions=[InstructionNode(instruction=7, sub_commands=[1, "x"])])
    assert drain(state) == ["7", "1", "x"]


def test_instruction_with_empty_sub_command_list_advances():
    state = make_state(
        instructions=[InstructionNode(instruction="A", sub_commands=[]), InstructionNode(instruction="B")]
    )
    assert drain(state) == ["A", "B"]


def test_empty_or_missing_tree_is_corruption():
    with pytest.raises(TraversalCorruptedError):
        poll(AutomationState())
    tree = AutomationTree(instructions=[InstructionNode(instruction="A")])
    tree.instructions.clear()
    with pytest.raises(TraversalCorruptedError):
        poll(AutomationState(tree=tree))


def test_sub_command_without_instruction_is_detected():
    state = make_state()
    state.cursor = Cursor(next_instruction=None, next_sub_command=(0, "a1"))
    with pytest.raises(TraversalCorruptedError, match="command without instruction"):
        poll(state)


def test_lost_main_instruction_clears_cursor():
    state = make_state()
    state.cursor = Cursor(next_instruction=(5, "Z"))
    with pytest.raises(TraversalCorruptedError, match="lost main instruction"):
        poll(state)
    assert state.cursor.is_empty


def test_current_node_text_selects_by_status_kind():
    state = make_state()
    assert current_node_text(state, acquisition=True) is None
    poll(state)
    poll(state)
    assert current_node_text(state, acquisition=True) == "A"
    assert current_node_text(state, acquisition=False) == "a1"


def test_exhaustion_sticks_until_cleared():
    state = make_state()
    drain(state)
    assert state.exhausted
    for _ in range(3):
        with pytest.raises(ExhaustedError):
            poll(state)
    assert state.cursor.is_empty

    state.clear()
    assert not state.exhausted
    with pytest.raises(TraversalCorruptedError):
        poll(state)


def test_reseeded_cycle_is_not_marked_exhausted():
    state = make_state(cycle_count=2)
    for _ in range(5):
        poll(state)
    assert not state.exhausted
    assert state.cursor.next_instruction == (0, "A")
