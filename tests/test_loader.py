import pytest

from autoconsole.errors import MalformedAutomationError
from autoconsole.loader import SCHEMA_HINT, parse


def test_parse_full_document():
    tree = parse(
        """
path: declared.yaml
cycle_count: 3
instructions:
  - instruction: run
    sub_commands: [1, fast]
  - instruction: 42
"""
    )
    assert tree.cycle_count == 3
    assert tree.path == "declared.yaml"
    assert [n.instruction for n in tree.instructions] == ["run", 42]
    assert tree.instructions[0].sub_commands == [1, "fast"]
    assert tree.instructions[1].sub_commands is None


def test_declared_path_is_kept_by_the_parser():
    tree = parse("path: other\ninstructions:\n  - instruction: A\n")
    assert tree.path == "other"


def test_cycle_count_defaults_to_absent():
    assert parse("instructions:\n  - instruction: A\n").cycle_count is None


@pytest.mark.parametrize(
    "text",
    [
        "instructions: []\n",
        "cycle_count: 2\n",
        "instructions:\n  - sub_commands: [a]\n",
        "instructions:\n  - instruction: 1.5\n",
        "instructions:\n  - instruction: true\n",
        "instructions:\n  - instruction: A\ncycle_count: 0\n",
        "instructions:\n  - instruction: A\nunknown: 1\n",
        "- just\n- a list\n",
        "",
        "instructions: [unclosed\n",
    ],
)
def test_malformed_documents_carry_schema_hint(text):
    with pytest.raises(MalformedAutomationError) as exc:
        parse(text)
    assert exc.value.hint == SCHEMA_HINT
    assert exc.value.kind == "MalformedAutomation"
    assert "at least one entry" in str(exc.value)
