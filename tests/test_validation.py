import pytest

from autoconsole.errors import InvalidInputError
from autoconsole.validation import ALLOWED_SYMBOLS, check, is_allowed_char


@pytest.mark.parametrize(
    "text",
    ["R", "run 42", "a.b+c-d|e@f", "command with spaces", "输入一条命令", "9"],
)
def test_check_accepts_whitelisted_text(text):
    check(text)


@pytest.mark.parametrize("text", ["", "rm -rf /", "tab\there", "semi;colon", "new\nline", "quote'"])
def test_check_rejects_empty_or_foreign_characters(text):
    with pytest.raises(InvalidInputError) as exc:
        check(text)
    assert exc.value.found == text
    assert "alphanumeric" in exc.value.expected


def test_every_allowed_symbol_passes_alone():
    for ch in ALLOWED_SYMBOLS:
        assert is_allowed_char(ch)
        check(ch)


def test_error_kind_and_message():
    with pytest.raises(InvalidInputError) as exc:
        check("a/b")
    assert exc.value.kind == "InvalidInput"
    assert "'a/b'" in str(exc.value)
