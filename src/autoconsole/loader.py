# autoconsole: Structured-format collaborator for automation files. YAML is decoded with yaml.safe_load and validated against the AutomationTree Pydantic model; any failure becomes a MalformedAutomationError carrying a schema hint an operator can act on.

from typing import Any

import yaml
from pydantic import ValidationError

from .errors import MalformedAutomationError
from .models import AutomationTree

SCHEMA_HINT = "\n".join(
    [
        "Expected automation file layout (YAML):",
        "  instructions:            # required, at least one entry",
        "    - instruction: <int|str>",
        "      sub_commands: [<int|str>, ...]   # optional",
        "  cycle_count: <positive int>          # optional, total passes (default 1)",
        "  path: <str>                          # optional, informational",
    ]
)


def _describe_validation_error(err: ValidationError) -> str:
    """Flatten Pydantic errors into one line per offending location."""
    parts = []
    for e in err.errors():
        loc = ".".join(str(p) for p in e.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {e.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse(text: str) -> AutomationTree:
    """
    Parse automation file contents into an AutomationTree.

    Raises:
        MalformedAutomationError: on YAML syntax errors, a non-mapping document,
            or a schema violation.
    """
    try:
        data: Any = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedAutomationError(f"automation file is not valid YAML ({e})", SCHEMA_HINT)
    if not isinstance(data, dict):
        raise MalformedAutomationError("automation file must be a mapping", SCHEMA_HINT)
    try:
        tree = AutomationTree.model_validate(data)
    except ValidationError as e:
        raise MalformedAutomationError(
            f"automation file does not match the schema ({_describe_validation_error(e)})", SCHEMA_HINT
        )
    return tree
