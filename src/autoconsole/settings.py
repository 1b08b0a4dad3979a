# autoconsole: Lightweight YAML settings loader. Reads <root>/.autoconsole/settings.yaml (or .yml) and merges its console: section over the environment-driven defaults from config.py.

from __future__ import annotations

import logging
import pathlib
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from . import config

LOGGER = logging.getLogger(__name__)


class ConsoleSettings(BaseModel):
    """Effective console configuration after defaults, environment and settings file are merged."""
    model_config = ConfigDict(extra="ignore")

    main_prompt: str = Field(default=config.MAIN_PROMPT)
    path_prompt: str = Field(default=config.PATH_PROMPT)
    invalid_message: str = Field(default=config.INVALID_MESSAGE)
    automation_dir: str = Field(default=config.AUTOMATION_DIR)
    import_triggers: List[str] = Field(default_factory=lambda: list(config.IMPORT_TRIGGERS))
    quit_command: str = Field(default=config.QUIT_COMMAND)


def load_settings(root: pathlib.Path) -> Dict[str, Any]:
    """
    Load settings from <root>/.autoconsole/settings.yaml or settings.yml.

    Returns an empty dict {} when the settings file is missing, unreadable, or
    does not contain a mapping. The function never raises.
    """
    settings_dir = pathlib.Path(root) / ".autoconsole"
    for p in (settings_dir / "settings.yaml", settings_dir / "settings.yml"):
        try:
            if p.exists() and p.is_file():
                data = yaml.safe_load(p.read_text(encoding="utf-8"))
                if isinstance(data, dict):
                    return data
                # Non-mapping YAML is treated as empty settings.
                return {}
        except (OSError, yaml.YAMLError) as e:
            LOGGER.debug("skipping unreadable settings file %s: %s", p, e)
            continue
    return {}


def resolve_console_settings(
    root: pathlib.Path, overrides: Optional[Dict[str, Any]] = None
) -> ConsoleSettings:
    """
    Build ConsoleSettings from the settings file's console: section plus explicit overrides.

    Overrides with a None value are ignored so CLI flags that were not given
    leave the file or environment value in place. An invalid console: section
    falls back to the defaults.
    """
    section = load_settings(root).get("console") or {}
    if not isinstance(section, dict):
        section = {}
    merged: Dict[str, Any] = dict(section)
    for key, value in (overrides or {}).items():
        if value is not None:
            merged[key] = value
    try:
        return ConsoleSettings.model_validate(merged)
    except ValidationError as e:
        LOGGER.warning("invalid console settings, using defaults: %s", e)
        cleaned = {k: v for k, v in (overrides or {}).items() if v is not None}
        return ConsoleSettings.model_validate(cleaned)
