# autoconsole: CLI entrypoint. Parses a small flag set by hand, builds the console from settings, and runs the read loop where an import trigger loads an automation file.

import logging
import pathlib
import sys
from typing import List, Optional

from .console import Console
from .context import ConsoleContext, Terminal
from .errors import ConsoleError, ConsoleIOError
from .settings import ConsoleSettings, resolve_console_settings

COMMAND_PROMPT = "enter a command: "

USAGE = "Usage: autoconsole [--automation-dir PATH|-d PATH] [--verbose|-v] [root]"


def run_loop(console: Console, settings: ConsoleSettings, ctx: ConsoleContext) -> int:
    """
    Drive the console until the quit command or end of terminal input.

    Returns the process exit code.
    """
    console.setup()
    try:
        while True:
            try:
                cmd = console.read(COMMAND_PROMPT)
            except ConsoleIOError:
                ctx.send_to_user("\nGoodbye.")
                return 0
            except ConsoleError:
                # Already reported to the sink; the console has refreshed its status.
                continue
            if cmd == settings.quit_command:
                ctx.send_to_user("Goodbye.")
                return 0
            if cmd in settings.import_triggers:
                console.import_file_or_log()
    finally:
        console.teardown()


def main(argv: Optional[List[str]] = None, terminal: Optional[Terminal] = None) -> int:
    """
    autoconsole CLI entrypoint.

    Usage:
        autoconsole [--automation-dir PATH|-d PATH] [--verbose|-v] [root]

    Notes:
        - Settings are read from <root>/.autoconsole/settings.yaml when present.
        - AUTOCONSOLE_* environment variables provide the defaults.
        - Type R (or another configured trigger) to import an automation file.
    """
    args = sys.argv[1:] if argv is None else list(argv)

    if any(a in ("-h", "--help") for a in args):
        print(USAGE)
        print("Options:")
        print("  -d, --automation-dir PATH   Directory automation file paths are resolved against.")
        print("  -v, --verbose               Trace accepted input and status changes.")
        print("Environment:")
        print("  AUTOCONSOLE_MAIN_PROMPT, AUTOCONSOLE_PATH_PROMPT, AUTOCONSOLE_INVALID_MESSAGE,")
        print("  AUTOCONSOLE_AUTOMATION_DIR, AUTOCONSOLE_IMPORT_TRIGGERS, AUTOCONSOLE_QUIT_COMMAND")
        return 0

    automation_dir = None
    verbose = False
    root_arg = None
    i = 0
    while i < len(args):
        a = args[i]
        if a in ("-d", "--automation-dir"):
            if i + 1 >= len(args):
                print(f"error: {a} requires a PATH argument")
                return 2
            automation_dir = args[i + 1]
            i += 2
            continue
        if a.startswith("--automation-dir="):
            automation_dir = a.split("=", 1)[1]
            i += 1
            continue
        if a in ("-v", "--verbose"):
            verbose = True
            i += 1
            continue
        if a.startswith("-"):
            print(f"error: unknown option: {a}")
            return 2
        # First non-flag is the settings root
        if root_arg is None:
            root_arg = a
        i += 1

    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    root = pathlib.Path(root_arg).resolve() if root_arg else pathlib.Path(".").resolve()
    settings = resolve_console_settings(root, {"automation_dir": automation_dir})
    automation_root = pathlib.Path(settings.automation_dir)
    if not automation_root.is_absolute():
        automation_root = root / automation_root

    ctx = ConsoleContext(invalid_message=settings.invalid_message, verbose=verbose)
    console = Console(
        ctx,
        terminal=terminal,
        main_prompt=settings.main_prompt,
        path_prompt=settings.path_prompt,
        automation_dir=str(automation_root),
    )
    return run_loop(console, settings, ctx)


if __name__ == "__main__":
    raise SystemExit(main())
