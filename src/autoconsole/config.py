# autoconsole: Centralize environment-driven configuration constants so the console, the sink and the CLI import them without circular dependencies. Values from .autoconsole/settings.yaml override these at startup (see settings.py).

import os

# Primary prompt shown before every read
MAIN_PROMPT = os.environ.get("AUTOCONSOLE_MAIN_PROMPT", "> ")

# Prompt used when import asks for the automation file
PATH_PROMPT = os.environ.get("AUTOCONSOLE_PATH_PROMPT", "automation file path: ")

# Fixed message the sink exposes for rejected input
INVALID_MESSAGE = os.environ.get("AUTOCONSOLE_INVALID_MESSAGE", "invalid input.")

# Directory automation file paths are resolved against
AUTOMATION_DIR = os.environ.get("AUTOCONSOLE_AUTOMATION_DIR", ".")

# Commands that make the REPL import an automation file (comma separated)
IMPORT_TRIGGERS = [t.strip() for t in os.environ.get("AUTOCONSOLE_IMPORT_TRIGGERS", "R,r").split(",") if t.strip()]

# Command that ends the REPL
QUIT_COMMAND = os.environ.get("AUTOCONSOLE_QUIT_COMMAND", "quit")
