# autoconsole: Filesystem helpers for the automation loader: base-directory path resolution with escape protection and a plain UTF-8 read used as the console's filesystem collaborator.

import pathlib


def normalize_path(p: str) -> str:
    """Normalize a filesystem path to POSIX-style string (forward slashes)."""
    return str(pathlib.Path(p).as_posix())


def safe_abs(base_dir: pathlib.Path, rel: str) -> pathlib.Path:
    """
    Resolve a path typed at the console against base_dir.

    Raises:
        PermissionError: when the resolved path escapes base_dir.
    """
    root = pathlib.Path(base_dir).resolve()
    abs_path = (root / rel).resolve()
    try:
        abs_path.relative_to(root)
    except ValueError:
        raise PermissionError(f"Path escapes automation directory: {rel}")
    return abs_path


def read_to_string(path: pathlib.Path) -> str:
    """Read a UTF-8 text file; OSError propagates to the caller."""
    with pathlib.Path(path).open("r", encoding="utf-8") as f:
        return f.read()
