"""Path resolution for install targets and configuration values."""

import os
from pathlib import Path


def resolve_path(path: str | Path, base_dir: Path | None) -> Path:
    """Resolve a path, making it relative to base_dir if it's relative."""
    path_str = os.path.expanduser(str(path))
    path_obj = Path(path_str)

    # If path is absolute or no base_dir provided, return as-is
    if path_obj.is_absolute() or base_dir is None:
        return path_obj

    return base_dir / path_obj


def resolve_target(raw: str, base_dir: Path | None = None) -> Path:
    """
    Turn a user-typed directory into an absolute path.

    A leading ``~`` expands to the invoking user's home directory and a
    relative path is anchored at ``base_dir`` (the current working directory
    unless given). Blank input means ``base_dir`` itself.

    """
    if base_dir is None:
        base_dir = Path.cwd()

    raw = raw.strip()
    if not raw:
        return base_dir

    return resolve_path(raw, base_dir)
