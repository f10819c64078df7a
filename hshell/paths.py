"""Finding commands along the search path."""

import os
import stat

from hshell.tokens import tokenize


def path_dirs(path_value):
    """Return the directories of a PATH value, last entry first."""
    if path_value is None:
        return []
    return list(reversed(tokenize(path_value, ":")))


def _stat(path):
    try:
        return os.stat(path)
    except (OSError, ValueError):
        return None


def which(cmd, dirs):
    """Return the path that runs ``cmd``, or None.

    A command holding ``~``, ``/`` or ``.`` is taken as a path and returned
    if it exists; otherwise the first user-executable ``dir/cmd`` wins.
    """
    if not cmd:
        return None
    if any(ch in cmd for ch in "~/."):
        return cmd if _stat(cmd) is not None else None
    for directory in dirs:
        candidate = f"{directory}/{cmd}"
        info = _stat(candidate)
        if info is not None and info.st_mode & stat.S_IXUSR:
            return candidate
    return None