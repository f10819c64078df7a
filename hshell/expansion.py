"""Expansion of ``$$``, ``$?`` and ``$NAME`` in command words."""


def has_expansion(tokens):
    """Return True if any word holds a ``$``."""
    return any("$" in token for token in tokens)


def expand(tokens, pid, status, env):
    """Return the argument list with variables replaced.

    ``$$`` becomes ``pid``, ``$?`` becomes ``status`` and ``$NAME`` the
    value from ``env``. A single leading backslash is dropped before the
    check. An unset variable ends the argument list there.
    """
    argv = []
    for token in tokens:
        word = token[1:] if token.startswith("\\") else token
        if word.startswith("\\") or len(word) < 2:
            arg = word
        elif word[0] == "$":
            if word[1] == "$":
                arg = str(pid)
            elif word[1] == "?":
                arg = str(status)
            else:
                arg = env.get(word[1:])
        else:
            arg = token
        if arg is None:
            break
        argv.append(arg)
    return argv