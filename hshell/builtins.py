"""Commands the shell runs itself instead of starting a program."""

import os

from hshell.environment import InvalidVariableName
from hshell.tokens import to_int, tokenize


class ShellExit(Exception):
    """Raised by the ``exit`` builtin to end the shell with ``code``."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code


def _try_chdir(path):
    if path is None:
        return False
    try:
        os.chdir(path)
    except (OSError, ValueError):
        return False
    return True


def change_directory(shell, tokens):
    """Change the working directory and keep PWD and OLDPWD up to date."""
    target = tokens[1] if len(tokens) > 1 else None
    if target is None:
        shell.env.set("OLDPWD", os.getcwd())
        home = shell.env.get("HOME")
        _try_chdir(home if home else shell.env.get("PWD"))
        shell.env.set("PWD", os.getcwd())
    elif target == "-":
        oldpwd = shell.env.get("OLDPWD")
        if oldpwd:
            _try_chdir(oldpwd)
            shell.env.set("PWD", os.getcwd())
        else:
            shell.error("%s: %s: OLDPWD not set\n", shell.name, tokens[0])
    elif not _try_chdir(target):
        shell.error(
            "%s: %u: %s: can't cd to %s\n",
            shell.name, shell.count, tokens[0], target,
        )


def exit_builtin(shell, tokens):
    """Leave the shell, with the given status or the last one."""
    status = 0
    if len(tokens) > 1:
        arg = tokens[1]
        if not all("0" <= ch <= "9" for ch in arg):
            shell.error(
                "%s: %u: %s: Illegal number: %s\n",
                shell.name, shell.count, tokens[0], arg,
            )
            shell.status = 2
            return
        status = to_int(arg)
    raise ShellExit(status if status else shell.status)


def env_builtin(shell, tokens):
    """Print every environment entry on its own line."""
    for entry in shell.env.lines():
        shell.stdout.write(f"{entry}\n")


def setenv_builtin(shell, tokens):
    """Set a variable: ``setenv NAME VALUE``."""
    if len(tokens) < 3:
        return
    try:
        shell.env.set(tokens[1], tokens[2], True)
    except InvalidVariableName:
        shell.error("%s: %u: %s: bad variable name\n", shell.name, shell.count, tokens[0])
        shell.status = 2


def unsetenv_builtin(shell, tokens):
    """Remove a variable that is set: ``unsetenv NAME``."""
    if len(tokens) < 2 or shell.env.get(tokens[1]) is None:
        return
    try:
        shell.env.unset(tokens[1])
    except InvalidVariableName:
        shell.error("%s: %u: %s: bad variable name\n", shell.name, shell.count, tokens[0])
        shell.status = 2


def alias_builtin(shell, tokens):
    """List, show or define aliases: ``alias [name[=value] ...]``."""
    if len(tokens) < 2:
        shell.stdout.write(shell.aliases.format_all())
        return
    for arg in tokens[1:]:
        pieces = tokenize(arg, "=")
        if not pieces:
            continue
        name = pieces[0]
        if len(pieces) > 1:
            shell.aliases.set(name, pieces[1])
        elif shell.aliases.lookup(name) is not None:
            shell.stdout.write(shell.aliases.format_one(name))


_BUILTINS = {
    "exit": exit_builtin,
    "cd": change_directory,
    "env": env_builtin,
    "setenv": setenv_builtin,
    "unsetenv": unsetenv_builtin,
    "alias": alias_builtin,
}


def run_builtin(shell, tokens):
    """Run ``tokens`` as a builtin; return True if it was one."""
    if not tokens:
        return False
    handler = _BUILTINS.get(tokens[0])
    if handler is None:
        return False
    handler(shell, tokens)
    return True