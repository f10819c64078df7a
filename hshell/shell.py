"""The command loop: reading lines, running builtins and programs."""

import os
import subprocess
import sys

from hshell.aliases import AliasTable
from hshell.builtins import ShellExit, run_builtin
from hshell.environment import Environment
from hshell.expansion import expand, has_expansion
from hshell.paths import path_dirs, which
from hshell.tokens import logical_operators, strip_comment, tokenize

PROMPT = "($) "
_UINT_RANGE = 2**32


def format_message(fmt, *args):
    """Fill ``%s`` and ``%u`` in ``fmt``; any other ``%x`` gives ``x``.

    ``%s`` of None gives ``(null)``; ``%u`` prints the magnitude and
    nothing at all for zero.
    """
    values = iter(args)
    out = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "s":
            value = next(values, None)
            out.append("(null)" if value is None else str(value))
        elif spec == "u":
            number = abs(int(next(values, 0))) % _UINT_RANGE
            out.append(str(number) if number else "")
        else:
            out.append(spec)
    return "".join(out)


def _child_stream(stream):
    try:
        fd = stream.fileno()
    except (AttributeError, OSError, ValueError):
        return subprocess.PIPE
    stream.flush()
    return fd


class Shell:
    """State of one shell session."""

    def __init__(self, name, environ=None, stdout=None, stderr=None):
        self.name = name
        if environ is None:
            environ = os.environ
        self.env = environ if isinstance(environ, Environment) else Environment(environ)
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.aliases = AliasTable()
        self.status = 0
        self.count = 0
        self.pid = os.getpid()
        self.path_dirs = path_dirs(self.env.get("PATH"))

    def error(self, fmt, *args):
        """Write a formatted message to standard error."""
        self.stderr.write(format_message(fmt, *args))

    def _spawn(self, program, argv):
        if program is None or not argv:
            self.error("execve: %s\n", os.strerror(14))
            return 2
        out = _child_stream(self.stdout)
        err = _child_stream(self.stderr)
        try:
            proc = subprocess.run(
                argv,
                executable=program,
                env=self.env.as_dict(),
                stdout=out,
                stderr=err,
                check=False,
            )
        except OSError as exc:
            self.error("execve: %s\n", exc.strerror or str(exc))
            return 2
        if out == subprocess.PIPE and proc.stdout:
            self.stdout.write(proc.stdout.decode(errors="replace"))
        if err == subprocess.PIPE and proc.stderr:
            self.stderr.write(proc.stderr.decode(errors="replace"))
        return proc.returncode if proc.returncode >= 0 else 0

    def execute(self, tokens):
        """Run one command given as words, setting ``status``."""
        if not tokens:
            return
        replacing = has_expansion(tokens)
        alias = self.aliases.resolve(tokens[0])
        if run_builtin(self, tokens):
            return
        path = which(tokens[0], self.path_dirs)
        if path is None and alias is None and not replacing:
            self.error("%s: %u: %s: not found\n", self.name, self.count, tokens[0])
            self.status = 127
            return
        argv = expand(tokens, self.pid, self.status, self.env) if replacing else list(tokens)
        if alias is not None:
            program = which(alias, self.path_dirs)
        elif replacing:
            program = which(argv[0], self.path_dirs) if argv else None
        else:
            program = path
        self.status = self._spawn(program, argv)

    def run_command(self, command):
        """Split one command on blanks and tabs and run it."""
        tokens = tokenize(command, "\t ")
        if tokens:
            self.execute(tokens)

    def run_line(self, line):
        """Run the commands of one line joined by ``;``, ``&&`` and ``||``."""
        self.count += 1
        commands = tokenize(strip_comment(line), ";&|")
        operators = logical_operators(line)
        for idx, command in enumerate(commands):
            if idx:
                op = operators[idx - 1] if idx - 1 < len(operators) else None
                if op is None:
                    continue
                if op == "&" and self.status:
                    continue
                if op == "|" and not self.status:
                    continue
            self.run_command(command)

    def repl(self, stream, interactive=False):
        """Read and run lines until end of input or ``exit``; return the status.

        A last line without a newline is not run.
        """
        while True:
            if interactive:
                self.stdout.write(PROMPT)
                self.stdout.flush()
            line = stream.readline()
            if not line.endswith("\n"):
                return self.status
            try:
                self.run_line(line[:-1])
            except ShellExit as exc:
                return exc.code


def main(argv=None):
    """Start a shell on standard input and return its exit status."""
    argv = sys.argv if argv is None else argv
    name = argv[0] if argv else "hsh"
    shell = Shell(name, os.environ, sys.stdout, sys.stderr)
    return shell.repl(sys.stdin, sys.stdin.isatty()) & 0xFF


if __name__ == "__main__":
    sys.exit(main())