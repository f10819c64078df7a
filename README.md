# hshell

hshell is a small command interpreter in the style of a minimal `sh`. It
reads commands from a terminal or from standard input. It looks each command
up in the directories listed in `PATH` and runs it.

## Running it

```
hshell
```

When standard input is a terminal, the shell shows a `($) ` prompt and reads
one line at a time. When standard input is a pipe or a file, it runs each
line without a prompt:

```
echo "ls -l; echo done" | hshell
```

The shell stops at end of input or at `exit`. It exits with the status of
the last command, taken modulo 256. The shell only runs a line that ends in a
newline, so a last line without one is ignored.

## What a line may contain

- **Several commands** joined with:
  - `;`: always run the next command.
  - `&&`: run the next command only if the previous one succeeded.
  - `||`: run the next command only if the previous one failed.
- **Comments.** A `#` at the start of a line, or right after a space, ends
  the line.
- **Variables.** A word starting with `$` is replaced:
  - `$$` becomes the shell's process id.
  - `$?` becomes the last exit status.
  - `$NAME` becomes the value of an environment variable.

  A leading backslash is dropped from a word before this check. If a
  variable is unset, the argument list ends at that word.
- **Paths.** A command name containing `/`, `.` or `~` is used as a path. Any
  other name is looked up in `PATH`, and the first user-executable match is
  used.
- **Words** are split on blanks and tabs.

## Builtins

| Command | Effect |
| --- | --- |
| `exit [status]` | leave the shell; a non-numeric status is an error and sets the status to 2 |
| `cd [dir \| -]` | change directory and update `PWD`/`OLDPWD`; without an argument go to `HOME` (or `PWD` if `HOME` is unset), `-` goes to `OLDPWD` |
| `env` | print the environment, one `NAME=value` per line |
| `setenv NAME VALUE` | set or add a variable; with fewer arguments nothing happens |
| `unsetenv NAME` | remove a variable if it is set |
| `alias [name[=value] ...]` | with no arguments list all aliases; `name` shows one alias as `name='value'`; `name=value` defines or replaces it |

When a command's name is an alias, the shell runs the program that the alias
resolves to. It follows aliases of aliases to reach that program. The
original words are still passed as the program's arguments.

Errors are written to standard error as the shell's program name, the line
number, the command and the message:

```
hshell: 1: nosuchcmd: not found
```

A command that cannot be found sets the exit status to 127.

## Using it from Python

```python
import io
from hshell.shell import Shell

out = io.StringIO()
shell = Shell("hshell", {"PATH": "/bin:/usr/bin"}, out, io.StringIO())
shell.run_line("setenv GREETING hello; env")
print(out.getvalue())
```

`Shell.repl(stream, interactive)` reads lines from any text stream and
returns the final status. `Shell.run_line(line)` runs a single line.
`shell.status` holds the last exit status.

The building blocks can also be used on their own:

- `hshell.tokens`: splitting lines and comment handling.
- `hshell.environment.Environment`: the shell's copy of the environment.
- `hshell.aliases.AliasTable`: alias storage and resolution.
- `hshell.paths.which`: looking commands up in `PATH`.
- `hshell.expansion.expand`: variable expansion.

## What it does not do

hshell has none of the following:

- quoting
- pipelines
- redirection
- globbing
- background jobs
- here-documents

A single `|` or `&` separates commands in the same way as `||` or `&&`. The
search path is read once, when the shell starts, so changing `PATH` later
does not change where commands are looked up.