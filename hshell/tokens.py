"""Splitting command lines into words, commands and logical operators."""

import re

SEPARATOR = ";"
AND = "&"
OR = "|"

_UINT_RANGE = 2**32


def tokenize(line, delims):
    """Split ``line`` on any character of ``delims``, dropping empty pieces."""
    if not line:
        return []
    if not delims:
        return [line]
    pattern = "[" + re.escape(delims) + "]"
    return [piece for piece in re.split(pattern, line) if piece]


def count_tokens(text, delims):
    """Return how many tokens ``tokenize`` would yield for ``text``."""
    return len(tokenize(text, delims))


def count_words(text):
    """Return the number of space-separated words in ``text``."""
    return count_tokens(text, " ")


def strip_comment(line):
    """Cut ``line`` at a comment: a leading ``#`` or a ``#`` after a space."""
    if line.startswith("#"):
        return ""
    idx = line.find(" #")
    if idx < 0:
        return line
    return line[: idx + 1]


def logical_operators(line):
    """Return the operators joining the commands of ``line``, in order.

    ``;`` stands for itself; ``&`` and ``|`` each consume the character
    that follows them, so ``&&`` and ``||`` count once.
    """
    operators = []
    chars = iter(strip_comment(line))
    for ch in chars:
        if ch == SEPARATOR:
            operators.append(ch)
        elif ch in (AND, OR):
            operators.append(ch)
            next(chars, None)
    return operators


def to_int(text):
    """Read the decimal digits of ``text`` as an unsigned 32-bit number.

    Every non-digit character is skipped, including a minus sign.
    """
    value = 0
    for ch in text:
        if "0" <= ch <= "9":
            value = (value * 10 + ord(ch) - ord("0")) % _UINT_RANGE
    return value