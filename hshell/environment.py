"""The shell's own copy of the process environment."""

from collections.abc import Mapping


class InvalidVariableName(ValueError):
    """Raised for an empty variable name or one holding ``=``."""


class Environment:
    """Ordered ``NAME=value`` entries with lookup, update and removal."""

    def __init__(self, entries=None):
        if entries is None:
            entries = ()
        if isinstance(entries, Mapping):
            self._entries = [f"{name}={value}" for name, value in entries.items()]
        else:
            self._entries = [str(entry) for entry in entries]

    @staticmethod
    def _check_name(name):
        if not name or "=" in name:
            raise InvalidVariableName(name)

    def _last_index(self, name):
        prefix = name + "="
        found = -1
        for idx, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                found = idx
        return found

    def get(self, name):
        """Return the value of the first entry named ``name``, or None."""
        if not name:
            return None
        prefix = name + "="
        for entry in self._entries:
            if entry.startswith(prefix):
                return entry[len(prefix):]
        return None

    def set(self, name, value, overwrite=True):
        """Add or update ``name``; a value of None removes it."""
        self._check_name(name)
        if value is None:
            self.unset(name)
            return
        idx = self._last_index(name)
        entry = f"{name}={value}"
        if idx < 0:
            self._entries.append(entry)
        elif overwrite:
            self._entries[idx] = entry

    def unset(self, name):
        """Remove the entry for ``name`` if there is one."""
        self._check_name(name)
        idx = self._last_index(name)
        if idx >= 0:
            del self._entries[idx]

    def lines(self):
        """Return the entries as ``NAME=value`` strings, in order."""
        return list(self._entries)

    def as_dict(self):
        """Return a name-to-value mapping, the first entry of a name winning."""
        result = {}
        for entry in self._entries:
            name, sep, value = entry.partition("=")
            if sep:
                result.setdefault(name, value)
        return result