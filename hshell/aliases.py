"""Shell aliases kept in definition order."""


class AliasTable:
    """Named aliases, each standing for a replacement word."""

    def __init__(self):
        self._aliases = {}

    def set(self, name, value):
        """Define ``name``, replacing its value if already defined."""
        self._aliases[name] = value

    def lookup(self, name):
        """Return the value of ``name`` or None."""
        return self._aliases.get(name)

    def resolve(self, name):
        """Follow ``name`` through aliases of aliases to its final value.

        Returns None when ``name`` is not an alias. A cycle stops at the
        first name met twice.
        """
        value = self._aliases.get(name)
        if value is None:
            return None
        seen = {name}
        while value in self._aliases and value not in seen:
            seen.add(value)
            value = self._aliases[value]
        return value

    def format_one(self, name):
        """Return the ``name='value'`` line for one alias."""
        return f"{name}='{self._aliases[name]}'\n"

    def format_all(self):
        """Return the lines of every alias, in definition order."""
        return "".join(self.format_one(name) for name in self._aliases)

    def __iter__(self):
        return iter(self._aliases)

    def __len__(self):
        return len(self._aliases)