"""A small command interpreter with builtins, aliases and command chaining."""

__version__ = "0.1.0"
__all__ = ["__version__"]