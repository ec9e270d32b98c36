"""CLI package for the terminal temperature dashboard."""

from importlib import import_module
from types import ModuleType


def __getattr__(name: str) -> ModuleType:
    if name == "app":
        return import_module("cli.app")
    raise AttributeError(name)

# The Typer application lives in ``cli.app``.  It is not re-exported here so
# that ``cli.app`` keeps resolving to the module; tests patch attributes such
# as ``cli.app.build_default_collector`` through that module path.

__all__ = []
