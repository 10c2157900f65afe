"""
Process defaults, config files and puzzle resolution.
"""

from .defaults import (
    ProcessDefaults,
    configure,
    defaults_context,
    get_defaults,
    load_defaults,
    reset_defaults,
    set_defaults,
)
from .loader import load_config_file
from .resolver import ConfigResolver, PuzzleKey, ResolvedOptions

__all__ = [
    "ConfigResolver",
    "ProcessDefaults",
    "PuzzleKey",
    "ResolvedOptions",
    "configure",
    "defaults_context",
    "get_defaults",
    "load_config_file",
    "load_defaults",
    "reset_defaults",
    "set_defaults",
]
