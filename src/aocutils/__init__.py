from .config import ConfigResolver, ProcessDefaults, ResolvedOptions, configure, get_defaults, load_defaults, reset_defaults
from .dispatch import Dispatcher, Explicit, FromExample, FromInput
from .engine import ModuleReloader, Operation, UnitRegistry, aoc, aoc_test, default_registry, discover
from .foundation.exceptions import (
    AOCError,
    ArtifactMissingError,
    BuildFailureError,
    ConfigurationError,
    ConfigurationIncompleteError,
    DuplicateUnitError,
    InvalidUnitError,
    OperationNotImplementedError,
    RegistryError,
    UnitNotFoundError,
)
from .foundation.keys import PuzzleKey
from .foundation.logging import configure_aocutils_logging
from .foundation.version import get_version

__version__ = get_version()
from .io import InputLoader, example_path, input_path

__all__ = [
    "__version__",
    "aoc",
    "aoc_test",
    "default_registry",
    "discover",
    "UnitRegistry",
    "ModuleReloader",
    "Operation",
    "Dispatcher",
    "Explicit",
    "FromExample",
    "FromInput",
    "ConfigResolver",
    "ProcessDefaults",
    "ResolvedOptions",
    "PuzzleKey",
    "configure",
    "get_defaults",
    "load_defaults",
    "reset_defaults",
    "InputLoader",
    "input_path",
    "example_path",
    "configure_aocutils_logging",
    "get_version",
    "AOCError",
    "ConfigurationError",
    "ConfigurationIncompleteError",
    "RegistryError",
    "UnitNotFoundError",
    "DuplicateUnitError",
    "InvalidUnitError",
    "OperationNotImplementedError",
    "ArtifactMissingError",
    "BuildFailureError",
]
