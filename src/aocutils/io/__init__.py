"""
Input and example file locations and loading.
"""

from .loader import InputLoader, strip_trailing_newlines
from .paths import ArtifactKind, example_path, input_path, resolve_path

__all__ = ["ArtifactKind", "InputLoader", "example_path", "input_path", "resolve_path", "strip_trailing_newlines"]
