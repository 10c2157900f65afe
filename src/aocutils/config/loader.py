"""
Config file loading shared by the process defaults and programmatic entrypoints.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from aocutils.foundation.exceptions import ConfigurationError


def load_config_file(path: str | Path) -> Dict[str, Any]:
    """
    Load a YAML or JSON configuration file.

    Empty documents load as an empty mapping; any other non-mapping document is rejected.
    """
    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        raise FileNotFoundError(f"Config file '{config_path}' does not exist.")
    suffix = config_path.suffix.lower()
    if suffix in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - declared dependency
            raise ImportError("YAML config requested but PyYAML is not installed. Install with 'pip install pyyaml'.") from exc
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    else:
        with config_path.open("r", encoding="utf-8") as fh:
            data = json.load(fh)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Config file '{config_path}' must contain a mapping, got {type(data).__name__}.",
            suggestion="Write the settings as 'key: value' pairs at the top level or under an 'aocutils:' section",
            details={"path": str(config_path)},
        )
    return data


__all__ = ["load_config_file"]
