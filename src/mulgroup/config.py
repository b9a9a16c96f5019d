"""Defaults for the command-line entry point and a JSON override loader."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from mulgroup.primality import DEFAULT_ROUNDS

DEFAULT_CONFIG: Dict[str, Any] = {
    "rounds": DEFAULT_ROUNDS,   # Miller-Rabin witnesses
    "max_attempts": None,       # generator search cap; None = unbounded
    "seed": None,               # None = OS entropy
    "log_level": "WARNING",
}


def load_config(path: str, base: Dict[str, Any] = None) -> Dict[str, Any]:
    """Load a JSON config file and shallow-merge it into base.

    :param path: path to JSON config file
    :param base: configuration to update (if None use DEFAULT_CONFIG)
    :return: merged configuration dictionary
    """
    base = base.copy() if base is not None else DEFAULT_CONFIG.copy()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with p.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a JSON object: {path}")
    unknown = sorted(set(data) - set(DEFAULT_CONFIG))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
    for k, v in data.items():
        base[k] = _check_value(k, v)
    return base


def _check_value(key: str, value: Any) -> Any:
    """Reject values main() cannot use. log_level comes back uppercased."""
    if key == "log_level":
        if not isinstance(value, str):
            raise ValueError(f"log_level must be a string, got {value!r}")
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level: {value!r}")
        return level
    # bool is an int subclass but never a valid count or seed
    is_int = isinstance(value, int) and not isinstance(value, bool)
    if key == "rounds" and not is_int:
        raise ValueError(f"rounds must be an integer, got {value!r}")
    if value is not None and not is_int:
        raise ValueError(f"{key} must be an integer or null, got {value!r}")
    return value
