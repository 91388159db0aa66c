"""
Configuration serialization for netsim.

Functions for saving and loading the persisted CliConfig to/from JSON.
"""

import json
from dataclasses import asdict, fields
from pathlib import Path

from .dataclasses import CliConfig
from .validation import validate_hostname


def to_dict(obj):
    """Convert dataclasses to dicts recursively."""
    if hasattr(obj, '__dataclass_fields__'):
        return {k: to_dict(v) for k, v in asdict(obj).items()}
    elif isinstance(obj, list):
        return [to_dict(i) for i in obj]
    else:
        return obj


def save_config(config: CliConfig, config_file: Path, quiet: bool = False) -> None:
    """Save configuration to JSON file."""
    from netsim_lib.common import log

    config_file.parent.mkdir(parents=True, exist_ok=True)

    data = to_dict(config)

    with open(config_file, 'w') as f:
        json.dump(data, f, indent=2)

    if not quiet:
        log(f"Configuration saved to {config_file}")


def _field_is_valid(name: str, value) -> bool:
    """Type check one persisted CliConfig field."""
    if name == 'hostname':
        return isinstance(value, str) and validate_hostname(value)
    if name == 'startup_config':
        return isinstance(value, list) and all(isinstance(line, str) for line in value)
    if name == 'last_written':
        return value is None or isinstance(value, str)
    if name == 'password_encryption':
        return isinstance(value, bool)
    return False


def load_config(config_file: Path) -> CliConfig:
    """
    Load configuration from JSON file.

    A missing or unreadable file yields the default configuration with a
    warning. Unknown keys are ignored, and a field of the wrong type keeps
    its default with a warning.
    """
    from netsim_lib.common import warn

    if not config_file.exists():
        warn(f"{config_file} not found, starting with default configuration")
        return CliConfig()

    try:
        with open(config_file) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        warn(f"Could not read {config_file}: {e}; starting with default configuration")
        return CliConfig()

    if not isinstance(data, dict):
        warn(f"{config_file} does not contain a configuration object; starting with default configuration")
        return CliConfig()

    values = {}
    for f in fields(CliConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        if not _field_is_valid(f.name, value):
            warn(f"Ignoring invalid '{f.name}' in {config_file}; using the default")
            continue
        values[f.name] = list(value) if f.name == 'startup_config' else value
    return CliConfig(**values)
