"""JSON round trip for RandomizerConfig, strict about the schema.

Configs are stored as sorted, indented JSON so they diff cleanly next to
the null networks they produced. Loading goes through dacite: unknown keys
are rejected, JSON arrays become tuples (`tags`), and missing keys fall
back to the dataclass defaults, so a file only has to name what it changes.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

from dacite import Config as DaciteConfig
from dacite import DaciteError, from_dict

from netrewire.config.experiment import RandomizerConfig

_DACITE_CONFIG = DaciteConfig(cast=[tuple], check_types=True, strict=True)


def config_to_dict(config: RandomizerConfig) -> dict[str, Any]:
    return asdict(config)


def config_from_dict(d: dict[str, Any]) -> RandomizerConfig:
    """Build a RandomizerConfig, nested SwapConfig included.

    Raises:
        dacite.DaciteError: On unknown keys or wrongly typed values.
        ValueError: If the values fail RandomizerConfig/SwapConfig validation.
    """
    return from_dict(data_class=RandomizerConfig, data=d, config=_DACITE_CONFIG)


def config_to_json(config: RandomizerConfig) -> str:
    return json.dumps(config_to_dict(config), indent=2, sort_keys=True)


def config_from_json(json_str: str) -> RandomizerConfig:
    return config_from_dict(json.loads(json_str))


def save_config(config: RandomizerConfig, path: Path | str) -> Path:
    """Write `config` as JSON to `path` and return the path."""
    path = Path(path)
    path.write_text(config_to_json(config) + "\n")
    return path


def load_config(path: Path | str) -> RandomizerConfig:
    """Read a config file, reporting any schema problem against its path.

    Raises:
        ValueError: If the file is not valid JSON, does not match the
            RandomizerConfig schema, or holds invalid values.
    """
    path = Path(path)
    try:
        return config_from_json(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"{path}: not valid JSON ({exc})") from exc
    except DaciteError as exc:
        raise ValueError(f"{path}: {exc}") from exc
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from exc
