"""Load SweepConfig from sweep.yaml if present.

Merges file config with CLI kwargs. CLI overrides file.
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import yaml

from sweep._errors import ConfigError
from sweep.config import SweepConfig

_KNOWN_KEYS = frozenset({
    "nav_sensitive_fields", "stage_param", "stage_value",
    "base_url", "zone_id", "api_base", "timeout",
})


def load_config(root: Path, **overrides: object) -> SweepConfig:
    """Load SweepConfig from root, optionally merging sweep.yaml.

    Looks for sweep.yaml, sweep.yml, or sweep.toml in root. If found, loads
    and merges with overrides. Overrides take precedence; ``None`` overrides
    are ignored so unset CLI flags do not mask file values.

    Raises:
        ConfigError: If a config file exists but cannot be parsed, or holds
            unknown keys.

    """
    file_config = _read_sweep_config(root)
    merged = {**file_config, **{k: v for k, v in overrides.items() if v is not None}}
    unknown = sorted(set(merged) - _KNOWN_KEYS)
    if unknown:
        msg = f"Unknown config keys: {', '.join(unknown)}"
        raise ConfigError(msg)
    if "nav_sensitive_fields" in merged:
        merged["nav_sensitive_fields"] = _field_names(merged["nav_sensitive_fields"])
    return SweepConfig(**merged)  # type: ignore[arg-type]


def _read_sweep_config(root: Path) -> dict[str, object]:
    """Read sweep config from yaml/toml if present. Returns empty dict otherwise."""
    for name in ("sweep.yaml", "sweep.yml"):
        path = root / name
        if path.is_file():
            return _parse_yaml(path)
    toml_path = root / "sweep.toml"
    if toml_path.is_file():
        return _parse_toml(toml_path)
    return {}


def _parse_yaml(path: Path) -> dict[str, object]:
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as exc:
        msg = f"Cannot parse {path.name}: {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(data, dict):
        msg = f"{path.name} must contain a mapping at the top level"
        raise ConfigError(msg)
    return _flatten_sweep_section(data)


def _parse_toml(path: Path) -> dict[str, object]:
    try:
        data = tomllib.loads(path.read_text())
    except tomllib.TOMLDecodeError as exc:
        msg = f"Cannot parse {path.name}: {exc}"
        raise ConfigError(msg) from exc
    return _flatten_sweep_section(data)


def _flatten_sweep_section(data: dict[str, object]) -> dict[str, object]:
    """Extract sweep.* keys into top-level config."""
    result: dict[str, object] = {}
    sweep = data.get("sweep")
    if isinstance(sweep, dict):
        result.update(sweep)
    for k, v in data.items():
        if k != "sweep" and k in _KNOWN_KEYS:
            result[k] = v
    return result


def _field_names(value: object) -> frozenset[str]:
    """Normalize a configured field list. Accepts a list or a comma-separated string."""
    if isinstance(value, str):
        return frozenset(name.strip() for name in value.split(",") if name.strip())
    if isinstance(value, (list, tuple, set, frozenset)):
        return frozenset(str(name) for name in value)
    msg = f"nav_sensitive_fields must be a list of field names, got {type(value).__name__}"
    raise ConfigError(msg)
