from dataclasses import dataclass, fields
from typing import Optional
from pathlib import Path
import os
import tomllib
import warnings


BOUNDS_POLICIES = ("raise", "clip")


def check_bounds_policy(policy: str) -> str:
    if policy not in BOUNDS_POLICIES:
        raise ValueError(
            f"Invalid bounds_policy {policy!r}, "
            f"expected one of {', '.join(BOUNDS_POLICIES)}"
        )
    return policy


def _get_config_paths() -> list[Path]:
    """Config file candidates, highest priority first."""
    home = Path.home()
    xdg_config = Path(os.environ.get("XDG_CONFIG_HOME", str(home / ".config")))
    return [
        Path.cwd() / ".gridslotsrc.toml",
        home / ".gridslotsrc.toml",
        xdg_config / "gridslots" / "config.toml",
    ]


def _load_config_file() -> dict[str, object] | None:
    """Contents of the first readable config file, or None."""
    for path in _get_config_paths():
        if not path.exists():
            continue
        try:
            with open(path, "rb") as f:
                return tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            warnings.warn(f"Failed to load config from {path}: {e}")
    return None


def _parse_config_value(key: str, value: object) -> object:
    """Convert config file values to proper types."""
    if key == "bounds_policy" and isinstance(value, str):
        return value.strip().lower()
    return value


@dataclass
class Config:
    # What to do with occupying items that extend past the grid: "raise"
    # rejects the call with MalformedItem, "clip" drops the extra cells and warns.
    bounds_policy: str = "raise"

    # Reject items with negative coordinates or a size below 1x1.
    validate: bool = True

    @staticmethod
    def from_mapping(data: dict[str, object]) -> "Config":
        """Defaults overridden by the known keys of `data`."""
        known = {f.name for f in fields(Config)}
        return Config(
            **{
                key: _parse_config_value(key, value)
                for key, value in data.items()
                if key in known
            }
        )

    @staticmethod
    def load(path: Optional[Path | str] = None) -> "Config":
        """
        Read settings from `path`, or from the first config file found in the
        standard locations. Missing files yield the defaults.
        """
        if path is None:
            return Config.from_mapping(_load_config_file() or {})

        path = Path(path)
        if not path.exists():
            return Config()
        with open(path, "rb") as f:
            return Config.from_mapping(tomllib.load(f))


_default_config: Optional[Config] = None


def default_config() -> Config:
    """
    Settings from the config file search, read once and cached for the rest
    of the process.
    """
    global _default_config
    if _default_config is None:
        _default_config = Config.load()
    return _default_config
