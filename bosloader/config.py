"""Configuration loading for bos-loader (.bos-loader.toml)."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .errors import ConfigurationError
from .models import ServeEntry

CONFIG_FILENAME = ".bos-loader.toml"


@dataclass
class LoaderConfig:
    """Account/path entries declared in .bos-loader.toml."""

    root: Path
    entries: List[ServeEntry] = field(default_factory=list)


def load_config(config_path: Path) -> LoaderConfig:
    """Load the multi-account configuration from disk.

    ``config_path`` may point at the file itself or at the directory holding
    it. Relative ``path`` and ``replacements`` values resolve against the
    directory of the config file.
    """
    config_file = _resolve_config_path(config_path)
    root = config_file.parent

    if not config_file.is_file():
        raise ConfigurationError(f"Config file not found: {config_file}")

    data = _read_config(config_file)
    raw_paths = data.get("paths")
    if not isinstance(raw_paths, list) or not raw_paths:
        raise ConfigurationError(
            f"A valid path configuration was not found in {config_file.name}"
        )

    entries: List[ServeEntry] = []
    for index, raw in enumerate(raw_paths):
        entry_data = _as_dict(raw)
        account = _as_str(entry_data.get("account"))
        path = _as_str(entry_data.get("path"))
        if not account or not path:
            raise ConfigurationError(
                f"paths[{index}] in {config_file.name} needs both 'account' and 'path'"
            )
        replacements = _as_str(entry_data.get("replacements"))
        entries.append(
            ServeEntry(
                account=account,
                path=root / path,
                replacements=root / replacements if replacements else None,
            )
        )

    return LoaderConfig(root=root, entries=entries)


def entries_from_args(
    account: Optional[str], path: Path, replacements: Optional[Path] = None
) -> List[ServeEntry]:
    """Return the single entry described by command-line arguments."""
    if not account:
        raise ConfigurationError(
            "Account ID must be provided when not using configuration file"
        )
    return [ServeEntry(account=account, path=path, replacements=replacements)]


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Failed to read {path.name}: {exc}") from exc
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigurationError(f"Failed to parse {path.name}: {exc}") from exc


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


__all__ = ["CONFIG_FILENAME", "LoaderConfig", "entries_from_args", "load_config"]
