"""Directory walking for component source files."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Iterator, List, Sequence, Tuple

from .errors import ConfigurationError, FileReadError
from .logging import get_logger
from .models import WalkedFile

_LOGGER = get_logger("walker")

_DEFAULT_EXTENSIONS = (".jsx",)
_WEB_ENGINE_EXTENSIONS = (".jsx", ".tsx")


def source_extensions(web_engine: bool = False) -> Tuple[str, ...]:
    """Return the file suffixes served in the given mode."""
    return _WEB_ENGINE_EXTENSIONS if web_engine else _DEFAULT_EXTENSIONS


def component_key(relative_path: PurePosixPath) -> str:
    """Return the dotted component label for a path, e.g. ``foo/Bar.jsx`` -> ``foo.Bar``."""
    parts = list(relative_path.parent.parts)
    parts.append(relative_path.stem)
    return ".".join(parts)


def _list_directory(
    directory: Path, extensions: Sequence[str]
) -> Tuple[List[str], List[str]]:
    files: List[str] = []
    subdirs: List[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in sorted(entries, key=lambda item: item.name):
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(entry.name)
                elif os.path.splitext(entry.name)[1] in extensions:
                    files.append(entry.name)
    except OSError as exc:
        raise ConfigurationError(f"Could not read directory {directory}: {exc}") from exc
    return files, subdirs


def _read_source(path: Path) -> str:
    try:
        with path.open("r", encoding="utf-8") as handle:
            return handle.read()
    except UnicodeDecodeError as exc:
        raise FileReadError(path, "not valid UTF-8 text") from exc
    except OSError as exc:
        raise FileReadError(path, str(exc)) from exc


def iter_component_files(
    root: Path, extensions: Sequence[str] = _DEFAULT_EXTENSIONS
) -> Iterator[WalkedFile]:
    """Yield every matching file under ``root`` with its contents.

    Directories are visited depth-first from an explicit stack. Within a
    directory, files come before subdirectories and both are taken in name
    order, so the sequence is stable across platforms.

    Raises :class:`ConfigurationError` when ``root`` or any directory below it
    cannot be listed. Individual files that cannot be read are skipped.
    """
    root_path = Path(root).expanduser()
    if not root_path.exists():
        raise ConfigurationError(f"Directory not found: {root}")
    if not root_path.is_dir():
        raise ConfigurationError(f"Path is not a directory: {root}")

    pending: List[PurePosixPath] = [PurePosixPath()]
    while pending:
        relative_dir = pending.pop()
        directory = root_path.joinpath(*relative_dir.parts)
        files, subdirs = _list_directory(directory, extensions)

        for name in files:
            relative_path = relative_dir / name
            try:
                contents = _read_source(directory / name)
            except FileReadError as exc:
                _LOGGER.warning("Skipping %s: %s", relative_path, exc)
                continue
            yield WalkedFile(relative_path=relative_path, contents=contents)

        pending.extend(relative_dir / name for name in reversed(subdirs))


__all__ = ["component_key", "iter_component_files", "source_extensions"]
