"""Core data models shared across bos-loader components."""

from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Optional

COMPONENT_SEPARATOR = "/widget/"


@dataclass(frozen=True)
class ServeEntry:
    """One account/directory pair to serve, with its optional replacements file."""

    account: str
    path: Path
    replacements: Optional[Path] = None


@dataclass(frozen=True)
class WalkedFile:
    """A matching source file found under a served directory."""

    relative_path: PurePosixPath
    contents: str


@dataclass(frozen=True)
class ComponentSource:
    """A named component with its placeholder-resolved code."""

    name: str
    code: str
