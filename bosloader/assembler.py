"""Build one account's component map from a served directory."""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Dict, Iterator, Mapping, Optional

from .logging import get_logger
from .models import COMPONENT_SEPARATOR, ComponentSource, ServeEntry
from .replacements import load_replacements, resolve_placeholders
from .walker import component_key, iter_component_files, source_extensions

_LOGGER = get_logger("assembler")


def component_name(account: str, relative_path: PurePosixPath) -> str:
    """Return the gateway name for a file, e.g. ``alice.near/widget/foo.Bar``."""
    return f"{account}{COMPONENT_SEPARATOR}{component_key(relative_path)}"


class ComponentAssembler:
    """Turns a :class:`ServeEntry` into a ``name -> code`` mapping."""

    def __init__(self, *, web_engine: bool = False) -> None:
        self.web_engine = web_engine
        self.extensions = source_extensions(web_engine)

    def iter_sources(
        self, entry: ServeEntry, replacements: Mapping[str, str]
    ) -> Iterator[ComponentSource]:
        for walked in iter_component_files(entry.path, self.extensions):
            yield ComponentSource(
                name=component_name(entry.account, walked.relative_path),
                code=resolve_placeholders(walked.contents, entry.account, replacements),
            )

    def assemble(
        self, entry: ServeEntry, replacements: Optional[Mapping[str, str]] = None
    ) -> Dict[str, str]:
        """Return the components served for ``entry``.

        The entry's own replacements file takes precedence over ``replacements``;
        it is read once here and shared by every file in the entry.
        """
        if entry.replacements is not None or replacements is None:
            replacements = load_replacements(entry.replacements)

        components: Dict[str, str] = {}
        for source in self.iter_sources(entry, replacements):
            components[source.name] = source.code
        _LOGGER.debug(
            "Loaded %d component(s) for %s from %s",
            len(components),
            entry.account,
            entry.path,
        )
        return components


__all__ = ["ComponentAssembler", "component_name"]
