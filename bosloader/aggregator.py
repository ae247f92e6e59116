"""Merge the components of every configured account into one document."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .assembler import ComponentAssembler
from .errors import AggregationError, ConfigurationError, LoaderError
from .formatter import format_response, render_response
from .logging import get_logger
from .models import ServeEntry
from .replacements import load_replacements

_LOGGER = get_logger("aggregator")


class Aggregator:
    """Runs the assembler over each entry in configuration order.

    Instances are cheap and hold no results; build one per request.
    """

    def __init__(
        self,
        entries: Sequence[ServeEntry],
        *,
        web_engine: bool = False,
        replacements: Optional[Path] = None,
        assembler: Optional[ComponentAssembler] = None,
    ) -> None:
        if not entries:
            raise ConfigurationError("At least one account/path entry is required")
        self.entries: List[ServeEntry] = list(entries)
        self.web_engine = web_engine
        self.replacements = replacements
        self.assembler = assembler or ComponentAssembler(web_engine=web_engine)

    def collect(self) -> Dict[str, str]:
        """Return the union of all entries; later entries win on name clashes."""
        default_replacements: Optional[Dict[str, str]] = None
        combined: Dict[str, str] = {}
        for entry in self.entries:
            try:
                if entry.replacements is None and default_replacements is None:
                    default_replacements = load_replacements(self.replacements)
                components = self.assembler.assemble(entry, default_replacements)
            except LoaderError as exc:
                _LOGGER.error(
                    "Error handling request for account %s, path %s: %s",
                    entry.account,
                    entry.path,
                    exc,
                )
                raise AggregationError(entry.account, entry.path, exc) from exc
            combined.update(components)
        return combined

    def build(self) -> Dict[str, Any]:
        return format_response(self.collect(), self.web_engine)

    def render(self) -> str:
        """Return the response document as a compact JSON string."""
        return render_response(self.collect(), self.web_engine)


__all__ = ["Aggregator"]
