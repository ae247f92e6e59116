"""Placeholder loading and substitution for component source code."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Dict, Mapping, Optional

from .errors import ReplacementsLoadError

ACCOUNT_PLACEHOLDER = "REPL_ACCOUNT"


def placeholder_token(name: str) -> str:
    """Return the in-source spelling of a placeholder, e.g. ``${REPL_NAME}``."""
    return "${" + name + "}"


def load_replacements(path: Optional[Path]) -> Dict[str, str]:
    """Read a flat JSON replacements file.

    ``None`` means no file was configured and yields an empty map. A configured
    file that is missing, unreadable, malformed or that redefines the reserved
    ``REPL_ACCOUNT`` key raises :class:`ReplacementsLoadError`.
    """
    if path is None:
        return {}

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ReplacementsLoadError(f"Failed to read replacements file {path}: {exc}") from exc

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ReplacementsLoadError(f"Invalid JSON format in {path}: {exc}") from exc

    if not isinstance(payload, dict):
        raise ReplacementsLoadError(f"Replacements file {path} must contain a JSON object")

    replacements: Dict[str, str] = {}
    for key, value in payload.items():
        if not isinstance(value, str):
            raise ReplacementsLoadError(
                f"Replacement {key!r} in {path} must be a string, got {type(value).__name__}"
            )
        replacements[key] = value

    if ACCOUNT_PLACEHOLDER in replacements:
        raise ReplacementsLoadError(
            f"The replacements file can't contain the {ACCOUNT_PLACEHOLDER} key. This key is reserved."
        )
    return replacements


def resolve_placeholders(code: str, account: str, replacements: Mapping[str, str]) -> str:
    """Substitute ``${KEY}`` tokens in ``code`` in a single pass.

    ``${REPL_ACCOUNT}`` always resolves to ``account``. Values are inserted
    verbatim and never rescanned. Tokens without a mapping are left as-is.
    """
    values = {placeholder_token(key): value for key, value in replacements.items()}
    values[placeholder_token(ACCOUNT_PLACEHOLDER)] = account

    pattern = re.compile(
        "|".join(re.escape(token) for token in sorted(values))
    )
    return pattern.sub(lambda match: values[match.group(0)], code)


__all__ = [
    "ACCOUNT_PLACEHOLDER",
    "load_replacements",
    "placeholder_token",
    "resolve_placeholders",
]
