from __future__ import annotations

import re

from ..core.exceptions import ValidationError

_LINE_BREAKS = re.compile(r"\r?\n|\r")


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def format_metadata(metadata: str | None) -> str:
    """Normalize free-text work notes.

    Empty or ``n/a`` (any case) becomes ``N/A``; line breaks become ``; ``.
    """
    text = (metadata or "").strip()
    if text == "" or text.lower() == "n/a":
        return "N/A"
    return _LINE_BREAKS.sub("; ", text)
