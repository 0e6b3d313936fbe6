#!/usr/bin/env python3
"""
meta.py
-------------------
Dataclass for the metadata header of a post.

The header is the YAML block between two ``---`` fences at the top of
post.md:

    ---
    title: Hello
    short: A greeting
    date: 2023-05-01
    ---

``date`` is kept exactly as written; ``parsed_date`` is derived from it
with a caller-supplied strptime format and stays at ZERO_DATE when the
date could not be parsed.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

# Unset timestamp; sorts after every real date in descending order
ZERO_DATE = datetime.min


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Meta:
    """
    Structured post header.

    Attributes:
        title: Post title
        short: Summary shown in listings
        date: Publish date, raw text as written in the header
        parsed_date: ``date`` parsed with the configured format, or ZERO_DATE

    Examples:
        >>> meta = Meta.from_mapping({"title": "Hello", "date": "2023-05-01"})
        >>> meta.title
        'Hello'
        >>> meta.has_parsed_date
        False
    """

    title: str = ""
    short: str = ""
    date: str = ""
    parsed_date: datetime = ZERO_DATE

    @classmethod
    def from_mapping(
        cls, data: Dict[str, Any], parsed_date: datetime = ZERO_DATE
    ) -> Meta:
        """
        Build Meta from a decoded YAML mapping.

        Missing keys become empty strings, unknown keys are ignored and
        non-string values (sequences, mappings) are converted with str().
        """
        return cls(
            title=_as_text(data.get("title")),
            short=_as_text(data.get("short")),
            date=_as_text(data.get("date")),
            parsed_date=parsed_date,
        )

    @property
    def has_parsed_date(self) -> bool:
        """Whether ``date`` was successfully parsed."""
        return self.parsed_date != ZERO_DATE
