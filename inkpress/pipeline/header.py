#!/usr/bin/env python3
"""
header.py
-------------------
Metadata header reader for post.md.

Consumes the ``---`` fenced YAML block at the top of an open post stream
and leaves the stream positioned at the first byte of the markdown body:

    ---
    title: Hello
    short: A greeting
    date: 2023-05-01
    ---
    # Body starts here

Policies:
- The first line must start with ``---`` (MalformedHeaderError otherwise).
- A missing closing fence is tolerated: whatever was read before the end
  of the stream is the header.
- Fewer than 3 header bytes, invalid UTF-8, bad YAML or a non-mapping
  document raise InvalidMetadataError.
- An unparseable date is logged and left unset unless strict_dates is on,
  in which case DateParseError is raised.

Programmatic API:
    from inkpress.pipeline.header import parse_header

    with open(post_md, "rb") as stream:
        meta = parse_header(stream, "%Y-%m-%d")
        body = stream.read()
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import replace
from datetime import datetime
from typing import BinaryIO, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from inkpress.core.config import MIN_HEADER_BYTES
from inkpress.core.exceptions import (
    DateParseError,
    InvalidMetadataError,
    MalformedHeaderError,
)
from inkpress.core.logging_manager import InkpressLogger, safe_logger
from inkpress.dataclasses.meta import ZERO_DATE, Meta
from inkpress.utils.md import is_fence, load_header_yaml, read_header_block


def parse_header(
    stream: BinaryIO,
    date_format: str,
    strict_dates: bool = False,
    logger: Optional[InkpressLogger] = None,
) -> Meta:
    """
    Parse the header block at the current position of stream.

    Args:
        stream: Binary stream opened on post.md, positioned at its start
        date_format: strptime pattern for the ``date`` field
        strict_dates: Raise DateParseError instead of leaving the date unset
        logger: Optional logger

    Returns:
        Parsed Meta

    Raises:
        MalformedHeaderError: If the first line is not a ``---`` fence
        InvalidMetadataError: If the header is too short or cannot be decoded
        DateParseError: If strict_dates is set and the date does not parse
    """
    log = safe_logger(logger)

    first_line = stream.readline()
    if not is_fence(first_line):
        raise MalformedHeaderError('Cannot find opening "---" fence')

    raw, closed = read_header_block(stream)
    if not closed:
        log.log_debug("Header has no closing fence, using content up to end of stream")

    if len(raw) < MIN_HEADER_BYTES:
        raise InvalidMetadataError(
            f"Header is empty or too short ({len(raw)} bytes)"
        )

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidMetadataError(f"Header is not valid UTF-8: {e}") from e

    try:
        data = load_header_yaml(text)
    except yaml.YAMLError as e:
        raise InvalidMetadataError(f"Invalid YAML header: {e}") from e

    if not isinstance(data, dict):
        raise InvalidMetadataError(
            f"Header must be a mapping, got {type(data).__name__}"
        )

    meta = Meta.from_mapping(data)
    return replace(
        meta, parsed_date=_parse_date(meta.date, date_format, strict_dates, logger)
    )


def _parse_date(
    value: str,
    date_format: str,
    strict: bool,
    logger: Optional[InkpressLogger],
) -> datetime:
    """Parse value with date_format, ZERO_DATE on failure unless strict."""
    try:
        return datetime.strptime(value, date_format)
    except ValueError as e:
        if strict:
            raise DateParseError(
                f"Cannot parse date {value!r} with format {date_format!r}: {e}"
            ) from e
        safe_logger(logger).log_warning(
            "Unparseable date left unset",
            {"date": value, "format": date_format, "reason": str(e)},
        )
        return ZERO_DATE
