#!/usr/bin/env python3
"""
md.py
-------------------
Markdown header utilities for inkpress.

Provides the line-level pieces of header parsing:
- Fence detection on raw byte lines
- Streaming accumulation of the header block
- YAML loading that keeps scalars exactly as written

The pipeline.header module puts these together and turns failures into
HeaderError subclasses.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import Any, BinaryIO, Tuple

# --- Third party imports ---
import yaml

# --- Local imports ---
from inkpress.core.config import HEADER_FENCE

_NULL_TAG = "tag:yaml.org,2002:null"


class RawScalarLoader(yaml.SafeLoader):
    """
    SafeLoader that only resolves nulls.

    Every other plain scalar loads as the text written: ``title: No`` stays
    ``'No'``, ``short: 1.10`` stays ``'1.10'`` and ``date: 2023-05-01``
    stays a string, so the caller's own date format decides how it is
    parsed.
    """


RawScalarLoader.yaml_implicit_resolvers = {
    first_char: [(tag, regexp) for tag, regexp in resolvers if tag == _NULL_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def is_fence(line: bytes) -> bool:
    """
    Check whether a raw line opens or closes a header block.

    Only the prefix matters: ``----`` and ``--- yaml`` both count.

    Examples:
        >>> is_fence(b"---\\n")
        True
        >>> is_fence(b"title: ---")
        False
    """
    return line.startswith(HEADER_FENCE)


def read_header_block(stream: BinaryIO) -> Tuple[bytes, bool]:
    """
    Accumulate header lines up to the closing fence.

    Must be called after the opening fence was consumed. Reads one line at
    a time, so the stream ends up positioned right after the closing
    fence, at the first byte of the body.

    Args:
        stream: Binary line-readable stream

    Returns:
        Tuple of (header_bytes, closed)
        - header_bytes: Lines between the fences, verbatim
        - closed: False if the stream ended before a closing fence
    """
    chunks = []
    while True:
        line = stream.readline()
        if not line:
            return b"".join(chunks), False
        if is_fence(line):
            return b"".join(chunks), True
        chunks.append(line)


def load_header_yaml(text: str) -> Any:
    """
    Load header text with RawScalarLoader.

    Raises:
        yaml.YAMLError: If the text is not valid YAML
    """
    return yaml.load(text, Loader=RawScalarLoader)
