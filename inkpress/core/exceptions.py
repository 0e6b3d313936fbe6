#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for the inkpress project.

This module defines a hierarchy of exceptions used throughout the project
to handle specific error conditions in the post pipeline.

Exception Hierarchy:
    Exception (built-in)
    └── InkpressError - Base for all inkpress errors
        ├── PostIOError - File open/read failures
        │   ├── DirectoryReadError - Images directory unreadable
        │   └── CopyError - Asset copy failures
        ├── HeaderError - Base for metadata header failures
        │   ├── MalformedHeaderError - Missing opening fence
        │   └── InvalidMetadataError - Undecodable or too short header
        │       └── DateParseError - Unparseable date (strict mode only)
        ├── HighlightError - Base for syntax highlighting failures
        │   ├── HTMLParseError - Rendered HTML could not be parsed
        │   └── HTMLSerializeError - Highlighted tree could not be serialized
        ├── GenerationError - Output directory failures
        └── ConfigError - Invalid or unreadable configuration

Usage:
    from inkpress.core.exceptions import HeaderError, PostIOError

    try:
        post = assemble(post_dir, "%Y-%m-%d")
    except HeaderError as e:
        logger.error(f"Bad header in {e.path}: {e}")
    except PostIOError as e:
        logger.error(f"Cannot read post: {e}")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Union


class InkpressError(Exception):
    """
    Base exception for all inkpress errors.

    Every error optionally carries the filesystem path it relates to, so
    callers orchestrating many posts can report which one failed.

    Attributes:
        message: Error description
        path: Path the failed operation was acting on, if any

    Examples:
        >>> raise InkpressError("Something went wrong")
        >>> raise InkpressError("Cannot open file", path=Path("posts/a/post.md"))
    """

    def __init__(
        self, message: str = "", path: Optional[Union[str, Path]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path = Path(path) if path is not None else None


class PostIOError(InkpressError):
    """
    Exception for file open and read failures.

    Raised when the post source document cannot be opened or read.

    Examples:
        >>> raise PostIOError("Cannot open posts/a/post.md: No such file")
    """

    pass


class DirectoryReadError(PostIOError):
    """
    Exception for an images directory that exists but cannot be listed.

    A missing images directory is not an error; this is only raised for
    other failures such as permission issues or a file in its place.

    Examples:
        >>> raise DirectoryReadError("Cannot list posts/a/images: Permission denied")
    """

    pass


class CopyError(PostIOError):
    """
    Exception for asset copy failures.

    Raised by copy_images when the destination directory cannot be
    created or a single file fails to copy. Copying stops at the first
    failing entry.

    Examples:
        >>> raise CopyError("Cannot copy a.png", path=Path("out/a/images/a.png"))
    """

    pass


class HeaderError(InkpressError):
    """
    Base exception for metadata header failures.

    Catch this to handle any header problem, or catch the subclasses for
    more granular handling.
    """

    pass


class MalformedHeaderError(HeaderError):
    """
    Exception for a post whose first line is not the ``---`` fence.

    Examples:
        >>> raise MalformedHeaderError('Cannot find opening "---" fence')
    """

    pass


class InvalidMetadataError(HeaderError):
    """
    Exception for header content that cannot be decoded.

    Raised when:
    - The header holds fewer than 3 bytes
    - The header is not valid UTF-8
    - The YAML is malformed or is not a mapping

    Examples:
        >>> raise InvalidMetadataError("Invalid YAML header: mapping values are not allowed here")
    """

    pass


class DateParseError(InvalidMetadataError):
    """
    Exception for an unparseable ``date`` field.

    Only raised when strict date parsing is enabled; lenient parsing logs
    a warning and leaves the parsed date unset instead.

    Examples:
        >>> raise DateParseError("Cannot parse date 'May 1st' with format '%Y-%m-%d'")
    """

    pass


class HighlightError(InkpressError):
    """Base exception for syntax highlighting failures."""

    pass


class HTMLParseError(HighlightError):
    """Exception for rendered HTML that cannot be parsed into a tree."""

    pass


class HTMLSerializeError(HighlightError):
    """Exception for a highlighted tree that cannot be serialized back."""

    pass


class GenerationError(InkpressError):
    """
    Exception for output stage failures.

    Raised when the destination directory for a post cannot be created,
    for instance because it already exists.

    Examples:
        >>> raise GenerationError("Cannot create directory out/hello", path=Path("out/hello"))
    """

    pass


class ConfigError(InkpressError):
    """
    Exception for configuration loading failures.

    Examples:
        >>> raise ConfigError("Unknown configuration keys: dateformat")
    """

    pass
