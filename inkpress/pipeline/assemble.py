#!/usr/bin/env python3
"""
assemble.py
-------------------
Build a Post from a post directory.

    <post_dir>/post.md ──► parse_header ──► Meta
                     └──► (rest of stream) ──► render ──► highlight ──► html
    <post_dir>/images/ ──► collect ──► images_dir, images

post.md is opened once and read as a single stream: the header reader
consumes the fenced block line by line and the renderer receives only
what follows. Assembly is all-or-nothing; any failure raises and no
partial Post is returned.

Nothing here holds state between calls, so callers may assemble several
directories in parallel.

Programmatic API:
    from inkpress.pipeline.assemble import assemble

    post = assemble(Path("posts/hello"), "%Y-%m-%d")
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Union

# --- Local imports ---
from inkpress.core.config import POST_FILENAME, BuildConfig
from inkpress.core.exceptions import HeaderError, HighlightError, PostIOError
from inkpress.core.logging_manager import InkpressLogger, safe_logger, setup_logger
from inkpress.dataclasses.post import Post
from inkpress.pipeline.header import parse_header
from inkpress.pipeline.highlight import highlight
from inkpress.pipeline.images import collect
from inkpress.pipeline.render import render


def assemble(
    post_dir: Union[str, Path],
    date_format: str,
    strict_dates: bool = False,
    logger: Optional[InkpressLogger] = None,
) -> Post:
    """
    Assemble one post directory into a Post.

    Args:
        post_dir: Directory containing post.md and optionally images/
        date_format: strptime pattern for the header date
        strict_dates: Fail on unparseable dates instead of leaving them unset
        logger: Optional logger

    Returns:
        Fully populated Post

    Raises:
        PostIOError: If post.md cannot be opened or read
        HeaderError: If the header is malformed or invalid (path included)
        HighlightError: If the rendered HTML cannot be processed
        DirectoryReadError: If images/ exists but cannot be listed
    """
    post_dir = Path(post_dir)
    source = post_dir / POST_FILENAME
    log = safe_logger(logger)
    log.log_debug("Assembling post", {"path": str(post_dir)})

    try:
        stream = open(source, "rb")
    except OSError as e:
        log.log_error(e, {"operation": "open_post", "path": str(source)})
        raise PostIOError(f"Cannot open {source}: {e}", path=source) from e

    with stream:
        try:
            meta = parse_header(stream, date_format, strict_dates, logger)
        except HeaderError as e:
            log.log_error(e, {"operation": "parse_header", "path": str(source)})
            raise type(e)(f"Error parsing header in {source}: {e}", path=source) from e

        try:
            body = stream.read()
        except OSError as e:
            log.log_error(e, {"operation": "read_body", "path": str(source)})
            raise PostIOError(f"Cannot read body of {source}: {e}", path=source) from e

    try:
        html = highlight(render(body), logger)
    except HighlightError as e:
        log.log_error(e, {"operation": "highlight", "path": str(source)})
        raise type(e)(
            f"Error during syntax highlighting of {source}: {e}", path=source
        ) from e

    images_dir, images = collect(post_dir, logger)

    post = Post(
        name=post_dir.resolve().name,
        html=html.encode("utf-8"),
        meta=meta,
        images_dir=images_dir,
        images=tuple(images),
    )
    log.log_operation(
        "post_assembled",
        {"name": post.name, "title": meta.title, "images": len(post.images)},
    )
    return post


def assemble_with_config(
    post_dir: Union[str, Path],
    config: BuildConfig,
    logger: Optional[InkpressLogger] = None,
) -> Post:
    """
    Assemble post_dir using the settings of config.

    Without an explicit logger, a config with log_dir set gets a logger
    writing assemble.log and errors.log there for the duration of the call.
    """
    if logger is not None or config.log_dir is None:
        return assemble(post_dir, config.date_format, config.strict_dates, logger)

    own_logger = setup_logger(config.log_dir, "assemble")
    try:
        return assemble(
            post_dir, config.date_format, config.strict_dates, own_logger
        )
    finally:
        own_logger.close()
