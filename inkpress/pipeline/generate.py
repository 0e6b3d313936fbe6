#!/usr/bin/env python3
"""
generate.py
-------------------
Hand an assembled Post to the output stage.

The page shell (index template, site layout) is owned by the caller and
reaches this module through the IndexWriter protocol. generate_post()
only prepares ``<destination>/<post.name>``, copies the images next to
it and asks the writer to produce the page:

    <destination>/
    └── <post.name>/
        ├── index.html   # written by the IndexWriter
        └── images/      # copied from the post directory
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Protocol, Union

# --- Local imports ---
from inkpress.core.exceptions import GenerationError
from inkpress.core.logging_manager import InkpressLogger, safe_logger
from inkpress.dataclasses.post import Post
from inkpress.pipeline.images import copy_images


class IndexWriter(Protocol):
    """Writes the final page of a post into its output directory."""

    def write_index_html(self, path: Path, title: str, short: str, html: str) -> None:
        ...


def generate_post(
    post: Post,
    destination: Union[str, Path],
    writer: IndexWriter,
    logger: Optional[InkpressLogger] = None,
) -> Path:
    """
    Materialize a post under destination.

    Args:
        post: Assembled post
        destination: Output root; the post goes into ``destination/post.name``
        writer: Page writer supplied by the caller
        logger: Optional logger

    Returns:
        The post's output directory

    Raises:
        GenerationError: If the output directory cannot be created
            (including when it already exists)
        CopyError: If an image cannot be copied
    """
    log = safe_logger(logger)
    log.log_info("Generating post", {"title": post.meta.title})

    static_path = Path(destination) / post.name
    try:
        static_path.mkdir()
    except OSError as e:
        log.log_error(e, {"operation": "generate_post", "path": str(static_path)})
        raise GenerationError(
            f"Cannot create directory {static_path}: {e}", path=static_path
        ) from e

    if post.images_dir is not None:
        copy_images(post.images_dir, static_path, logger)

    writer.write_index_html(
        static_path, post.meta.title, post.meta.short, post.html.decode("utf-8")
    )
    log.log_info("Finished generating post", {"title": post.meta.title})
    return static_path
