#!/usr/bin/env python3
"""
images.py
-------------------
Image collection and copying for post directories.

    <post_dir>/
    └── images/
        ├── b.png
        └── a.png

collect() lists ``images/`` without sorting or filtering; a post without
an images directory simply has no images. copy_images() is used by the
output stage to materialize ``<destination>/images`` and stops at the
first file that fails to copy.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Tuple, Union

# --- Local imports ---
from inkpress.core.config import IMAGES_DIRNAME
from inkpress.core.exceptions import CopyError, DirectoryReadError
from inkpress.core.logging_manager import InkpressLogger, safe_logger
from inkpress.utils.fs import copy_file, list_entries

PathLike = Union[str, Path]


def collect(
    post_dir: PathLike, logger: Optional[InkpressLogger] = None
) -> Tuple[Optional[Path], List[str]]:
    """
    Collect the image names of a post.

    Args:
        post_dir: Post directory
        logger: Optional logger

    Returns:
        Tuple of (images_dir, names)
        - images_dir: Path of ``<post_dir>/images``, None if it does not exist
        - names: Every entry of images_dir in listing order (empty if none)

    Raises:
        DirectoryReadError: If images/ exists but cannot be listed
    """
    images_dir = Path(post_dir) / IMAGES_DIRNAME
    try:
        names = list_entries(images_dir)
    except OSError as e:
        safe_logger(logger).log_error(
            e, {"operation": "collect_images", "path": str(images_dir)}
        )
        raise DirectoryReadError(
            f"Cannot read images directory {images_dir}: {e}", path=images_dir
        ) from e

    if names is None:
        return None, []

    safe_logger(logger).log_debug(
        "Collected images", {"path": str(images_dir), "count": len(names)}
    )
    return images_dir, names


def copy_images(
    source: PathLike,
    destination: PathLike,
    logger: Optional[InkpressLogger] = None,
) -> Path:
    """
    Copy a post's images into ``<destination>/images``.

    Args:
        source: The post's images directory (Post.images_dir)
        destination: Output directory of the post
        logger: Optional logger

    Returns:
        Path of the created images directory

    Raises:
        CopyError: If the images directory cannot be created or a file
            cannot be copied; remaining files are not attempted
        DirectoryReadError: If source cannot be listed
    """
    source = Path(source)
    target_dir = Path(destination) / IMAGES_DIRNAME
    log = safe_logger(logger)

    try:
        target_dir.mkdir()
    except OSError as e:
        log.log_error(e, {"operation": "copy_images", "path": str(target_dir)})
        raise CopyError(
            f"Cannot create images directory {target_dir}: {e}", path=target_dir
        ) from e

    try:
        names = list_entries(source)
    except OSError as e:
        log.log_error(e, {"operation": "copy_images", "path": str(source)})
        raise DirectoryReadError(
            f"Cannot read images directory {source}: {e}", path=source
        ) from e
    if names is None:
        raise DirectoryReadError(f"Images directory {source} does not exist", path=source)

    for name in names:
        src = source / name
        dst = target_dir / name
        try:
            copy_file(src, dst)
        except OSError as e:
            log.log_error(e, {"operation": "copy_images", "path": str(src)})
            raise CopyError(f"Cannot copy {src} to {dst}: {e}", path=src) from e

    log.log_operation(
        "images_copied", {"source": str(source), "target": str(target_dir), "count": len(names)}
    )
    return target_dir
