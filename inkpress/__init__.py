"""
inkpress
========

Assembles a single blog post from its source directory.

A post directory holds ``post.md`` (a ``---`` fenced YAML header followed
by a markdown body) and an optional ``images/`` directory. Assembly turns
it into an immutable Post: parsed header, rendered and syntax-highlighted
HTML, and the list of image names.

Main Components:
    - pipeline: header reader, markdown renderer, highlighter, image
      collector, assembler and the output-stage seam
    - dataclasses: Meta and Post records, publish-date ordering
    - core: exceptions, logging, configuration
    - utils: header, filesystem and lexer helpers

Example Usage:
    >>> from inkpress import assemble, sort_by_date_desc
    >>> posts = [assemble(d, "%Y-%m-%d") for d in post_dirs]
    >>> for post in sort_by_date_desc(posts):
    ...     print(post.meta.date, post.meta.title)
"""

__version__ = "0.1.0"

from inkpress.dataclasses.meta import Meta
from inkpress.dataclasses.post import ByDateDesc, Post, sort_by_date_desc
from inkpress.pipeline.assemble import assemble, assemble_with_config

__all__ = [
    "Meta",
    "Post",
    "ByDateDesc",
    "sort_by_date_desc",
    "assemble",
    "assemble_with_config",
]
