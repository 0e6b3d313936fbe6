#!/usr/bin/env python3
"""
post.py
-------------------
Dataclass for an assembled post and its publish-date ordering.

A Post is built once from a post directory by the assembler and is
read-only afterwards. Listings consume collections of posts newest first;
ByDateDesc exposes the length / swap / less primitives of that order for
generic sorting code, and sort_by_date_desc() is the shortcut for
everything else.

Equal dates are never tie-broken explicitly: both sorts are stable, so
posts sharing a date keep their input order. Dates without a timezone
(including the unset ZERO_DATE) compare as UTC, so formats with %z can
be mixed with unparsed dates.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple

# --- Local imports ---
from inkpress.dataclasses.meta import Meta


@dataclass(frozen=True)
class Post:
    """
    A fully ingested post directory.

    Attributes:
        name: Base name of the post directory
        html: Rendered, highlighted body (UTF-8), without document wrapper
        meta: Parsed header
        images_dir: Path of the images directory, None when absent
        images: Entry names of images_dir in listing order
    """

    name: str
    html: bytes
    meta: Meta
    images_dir: Optional[Path] = None
    images: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def date(self) -> datetime:
        """Sort key of the post: parsed_date, naive values taken as UTC."""
        parsed = self.meta.parsed_date
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)


def sort_by_date_desc(posts: Iterable[Post]) -> List[Post]:
    """
    Return posts ordered most recent first.

    Args:
        posts: Posts to order (left untouched)

    Returns:
        New list, stable for equal dates

    Examples:
        >>> [p.meta.date for p in sort_by_date_desc(posts)]
        ['2023-06-01', '2023-01-01', '2022-12-01']
    """
    return sorted(posts, key=lambda post: post.date, reverse=True)


class ByDateDesc:
    """
    Sortable view over a list of posts, newest first.

    Wraps the list in place: swap() and sort() reorder the list that was
    passed in.
    """

    def __init__(self, posts: List[Post]) -> None:
        self.posts = posts

    def __len__(self) -> int:
        return len(self.posts)

    def __iter__(self) -> Iterator[Post]:
        return iter(self.posts)

    def __getitem__(self, index: int) -> Post:
        return self.posts[index]

    def swap(self, i: int, j: int) -> None:
        self.posts[i], self.posts[j] = self.posts[j], self.posts[i]

    def less(self, i: int, j: int) -> bool:
        """True when post i was published strictly after post j."""
        return self.posts[i].date > self.posts[j].date

    def sort(self) -> None:
        """Stable in-place sort, most recent first."""
        self.posts.sort(key=lambda post: post.date, reverse=True)
