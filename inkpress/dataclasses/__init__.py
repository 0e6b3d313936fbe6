"""
Record types for assembled posts.

- meta: Meta, the parsed header block
- post: Post and its newest-first ordering
"""
from .meta import ZERO_DATE, Meta
from .post import ByDateDesc, Post, sort_by_date_desc

__all__ = ["ZERO_DATE", "Meta", "Post", "ByDateDesc", "sort_by_date_desc"]
