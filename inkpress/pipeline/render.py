#!/usr/bin/env python3
"""
render.py
-------------------
Markdown body to HTML.

Uses markdown-it-py's CommonMark preset with GFM tables and
strikethrough enabled. Fenced code is left as

    <pre><code class="language-go">escaped text</code></pre>

for the highlighter to pick up; no highlighting happens here.

The parser is configured once and only read afterwards, so render() is
safe to call from several threads.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from functools import lru_cache

# --- Third-party imports ---
from markdown_it import MarkdownIt


@lru_cache(maxsize=None)
def get_markdown() -> MarkdownIt:
    """Shared MarkdownIt instance used by render()."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


def render(body: bytes) -> bytes:
    """
    Convert a markdown body to HTML.

    Invalid UTF-8 sequences are replaced rather than rejected, so any
    input renders.

    Args:
        body: Markdown bytes (the rest of post.md after the header)

    Returns:
        UTF-8 encoded HTML fragment

    Examples:
        >>> render(b"# Hi")
        b'<h1>Hi</h1>\\n'
    """
    text = body.decode("utf-8", errors="replace")
    return get_markdown().render(text).encode("utf-8")
