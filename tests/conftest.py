"""
conftest.py
-----------
Shared pytest fixtures for inkpress tests.

Provides fixtures for:
- Temporary directories
- Sample post.md contents
- A factory building post directories on disk
"""
import pytest
from pathlib import Path
from tempfile import TemporaryDirectory
from typing import Dict, Optional


# ----- Path Fixtures -----

@pytest.fixture
def tmp_dir():
    """Create a temporary directory for test file operations."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


# ----- Sample Post Content Fixtures -----

@pytest.fixture
def hello_post_content():
    """Well-formed post with a fenced code block."""
    return """---
title: Hello
short: A greeting
date: 2023-05-01
---
# Hi
```code
fmt.Println("x")
```
"""


@pytest.fixture
def minimal_post_content():
    """Post with a header and a single paragraph."""
    return """---
title: Minimal
short: Just text
date: 2024-01-15
---
Only a paragraph.
"""


@pytest.fixture
def unicode_post_content():
    """Post with accents and non-latin text in header and body."""
    return """---
title: Café à Montréal
short: 李明 writes
date: 2024-02-29
---
Testing special characters: é, ñ, ü, 中文
"""


# ----- Post Directory Factory -----

@pytest.fixture
def make_post_dir(tmp_dir):
    """
    Build a post directory under tmp_dir.

    Usage:
        post_dir = make_post_dir("hello", content, images={"a.png": b"..."})
    """

    def _make(
        name: str,
        content: Optional[str] = None,
        images: Optional[Dict[str, bytes]] = None,
    ) -> Path:
        post_dir = tmp_dir / name
        post_dir.mkdir()
        if content is not None:
            (post_dir / "post.md").write_text(content, encoding="utf-8")
        if images is not None:
            images_dir = post_dir / "images"
            images_dir.mkdir()
            for filename, data in images.items():
                (images_dir / filename).write_bytes(data)
        return post_dir

    return _make
