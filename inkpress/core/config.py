#!/usr/bin/env python3
"""
config.py
-------------------
Build configuration and layout constants for inkpress.

A post directory has a fixed layout:

    <post_dir>/
    ├── post.md      # header block + markdown body
    └── images/      # optional, listed and copied verbatim

The pipeline itself takes the date format as an argument and has no
default; BuildConfig is where callers keep that default, along with the
date strictness policy, so it can be stored in a YAML file next to the
posts.

Usage:
    from inkpress.core.config import BuildConfig

    config = BuildConfig.from_yaml(Path("inkpress.yaml"))
    post = assemble_with_config(post_dir, config)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

# --- Third party imports ---
import yaml

# --- Local imports ---
from inkpress.core.exceptions import ConfigError

# ----- Post directory layout -----
POST_FILENAME = "post.md"
IMAGES_DIRNAME = "images"

# ----- Header block -----
HEADER_FENCE = b"---"
MIN_HEADER_BYTES = 3

DEFAULT_DATE_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class BuildConfig:
    """
    Settings shared by every post assembled in one run.

    Attributes:
        date_format: strptime pattern for the header ``date`` field
        strict_dates: Raise on unparseable dates instead of leaving them unset
        log_dir: Directory for log files, or None to disable file logging
    """

    date_format: str = DEFAULT_DATE_FORMAT
    strict_dates: bool = False
    log_dir: Optional[Path] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> BuildConfig:
        """
        Build a config from a plain mapping, rejecting unknown keys.

        Args:
            data: Mapping of field names to values

        Returns:
            BuildConfig with defaults filled in for missing keys

        Raises:
            ConfigError: If a key is unknown or a value has the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        if "date_format" in data:
            if not isinstance(data["date_format"], str) or not data["date_format"]:
                raise ConfigError("date_format must be a non-empty string")
            values["date_format"] = data["date_format"]
        if "strict_dates" in data:
            if not isinstance(data["strict_dates"], bool):
                raise ConfigError("strict_dates must be true or false")
            values["strict_dates"] = data["strict_dates"]
        if data.get("log_dir") is not None:
            values["log_dir"] = Path(data["log_dir"])
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Path) -> BuildConfig:
        """
        Load a config from a YAML file.

        An empty file yields the defaults.

        Raises:
            ConfigError: If the file is unreadable, malformed or not a mapping
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read configuration {path}: {e}", path=path) from e

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e

        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(
                f"Configuration {path} must be a mapping, got {type(data).__name__}",
                path=path,
            )
        return cls.from_dict(data)
