#!/usr/bin/env python3
"""
logging_manager.py
--------------------
Centralized logging for inkpress operations.

Each component (assemble, generate, ...) gets its own rotating log file
plus a shared errors.log for quick scanning. Warnings and above are also
echoed to the console.

Pipeline functions accept ``logger: Optional[InkpressLogger] = None`` and
call through safe_logger(), so a caller that does not want log files can
simply pass nothing.

Usage:
    from inkpress.core.logging_manager import setup_logger

    logger = setup_logger(Path("logs"), "assemble")
    post = assemble(post_dir, "%Y-%m-%d", logger=logger)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import json
import logging
import traceback
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

FILE_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [%(funcName)s:%(lineno)d] - %(message)s"
)
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class InkpressLogger:
    """
    Component logger with rotating files.

    Attributes:
        log_dir: Directory for log files
        component_name: Name of the component using this logger
        main_logger: Receives every message for the component
        error_logger: Receives errors only (errors.log)
    """

    def __init__(
        self,
        log_dir: Path,
        component_name: str = "inkpress",
        max_bytes: int = 5 * 1024 * 1024,
        backup_count: int = 3,
    ) -> None:
        """
        Initialize the logger and its handlers.

        Args:
            log_dir: Directory for log files (created if missing)
            component_name: Logger namespace and log file stem
            max_bytes: Maximum log file size before rotation (default: 5MB)
            backup_count: Number of rotated files to keep (default: 3)
        """
        self.log_dir = Path(log_dir)
        self.component_name = component_name
        self.max_bytes = max_bytes
        self.backup_count = backup_count
        self._setup_loggers()

    def _setup_loggers(self) -> None:
        """Attach file and console handlers to fresh component loggers."""
        self.log_dir.mkdir(parents=True, exist_ok=True)

        self.main_logger = self._fresh_logger("operations", logging.DEBUG)
        self.error_logger = self._fresh_logger("errors", logging.ERROR)

        self.main_logger.addHandler(
            self._file_handler(self.log_dir / f"{self.component_name}.log", logging.DEBUG)
        )
        self.error_logger.addHandler(
            self._file_handler(self.log_dir / "errors.log", logging.ERROR)
        )

        console = logging.StreamHandler()
        console.setLevel(logging.WARNING)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self.main_logger.addHandler(console)

    def _fresh_logger(self, suffix: str, level: int) -> logging.Logger:
        logger = logging.getLogger(f"{self.component_name}.{suffix}")
        logger.setLevel(level)
        # Only this logger's handlers are reset, never the root logger
        logger.handlers = []
        return logger

    def _file_handler(self, file_path: Path, level: int) -> RotatingFileHandler:
        handler = RotatingFileHandler(
            file_path,
            maxBytes=self.max_bytes,
            backupCount=self.backup_count,
            encoding="utf-8",
        )
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        return handler

    def close(self) -> None:
        """Flush, close and detach every handler owned by this logger."""
        for logger in (self.main_logger, self.error_logger):
            for handler in list(logger.handlers):
                handler.close()
                logger.removeHandler(handler)

    def _emit(
        self,
        level: int,
        label: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        if details:
            message = f"{message}: {json.dumps(details, default=str)}"
        self.main_logger.log(level, f"{label} - {message}")

    def log_operation(
        self, operation: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log a completed pipeline operation at info level.

        Args:
            operation: Name of the operation (e.g. 'post_assembled')
            details: Optional operation details, serialized as JSON
        """
        self._emit(logging.INFO, "OPERATION", operation, details or {})

    def log_error(
        self, error: Exception, context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log an error with context and traceback to errors.log.

        Args:
            error: Exception that occurred
            context: Optional context (operation, path, ...)
        """
        self.error_logger.error(f"ERROR - {type(error).__name__}: {error}")
        if context:
            context_str = ", ".join(f"{k}={v}" for k, v in context.items())
            self.error_logger.error(f"Context: {context_str}")
        self.error_logger.error(f"Traceback:\n{traceback.format_exc()}")

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log debug information."""
        self._emit(logging.DEBUG, "DEBUG", message, details)

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        """Log general information."""
        self._emit(logging.INFO, "INFO", message, details)

    def log_warning(
        self, message: str, details: Optional[Dict[str, Any]] = None
    ) -> None:
        """Log a warning; also shown on the console."""
        self._emit(logging.WARNING, "WARNING", message, details)


class NullLogger:
    """
    Null Object logger with the InkpressLogger interface.

    Every method is a no-op, so pipeline code can call logger methods
    unconditionally.
    """

    def log_operation(self, operation: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_error(self, error: Exception, context: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_debug(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_info(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass

    def log_warning(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        pass


_null_logger = NullLogger()


def safe_logger(logger: Optional[InkpressLogger]) -> InkpressLogger:
    """
    Return the provided logger, or a shared NullLogger if None.

    Args:
        logger: InkpressLogger instance or None

    Returns:
        The provided logger or the NullLogger singleton
    """
    return logger if logger is not None else _null_logger  # type: ignore[return-value]


def setup_logger(log_dir: Path, component_name: str) -> InkpressLogger:
    """
    Create an InkpressLogger writing into log_dir.

    Args:
        log_dir: Base log directory
        component_name: Component identifier (e.g., 'assemble', 'generate')

    Returns:
        Configured InkpressLogger instance
    """
    return InkpressLogger(Path(log_dir), component_name)
