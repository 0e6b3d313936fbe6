#!/usr/bin/env python3
"""
highlight.py
-------------------
Syntax highlighting of rendered code blocks.

Parses the renderer's HTML with BeautifulSoup (html5lib tree builder),
replaces the content of every code element whose class attribute contains
``language-`` with Pygments span markup, and serializes the tree back.

Behaviour worth knowing:
- Matching is a substring match on the whole class attribute
  (``code[class*="language-"]``), so ``my-language-ish`` matches too.
- The ``language-X`` hint is not used; the lexer is guessed from the code
  itself, falling back to GenericCodeLexer.
- A block that fails to highlight keeps its plain text; the others are
  still processed.
- html5lib wraps fragments in a full document; that wrapper is stripped
  from the output.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import logging
from typing import Optional

# --- Third-party imports ---
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag
from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexer import Lexer
from pygments.lexers import guess_lexer
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

# --- Local imports ---
from inkpress.core.exceptions import HTMLParseError, HTMLSerializeError
from inkpress.core.logging_manager import InkpressLogger, safe_logger
from inkpress.utils.lexers import GenericCodeLexer

log = logging.getLogger(__name__)

CODE_SELECTOR = 'code[class*="language-"]'
DOCUMENT_PREFIX = "<html><head></head><body>"
DOCUMENT_SUFFIX = "</body></html>"


def detect_lexer(code: str) -> Lexer:
    """
    Pick a lexer from the code content alone.

    Args:
        code: Plain source text

    Returns:
        The lexer guessed by Pygments, or GenericCodeLexer when nothing
        better than plain text was found
    """
    try:
        lexer = guess_lexer(code, ensurenl=False)
    except ClassNotFound:
        lexer = None
    if lexer is None or isinstance(lexer, TextLexer):
        log.debug("No lexer detected, using generic lexer")
        return GenericCodeLexer(ensurenl=False)
    log.debug("Detected lexer %s", lexer.name)
    return lexer


def highlight_code(code: str) -> str:
    """
    Return span markup for code, without any wrapping element.

    No newline is appended, so an empty block stays empty.
    """
    return pygments_highlight(code, detect_lexer(code), HtmlFormatter(nowrap=True))


def _replace_contents(element: Tag, markup: str) -> None:
    element.clear()
    element.append(BeautifulSoup(markup, "html.parser"))


def strip_document_wrapper(html: str) -> str:
    """Remove the first <html><head></head><body> and </body></html>."""
    return html.replace(DOCUMENT_PREFIX, "", 1).replace(DOCUMENT_SUFFIX, "", 1)


def highlight(html: bytes, logger: Optional[InkpressLogger] = None) -> str:
    """
    Highlight every fenced code element in an HTML fragment.

    Args:
        html: UTF-8 HTML produced by the markdown renderer
        logger: Optional logger

    Returns:
        The fragment with highlighted code, without document wrapper

    Raises:
        HTMLParseError: If html is not UTF-8 or cannot be parsed
        HTMLSerializeError: If the modified tree cannot be serialized
    """
    try:
        soup = BeautifulSoup(html.decode("utf-8"), "html5lib")
    except UnicodeDecodeError as e:
        raise HTMLParseError(f"Rendered HTML is not valid UTF-8: {e}") from e
    except ParserRejectedMarkup as e:
        raise HTMLParseError(f"Cannot parse rendered HTML: {e}") from e

    blocks = soup.select(CODE_SELECTOR)
    for element in blocks:
        code = element.get_text()
        try:
            markup = highlight_code(code)
        except Exception as e:
            # Element keeps its plain text
            safe_logger(logger).log_warning(
                "Highlighting failed, keeping plain text",
                {"class": element.get("class"), "reason": str(e)},
            )
            continue
        _replace_contents(element, markup)

    safe_logger(logger).log_debug("Highlighted code blocks", {"count": len(blocks)})

    try:
        serialized = soup.decode()
    except (RecursionError, TypeError, ValueError) as e:
        raise HTMLSerializeError(f"Cannot serialize highlighted HTML: {e}") from e

    return strip_document_wrapper(serialized)
