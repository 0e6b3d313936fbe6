#!/usr/bin/env python3
"""
lexers.py
----------------
Language-agnostic Pygments lexer for code whose language is unknown.

Pygments' guess_lexer() often gives up on short snippets or settles for
the plain-text lexer, which emits no markup at all. GenericCodeLexer is
the fallback: it recognizes the constructs shared by most C-like and
scripting languages (strings, comments, numbers, common keywords,
identifiers, punctuation, operators) so every snippet still comes out as
span-wrapped tokens.

Usage:
    from pygments import highlight
    from pygments.formatters import HtmlFormatter
    from inkpress.utils.lexers import GenericCodeLexer

    html = highlight('fmt.Println("x")', GenericCodeLexer(), HtmlFormatter(nowrap=True))
"""
# --- Annotations ---
from __future__ import annotations

# --- Third party imports ---
from pygments.lexer import RegexLexer, words
from pygments.token import (
    Comment,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Text,
    Whitespace,
)

KEYWORDS = (
    "break", "case", "catch", "class", "const", "continue", "def", "default",
    "defer", "do", "elif", "else", "enum", "except", "false", "finally", "fn",
    "for", "func", "function", "go", "if", "import", "in", "interface", "let",
    "match", "new", "nil", "none", "null", "package", "pass", "private",
    "public", "raise", "return", "static", "struct", "switch", "this", "throw",
    "true", "try", "type", "var", "void", "while", "with", "yield",
)


class GenericCodeLexer(RegexLexer):
    """Tokenizer for code of unknown language."""

    name = "Generic"
    aliases = ["generic"]
    filenames = []

    tokens = {
        "root": [
            (r"\s+", Whitespace),
            (r"//.*?$", Comment.Single),
            (r"#.*?$", Comment.Single),
            (r"/\*[\s\S]*?\*/", Comment.Multiline),
            (r'"(\\\\|\\"|[^"\n])*"', String.Double),
            (r"'(\\\\|\\'|[^'\n])*'", String.Single),
            (r"`[^`]*`", String.Backtick),
            (r"0[xX][0-9a-fA-F_]+", Number.Hex),
            (r"\d[\d_]*(\.\d+)?([eE][+-]?\d+)?", Number),
            (words(KEYWORDS, suffix=r"\b"), Keyword),
            (r"[A-Z]\w*", Name.Class),
            (r"[A-Za-z_]\w*", Name),
            (r"[{}()\[\];,.]", Punctuation),
            (r"[-+*/%=<>!&|^~?:@]+", Operator),
            (r".", Text),
        ]
    }
