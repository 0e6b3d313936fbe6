#!/usr/bin/env python3
"""
test_highlight.py
-----------------
Tests for code block highlighting.

Covers element selection (substring class matching), lexer detection
from content only, failure isolation per block, wrapper stripping and
parse errors.
"""
# --- Annotations ---
from __future__ import annotations

# --- Third-party imports ---
import pytest
from pygments.util import ClassNotFound

# --- Local imports ---
from inkpress.core.exceptions import HighlightError, HTMLParseError
import inkpress.pipeline.highlight as highlight_module
from inkpress.pipeline.highlight import (
    DOCUMENT_PREFIX,
    DOCUMENT_SUFFIX,
    detect_lexer,
    highlight,
    highlight_code,
    strip_document_wrapper,
)
from inkpress.utils.lexers import GenericCodeLexer

FAKE_MARKUP = '<span class="fake">HL</span>'


@pytest.fixture
def fake_highlighter(monkeypatch):
    """Replace the Pygments call with a marker and record inputs."""
    calls = []

    def _fake(code: str) -> str:
        calls.append(code)
        return FAKE_MARKUP

    monkeypatch.setattr(highlight_module, "highlight_code", _fake)
    return calls


# ==================== Selection ====================

class TestSelection:
    """Which code elements are highlighted."""

    def test_language_class_matched(self, fake_highlighter):
        html = b'<pre><code class="language-go">x := 1\n</code></pre>\n'
        out = highlight(html)
        assert out == f'<pre><code class="language-go">{FAKE_MARKUP}</code></pre>\n'
        assert fake_highlighter == ["x := 1\n"]

    def test_code_without_class_untouched(self, fake_highlighter):
        html = b"<pre><code>plain\n</code></pre>\n"
        assert highlight(html) == "<pre><code>plain\n</code></pre>\n"
        assert fake_highlighter == []

    def test_inline_code_without_class_untouched(self, fake_highlighter):
        html = b"<p>use <code>ls</code></p>\n"
        assert highlight(html) == "<p>use <code>ls</code></p>\n"

    def test_substring_class_match(self, fake_highlighter):
        """Matching is a substring match on the class attribute."""
        html = b'<code class="my-language-ish">x</code>'
        assert FAKE_MARKUP in highlight(html)

    def test_language_token_among_other_classes(self, fake_highlighter):
        html = b'<code class="block language-py">x</code>'
        assert FAKE_MARKUP in highlight(html)

    def test_non_code_element_untouched(self, fake_highlighter):
        html = b'<div class="language-go">x</div>'
        assert highlight(html) == '<div class="language-go">x</div>'

    def test_every_block_processed(self, fake_highlighter):
        html = (
            b'<pre><code class="language-a">one\n</code></pre>\n'
            b'<pre><code class="language-b">two\n</code></pre>\n'
        )
        out = highlight(html)
        assert out.count(FAKE_MARKUP) == 2
        assert fake_highlighter == ["one\n", "two\n"]

    def test_nested_markup_flattened_to_text(self, fake_highlighter):
        """The highlighter receives plain text, not inner markup."""
        html = b'<code class="language-x"><b>bold</b> &amp; more</code>'
        highlight(html)
        assert fake_highlighter == ["bold & more"]


# ==================== Lexer Detection ====================

class TestLexerDetection:
    """The lexer depends on the code, never on the class hint."""

    def test_language_hint_ignored(self):
        code = b'print(&quot;hello&quot;)\n'
        as_go = highlight(b'<code class="language-go">' + code + b"</code>")
        as_rb = highlight(b'<code class="language-ruby">' + code + b"</code>")
        assert as_go.split(">", 1)[1] == as_rb.split(">", 1)[1]

    def test_python_detected_from_shebang(self):
        lexer = detect_lexer("#!/usr/bin/env python\nprint('x')\n")
        assert "python" in lexer.name.lower()

    def test_fallback_when_nothing_matches(self, monkeypatch):
        def _raise(code, **options):
            raise ClassNotFound("no lexer")

        monkeypatch.setattr(highlight_module, "guess_lexer", _raise)
        assert isinstance(detect_lexer("anything"), GenericCodeLexer)

    def test_fallback_on_plain_text_guess(self, monkeypatch):
        from pygments.lexers.special import TextLexer

        monkeypatch.setattr(highlight_module, "guess_lexer", lambda code, **options: TextLexer())
        assert isinstance(detect_lexer("anything"), GenericCodeLexer)

    def test_empty_code_stays_empty(self):
        assert highlight_code("") == ""

    def test_empty_block_gets_no_newline(self):
        out = highlight(b'<pre><code class="language-py"></code></pre>')
        assert out == '<pre><code class="language-py"></code></pre>'

    def test_highlight_code_emits_spans(self):
        markup = highlight_code("#!/usr/bin/env python\nprint('x')\n")
        assert "<span" in markup
        assert "<pre" not in markup
        assert "<div" not in markup


# ==================== Failures ====================

class TestFailures:
    """Per-block failures are isolated; parse failures are fatal."""

    def test_failed_block_keeps_plain_text(self, monkeypatch):
        def _flaky(code: str) -> str:
            if code == "bad":
                raise ValueError("boom")
            return FAKE_MARKUP

        monkeypatch.setattr(highlight_module, "highlight_code", _flaky)
        html = b'<code class="language-a">bad</code><code class="language-b">good</code>'
        out = highlight(html)
        assert '<code class="language-a">bad</code>' in out
        assert f'<code class="language-b">{FAKE_MARKUP}</code>' in out

    def test_invalid_utf8_is_parse_error(self):
        with pytest.raises(HTMLParseError):
            highlight(b"<p>\xff\xfe</p>")

    def test_parse_error_is_highlight_error(self):
        with pytest.raises(HighlightError):
            highlight(b"\xc3\x28")


# ==================== Wrapper Stripping ====================

class TestDocumentWrapper:
    """The parser's document wrapper never reaches the output."""

    def test_wrapper_removed(self):
        out = highlight(b"<h1>Hi</h1>\n")
        assert out == "<h1>Hi</h1>\n"
        assert DOCUMENT_PREFIX not in out
        assert DOCUMENT_SUFFIX not in out

    def test_empty_input(self):
        assert highlight(b"") == ""

    def test_strip_only_first_occurrence(self):
        doubled = DOCUMENT_PREFIX + "x" + DOCUMENT_PREFIX + DOCUMENT_SUFFIX
        assert strip_document_wrapper(doubled) == "x" + DOCUMENT_PREFIX

    def test_deterministic(self):
        html = b'<h1>Hi</h1>\n<pre><code class="language-code">fmt.Println(&quot;x&quot;)\n</code></pre>\n'
        assert highlight(html) == highlight(html)
