#!/usr/bin/env python3
"""
test_utils.py
-------------
Tests for inkpress.utils: header helpers, filesystem helpers, lexers.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import io

# --- Third-party imports ---
import pytest
import yaml
from pygments.token import Comment, Keyword, Name, Number, String

# --- Local imports ---
from inkpress.utils.fs import copy_file, list_entries
from inkpress.utils.lexers import GenericCodeLexer
from inkpress.utils.md import is_fence, load_header_yaml, read_header_block


class TestIsFence:
    @pytest.mark.parametrize("line", [b"---\n", b"---", b"----\n", b"--- yaml\n"])
    def test_fences(self, line):
        assert is_fence(line)

    @pytest.mark.parametrize("line", [b"", b"\n", b" ---\n", b"--\n", b"title: ---\n"])
    def test_not_fences(self, line):
        assert not is_fence(line)


class TestReadHeaderBlock:
    def test_closed_block(self):
        stream = io.BytesIO(b"title: T\n---\nbody\n")
        assert read_header_block(stream) == (b"title: T\n", True)
        assert stream.read() == b"body\n"

    def test_unclosed_block(self):
        stream = io.BytesIO(b"title: T\nshort: S")
        assert read_header_block(stream) == (b"title: T\nshort: S", False)

    def test_empty_stream(self):
        assert read_header_block(io.BytesIO(b"")) == (b"", False)


class TestLoadHeaderYaml:
    def test_dates_stay_strings(self):
        data = load_header_yaml("date: 2023-05-01\nupdated: 2023-05-01 10:00:00\n")
        assert data == {"date": "2023-05-01", "updated": "2023-05-01 10:00:00"}

    def test_scalars_stay_text(self):
        data = load_header_yaml("n: 3\nratio: 1.10\nflag: No\nnothing: null\n")
        assert data == {"n": "3", "ratio": "1.10", "flag": "No", "nothing": None}

    def test_quoted_scalars_unchanged(self):
        assert load_header_yaml("title: 'No'\n") == {"title": "No"}

    def test_safe_loader_rejects_python_tags(self):
        with pytest.raises(yaml.YAMLError):
            load_header_yaml("x: !!python/object/apply:os.system ['true']\n")

    def test_global_safe_loader_untouched(self):
        """Other YAML users still get dates resolved."""
        assert not isinstance(yaml.safe_load("d: 2023-05-01")["d"], str)


class TestFs:
    def test_list_entries_missing(self, tmp_dir):
        assert list_entries(tmp_dir / "missing") is None

    def test_list_entries_not_a_directory(self, tmp_dir):
        path = tmp_dir / "file"
        path.write_bytes(b"")
        with pytest.raises(NotADirectoryError):
            list_entries(path)

    def test_list_entries_includes_everything(self, tmp_dir):
        (tmp_dir / "a.png").write_bytes(b"")
        (tmp_dir / ".hidden").write_bytes(b"")
        (tmp_dir / "sub").mkdir()
        assert sorted(list_entries(tmp_dir)) == [".hidden", "a.png", "sub"]

    def test_copy_file(self, tmp_dir):
        src = tmp_dir / "src.bin"
        src.write_bytes(bytes(range(256)))
        copy_file(src, tmp_dir / "dst.bin")
        assert (tmp_dir / "dst.bin").read_bytes() == bytes(range(256))


class TestGenericCodeLexer:
    """Token classes produced for unknown-language code."""

    def tokens(self, code):
        return [(t, v) for t, v in GenericCodeLexer().get_tokens(code) if v.strip()]

    def test_go_like_call(self):
        tokens = self.tokens('fmt.Println("x")')
        assert (Name, "fmt") in tokens
        assert (Name.Class, "Println") in tokens
        assert (String.Double, '"x"') in tokens

    def test_keywords_and_numbers(self):
        tokens = self.tokens("return 42")
        assert (Keyword, "return") in tokens
        assert (Number, "42") in tokens

    def test_comments(self):
        tokens = self.tokens("x // note\n/* block */")
        assert (Comment.Single, "// note") in tokens
        assert (Comment.Multiline, "/* block */") in tokens

    def test_keyword_prefix_is_a_name(self):
        assert (Name, "format") in self.tokens("format")
