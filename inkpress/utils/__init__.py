"""
Utilities package for inkpress.

- md: Header fence detection, streaming header reads, YAML loading
- fs: Directory listing and file copying
- lexers: Generic Pygments lexer for code of unknown language

Import specific modules:
    from inkpress.utils import md, fs, lexers
"""
