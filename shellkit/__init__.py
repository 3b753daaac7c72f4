"""Building blocks for a small interactive shell: text and byte helpers, printf formatting, line reading, signal state, syntax-tree types and a parser."""

__version__ = "0.1.0"

__all__ = [
    "ast",
    "chars",
    "linereader",
    "memory",
    "output",
    "parser",
    "printf",
    "signaling",
    "strings",
]