# shellkit

Building blocks for a small POSIX-style interactive shell. The package is
pure Python and has no runtime dependencies.

## Modules

- `shellkit.chars`: character classification and integer conversion.
  `atoi` parses a leading decimal integer the C way. It skips whitespace,
  accepts one sign and wraps to 32 bits. `itoa` gives the decimal text of a
  32-bit integer. The classifiers `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii` and `is_print` and the converters `to_upper` and `to_lower`
  take a one-character string or an int.
- `shellkit.memory`: byte-buffer operations on `bytearray` and other byte
  sequences. These are `memset`, `bzero`, `memcpy` and `memchr`, which
  returns an index or `None`. `memcmp` compares bytes as unsigned values.
  `memmove` copies between offsets in one buffer and handles overlap. Counts
  or regions that fall outside a buffer raise `ValueError`.
- `shellkit.strings`: string helpers.
  - `split` drops empty pieces. `strict_split` keeps them, and `None` gives
    `None`.
  - `strjoin` and `sepjoin` join strings.
  - `strchr` and `strrchr` return indexes. Searching for `"\0"` finds the
    end of the text.
  - `strncmp` and `strnstr` compare and search within a limit.
  - `strtrim`, `substr` and `strmapi` trim, slice and map text.
- `shellkit.output`: writes to raw file descriptors and returns the number
  of bytes written. The functions are `put_char_fd`, `put_str_fd`,
  `put_endl_fd` and `put_nbr_fd`.
- `shellkit.printf`: a small printf.
  - It supports the conversions `c s p d i u x X %`, the flags
    `# - 0 + space`, width and precision, and `*` for either.
  - `format_string` returns the text. It raises `ValueError` for an unknown
    or incomplete conversion, and `TypeError` when the arguments run out.
  - `printf` writes to standard output and returns the byte count. It
    returns `-1` for a missing format or an invalid conversion.
  - `parse_spec` and `render` expose the individual steps, with
    `ConversionSpec` as the parsed form.
- `shellkit.linereader`: line-at-a-time reading from a file descriptor.
  - `LineReader(fd, buffer_size=64)` reads chunks. Its `read_line()`
    returns a line with its newline, or `None` at the end, and the object
    is iterable.
  - `get_next_line(fd)` keeps one reader per descriptor between calls.
- `shellkit.signaling`: SIGINT/SIGQUIT handling for the prompt, for
  running commands and for here-documents.
  - `SignalController` installs the handlers with `set_prompt_signals`,
    `set_execution_signals`, `set_heredoc_signals` and
    `set_default_signals`. It records the last signal in `status`, a
    `SignalStatus`.
  - `write_to_tty` writes to `/dev/tty` and ignores failures.
  - Installing handlers has to happen in the main thread.
- `shellkit.ast`: token and syntax-tree types. These are `TokenType`,
  `Token`, `NodeType`, `AstNode` (with `search_root`), `Command`,
  `Assignment`, `Redirection` and `ParseStatus`. `error_message(status)`
  gives the syntax-error text for a status.
- `shellkit.parser`: turns a token list into a syntax tree.
  - `parse(tokens)` returns the root, or `None` for no tokens. A malformed
    line raises `ParseError`, whose `status` holds the `ParseStatus` and
    whose message is the syntax-error text.
  - `Parser` exposes `parse_compound`, `parse_pipeline`, `parse_command`
    and `parse_simple_command`.
  - The helpers are `is_valid_name`, `is_assignment`, `is_redirection` and
    `count_args`.

## Installation

```
pip install .
```

## Examples

```python
from shellkit.ast import NodeType, Token, TokenType
from shellkit.parser import parse

tokens = [
    Token(TokenType.WORD, "echo"),
    Token(TokenType.WORD, "hi"),
    Token(TokenType.PIPE, "|"),
    Token(TokenType.WORD, "cat"),
]
tree = parse(tokens)
assert tree.type is NodeType.PIPE
assert tree.left.data.arguments == ["echo", "hi"]
assert tree.right.data.arguments == ["cat"]
```

Words of the form `NAME=value` before a command's first argument become
exported `Assignment`s of that command. A line made only of such words
gives an `ASSIGNMENT` node whose data is the list of assignments.

```python
from shellkit.printf import format_string

format_string("%05d|%-4s|%#x", 42, "ab", 255)   # '00042|ab  |0xff'
```

```python
import os
from shellkit.linereader import LineReader

read_fd, write_fd = os.pipe()
os.write(write_fd, b"one\ntwo")
os.close(write_fd)
assert list(LineReader(read_fd)) == ["one\n", "two"]
```

## What the package does not do

These are parts, not a shell. The package has:

- no tokenizer that turns an input line into `Token`s
- no variable or quote expansion
- no here-document reading
- no environment store
- no built-in commands
- no interpreter that runs a syntax tree
- no prompt loop and no command to start

Token lists have to be built by the caller, and what is done with the tree
is up to the caller too.

## Running the tests

```
pip install .[test]
pytest
```