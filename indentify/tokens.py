"""
Structural token types and the default token-level hooks.

The hooks here are the defaults IndentifyLexer falls back to: how a
structural token is built, which token supplies a position when the stream
is empty, and how deep a line's leading whitespace is.
"""

from typing import Callable, Sequence

from lark import Token

EOL = "eol"
INDENT = "indent"
DEDENT = "dedent"

STRUCTURAL_TYPES = frozenset((EOL, INDENT, DEDENT))


def build_token(type_: str, value: str, base: Token) -> Token:
    """Build a structural token that borrows its position from ``base``."""
    return Token.new_borrow_pos(type_, value, base)


def placeholder_token() -> Token:
    """Position holder for streams that never produced a real token."""
    return Token("", "", start_pos=0, line=1, column=1)


def text_length_indent_level(indent_tokens: Sequence[Token], indent_text: str) -> int:
    """Default depth: the length of the indentation text."""
    return len(indent_text)


def tab_indent_level(tab_width: int = 4) -> Callable[[Sequence[Token], str], int]:
    """
    Make a depth function that counts a tab as ``tab_width`` columns.

    Args:
        tab_width: Columns a single tab is worth

    Returns:
        A function usable as ``determine_indent_level``
    """
    if tab_width < 1:
        raise ValueError(f"tab_width must be positive, got {tab_width}")

    def indent_level(indent_tokens, indent_text):
        level = 0
        for char in indent_text:
            if char == "\t":
                level += tab_width
            else:
                level += 1
        return level

    return indent_level
