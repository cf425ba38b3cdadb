"""
State records for the indentation lexer.

SavedState only holds tuples and frozen records, so a snapshot can never
alias the live lists of the lexer it came from.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple

from lark import Token


class ParseState(Enum):
    INDENT = "indent"  # reading a line's leading whitespace
    CONTENT = "content"  # past the first ordinary token of a line
    DONE = "done"  # end of stream handled


@dataclass(frozen=True)
class IndentLevel:
    depth: Any
    text: str


@dataclass(frozen=True)
class SavedState:
    """Everything needed to put an IndentifyLexer back where it was."""

    base_state: Any = None
    indent_stack: Tuple[IndentLevel, ...] = ()
    token_queue: Tuple[Token, ...] = ()
    parse_state: ParseState = ParseState.INDENT
    last_real_token: Optional[Token] = None
    indent_tokens: Tuple[Token, ...] = ()
    indent_text: str = ""
    listener_states: Tuple[Any, ...] = ()
