"""
indentify - indentation-sensitive token streams for flat token grammars.
"""

from indentify.classify import default_control_token_recognizer
from indentify.errors import (
    IndentifyError,
    InconsistentDedentError,
    InconsistentIndentTextError,
    UnknownControlTokenError,
)
from indentify.frontend import indentify_lexer_class, load_lark_parser
from indentify.lexer import IndentifyLexer
from indentify.listeners import (
    ConsistentIndentEnforcer,
    LineListener,
    eol_on_empty_line,
    ignore_empty_line,
)
from indentify.state import IndentLevel, ParseState, SavedState
from indentify.tokenizer import DEFAULT_TERMINALS, LarkTokenizer
from indentify.tokens import tab_indent_level

__version__ = "0.1.0"

__all__ = [
    "IndentifyLexer",
    "LarkTokenizer",
    "DEFAULT_TERMINALS",
    "ConsistentIndentEnforcer",
    "LineListener",
    "eol_on_empty_line",
    "ignore_empty_line",
    "default_control_token_recognizer",
    "tab_indent_level",
    "indentify_lexer_class",
    "load_lark_parser",
    "IndentLevel",
    "ParseState",
    "SavedState",
    "IndentifyError",
    "InconsistentDedentError",
    "InconsistentIndentTextError",
    "UnknownControlTokenError",
]
