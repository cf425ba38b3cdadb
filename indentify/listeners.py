"""
Per-line hooks: line listeners and empty line strategies.

A line listener is told about every logical line once its leading
indentation is known. An empty line strategy decides which tokens, if any,
a blank line produces.
"""

from typing import Callable, Optional, Protocol, Sequence

from lark import Token

from indentify.classify import NEWLINE
from indentify.errors import InconsistentIndentTextError
from indentify.tokens import EOL, build_token, placeholder_token


class LineListener(Protocol):
    def on_line(
        self,
        indent_text: str,
        indent_tokens: Sequence[Token],
        breaking_token: Optional[Token],
        break_type: Optional[str],
    ) -> None:
        """
        Called once per logical line.

        Args:
            indent_text: Concatenated text of the line's leading indentation
            indent_tokens: The raw tokens that make up that indentation
            breaking_token: Token that ended the indentation, None at end of input
            break_type: "newline" for blank lines, None otherwise
        """
        ...


class ConsistentIndentEnforcer:
    """
    Require each line's indentation to extend or truncate the previous one.

    "\\t\\t" followed by "\\t" is fine, "\\t" followed by "    " is not, even
    when a depth function would call them equal. Blank lines are not checked.
    """

    def __init__(self):
        self._last_indent = ""

    def on_line(self, indent_text, indent_tokens, breaking_token, break_type):
        if break_type == NEWLINE:
            return

        last = self._last_indent
        if not (indent_text.startswith(last) or last.startswith(indent_text)):
            raise InconsistentIndentTextError(last, indent_text, breaking_token)

        self._last_indent = indent_text

    def save(self):
        return self._last_indent

    def restore(self, state):
        self._last_indent = "" if state is None else state


EmptyLineStrategy = Callable[[Optional[Token], Callable[[Token], None]], None]


def ignore_empty_line(token, emit):
    pass


class EolOnEmptyLine:
    """
    Emit an eol for each blank line, including a trailing one.

    Once bound to a lexer, tokens are built with the lexer's token_builder
    unless one was given here, and the trailing blank line at end of input
    borrows the lexer's last real token for its position.
    """

    def __init__(self, token_builder=None):
        self.token_builder = token_builder
        self._lexer = None

    def bind(self, lexer):
        self._lexer = lexer

    def __call__(self, token, emit):
        builder = self.token_builder
        if builder is None:
            builder = self._lexer.token_builder if self._lexer is not None else build_token

        if token is None:
            base = self._lexer.last_real_token if self._lexer is not None else None
            if base is None:
                base = placeholder_token()
            emit(builder(EOL, "", base))
        else:
            emit(builder(EOL, token.value, token))


def eol_on_empty_line(token_builder=None):
    """Make an empty line strategy that turns blank lines into eol tokens."""
    return EolOnEmptyLine(token_builder)
