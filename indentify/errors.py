"""
Exceptions raised while adapting a token stream.

All of them derive from lark's LarkError so a caller driving a Lark parser
can catch lexing, indentation and parsing failures in one place.
"""

from lark.exceptions import LarkError


class IndentifyError(LarkError):
    """Base class for indentation adapter errors."""


class UnknownControlTokenError(IndentifyError):
    """The control token recognizer returned something it should not have."""

    def __init__(self, control_type, token):
        self.control_type = control_type
        self.token = token
        super().__init__(
            "control_token_recognizer() returned an unknown type. Must be "
            f'None, "indent", or "newline". Was: {control_type!r}. '
            f"Failed on token: {token!r}."
        )


class InconsistentDedentError(IndentifyError):
    """A dedent did not land on any currently open indentation level."""

    def __init__(self, token, depth):
        self.token = token
        self.depth = depth
        line = getattr(token, "line", None)
        where = f" at line {line}" if line is not None else ""
        super().__init__(
            f"Inconsistent indent{where}: depth {depth!r} does not match "
            "any enclosing indentation level."
        )


class InconsistentIndentTextError(IndentifyError):
    """Consecutive lines are indented with strings that don't share a prefix."""

    def __init__(self, previous, current, token=None):
        self.previous = previous
        self.current = current
        self.token = token
        super().__init__(
            f"Inconsistent indent: {current!r} and the previous line's "
            f"{previous!r} are not prefixes of one another."
        )
