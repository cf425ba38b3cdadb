"""
Classification of raw tokens into indentation, line breaks and everything else.
"""

import re

INDENT = "indent"
NEWLINE = "newline"

CONTROL_TYPES = (None, INDENT, NEWLINE)

_INDENT_RE = re.compile(r"[\t ]+")
_NEWLINE_RE = re.compile(r"(?:\n|\r\n)+")


def default_control_token_recognizer(token):
    """
    Classify a token by its text.

    Runs of newlines are "newline", runs of tabs and spaces are "indent",
    anything else is ordinary content (None).
    """
    if _NEWLINE_RE.fullmatch(token.value):
        return NEWLINE
    if _INDENT_RE.fullmatch(token.value):
        return INDENT
    return None


def wrap_recognizer(recognizer):
    """Let ``recognizer`` be called with None at end of stream without seeing it."""

    def recognize(token):
        if token is None:
            return None
        return recognizer(token)

    return recognize
