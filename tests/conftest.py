"""
Shared fixtures and helpers for the indentify tests.
"""

import pytest

from indentify import IndentifyLexer, LarkTokenizer

# "-->" and "==>" stand in for indentation so the tests can see it.
ARROW_TERMINALS = {
    "ARROW": '"-->"',
    "ARROW2": '"==>"',
    "BLAH": r"/\w+/",
    "NEWLINE": r"/\n/",
}


def arrow_recognizer(token):
    if token.type == "BLAH":
        return None
    if token.type in ("ARROW", "ARROW2"):
        return "indent"
    if token.type == "NEWLINE":
        return "newline"
    return token.type


def lex_all(lexer, text):
    lexer.reset(text)
    return list(lexer)


def token_types(tokens):
    return [token.type for token in tokens]


@pytest.fixture
def arrow_tokenizer():
    return LarkTokenizer.from_terminals(ARROW_TERMINALS)


@pytest.fixture
def make_lexer(arrow_tokenizer):
    """Build an IndentifyLexer over the arrow tokenizer with extra options."""

    def make(**options):
        options.setdefault("control_token_recognizer", arrow_recognizer)
        return IndentifyLexer(arrow_tokenizer, **options)

    return make
