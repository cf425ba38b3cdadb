"""
Lark parser frontend.

Lets a Lark LALR parser consume the adapted token stream directly:
``Lark(grammar, parser="lalr", lexer=indentify_lexer_class(...))``. The
grammar declares the structural terminals with ``%declare EOL INDENT DEDENT``.
"""

from lark import Lark, Token
from lark.lexer import Lexer

from indentify.lexer import IndentifyLexer


def lark_token_builder(type_, value, base):
    """Build structural tokens named the way Lark terminals are (EOL, INDENT, DEDENT)."""
    return Token.new_borrow_pos(type_.upper(), value, base)


def indentify_lexer_class(tokenizer_factory, **options):
    """
    Make a Lark lexer class that runs IndentifyLexer over a fresh base tokenizer.

    Args:
        tokenizer_factory: Called once per parse, returns a base tokenizer
        **options: Keyword arguments for IndentifyLexer

    Returns:
        A lark.lexer.Lexer subclass to pass as ``Lark(..., lexer=...)``
    """
    options.setdefault("token_builder", lark_token_builder)

    class IndentifyLarkLexer(Lexer):
        def __init__(self, lexer_conf):
            self.lexer_conf = lexer_conf

        def lex(self, data):
            lexer = IndentifyLexer(tokenizer_factory(), **options)
            lexer.reset(data)
            return iter(lexer)

    return IndentifyLarkLexer


def load_lark_parser(grammar: str, tokenizer_factory, **options) -> Lark:
    """Load an LALR parser for ``grammar`` fed by the indentation adapter."""
    return Lark(
        grammar,
        parser="lalr",
        lexer=indentify_lexer_class(tokenizer_factory, **options),
        propagate_positions=True,
        maybe_placeholders=False,
    )
