"""
Lark-backed base tokenizer.

LarkTokenizer turns a table of Lark terminal definitions into a resumable
token source with the next()/save()/reset()/has()/format_error() interface
IndentifyLexer expects of its base lexer.
"""

from itertools import islice
from typing import Dict, Iterator, Optional

from lark import Lark, Token

# Words, horizontal whitespace and line breaks; enough to lex any text
# without \r-only line endings.
DEFAULT_TERMINALS = {
    "WS": r"/[ \t]+/",
    "NEWLINE": r"/(\r?\n)+/",
    "WORD": r"/[^ \t\r\n]+/",
}


def terminals_grammar(terminals: Dict[str, str]) -> str:
    """
    Build a Lark grammar that accepts any sequence of the given terminals.

    Args:
        terminals: Terminal name to Lark pattern, e.g. {"ARROW": '"-->"'}

    Returns:
        Grammar text suitable for Lark(..., lexer="basic")
    """
    if not terminals:
        raise ValueError("at least one terminal is required")

    for name in terminals:
        if not name.isupper() or not name.replace("_", "").isalnum():
            raise ValueError(f"terminal names must be upper case, got {name!r}")

    lines = ["start: (" + " | ".join(terminals) + ")*"]
    lines.extend(f"{name}: {pattern}" for name, pattern in terminals.items())
    return "\n".join(lines) + "\n"


class LarkTokenizer:
    """Resumable token source over a Lark basic lexer."""

    def __init__(self, lark: Lark):
        self._lark = lark
        self._terminal_names = frozenset(t.name for t in lark.terminals)
        self._chunk = ""
        self._tokens: Optional[Iterator[Token]] = None
        self._consumed = 0

    @classmethod
    def from_terminals(cls, terminals: Dict[str, str]) -> "LarkTokenizer":
        grammar = terminals_grammar(terminals)
        return cls(Lark(grammar, parser="lalr", lexer="basic"))

    def reset(self, chunk: str, state: Optional[int] = None):
        """
        Start over on ``chunk``; ``state`` is a count returned by save().

        Lark's lexer can't be suspended, so resuming re-lexes the chunk and
        skips the tokens already handed out.
        """
        self._chunk = chunk
        self._tokens = self._lark.lex(chunk)
        self._consumed = 0

        if state:
            skipped = sum(1 for _ in islice(self._tokens, state))
            if skipped != state:
                raise ValueError(
                    f"saved state is past the end of the chunk ({state} > {skipped} tokens)"
                )
            self._consumed = state

    def next(self) -> Optional[Token]:
        if self._tokens is None:
            return None

        token = next(self._tokens, None)
        if token is not None:
            self._consumed += 1
        return token

    def save(self) -> int:
        return self._consumed

    def has(self, name: str) -> bool:
        return name in self._terminal_names

    def format_error(self, token: Optional[Token], message: str) -> str:
        """Render ``message`` with the source line under ``token`` and a caret."""
        lines = self._chunk.splitlines()

        if token is not None and token.line is not None:
            line, column = token.line, token.column
        else:
            line = max(len(lines), 1)
            column = len(lines[-1]) + 1 if lines else 1

        source_line = lines[line - 1] if 0 < line <= len(lines) else ""
        gutter = str(line)

        return (
            f"{message} at line {line} col {column}:\n\n"
            f"{gutter} | {source_line}\n"
            f"{' ' * len(gutter)} | {' ' * (column - 1)}^"
        )
