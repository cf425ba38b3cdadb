"""
Indentation-aware lexer adapter.

Wraps a whitespace-insensitive base tokenizer and inserts eol, indent and
dedent tokens based on each line's leading whitespace, similar to Python's
indentation handling. The base tokenizer must provide next(), save(),
reset(chunk, state), has(name) and format_error(token, message); this class
provides the same methods, so a parser can drive it like any other lexer and
rewind it with save()/reset().
"""

import logging
from collections import deque
from typing import Iterator, List, Optional

from lark import Token

from indentify import classify
from indentify.errors import InconsistentDedentError, UnknownControlTokenError
from indentify.listeners import ConsistentIndentEnforcer, ignore_empty_line
from indentify.state import IndentLevel, ParseState, SavedState
from indentify.tokens import (
    DEDENT,
    EOL,
    INDENT,
    STRUCTURAL_TYPES,
    build_token,
    placeholder_token,
    text_length_indent_level,
)

logger = logging.getLogger(__name__)


class IndentifyLexer:
    """Adds eol/indent/dedent tokens to a base tokenizer's output."""

    def __init__(
        self,
        base_lexer,
        control_token_recognizer=None,
        token_builder=None,
        determine_indent_level=None,
        empty_line_strategy=None,
        line_listeners=None,
        default_token: Optional[Token] = None,
    ):
        """
        Args:
            base_lexer: Tokenizer producing the raw tokens
            control_token_recognizer: token -> None, "indent" or "newline"
            token_builder: (type, value, base_token) -> structural token
            determine_indent_level: (indent_tokens, indent_text) -> comparable depth
            empty_line_strategy: (token or None, emit) -> None, run for blank lines
            line_listeners: Objects with on_line(); defaults to a single
                ConsistentIndentEnforcer, pass [] to disable
            default_token: Position source when the stream has no tokens
        """
        if base_lexer is None:
            raise ValueError("base_lexer parameter is required")

        self.base_lexer = base_lexer
        self.control_token_recognizer = classify.wrap_recognizer(
            control_token_recognizer or classify.default_control_token_recognizer
        )
        self.token_builder = token_builder or build_token
        self.determine_indent_level = determine_indent_level or text_length_indent_level
        self.empty_line_strategy = empty_line_strategy or ignore_empty_line
        if hasattr(self.empty_line_strategy, "bind"):
            self.empty_line_strategy.bind(self)

        if line_listeners is None:
            line_listeners = [ConsistentIndentEnforcer()]
        self.line_listeners = list(line_listeners)

        self.default_token = default_token if default_token is not None else placeholder_token()

        self._set_state(SavedState())

    def next(self) -> Optional[Token]:
        """Return the next token, or None at end of stream."""
        if not self.token_queue:
            self._ready_more_tokens()

        if self.token_queue:
            return self.token_queue.popleft()
        return None

    def __iter__(self) -> Iterator[Token]:
        token = self.next()
        while token is not None:
            yield token
            token = self.next()

    def save(self) -> SavedState:
        return SavedState(
            base_state=self.base_lexer.save(),
            indent_stack=tuple(self.indent_stack),
            token_queue=tuple(self.token_queue),
            parse_state=self.parse_state,
            last_real_token=self.last_real_token,
            indent_tokens=tuple(self.indent_tokens),
            indent_text=self.indent_text,
            listener_states=tuple(
                listener.save() if hasattr(listener, "save") else None
                for listener in self.line_listeners
            ),
        )

    def reset(self, chunk: str, state: Optional[SavedState] = None):
        """
        Start lexing ``chunk``, from the beginning or from a saved state.

        Args:
            chunk: Source text handed to the base tokenizer
            state: Result of an earlier save(), or None to start fresh
        """
        if state is None:
            state = SavedState()
            logger.debug("Resetting to start of a %d character chunk", len(chunk))
        else:
            logger.debug(
                "Restoring saved state with %d open indentation levels",
                len(state.indent_stack),
            )

        self.base_lexer.reset(chunk, state.base_state)
        self._set_state(state)

    def has(self, name: str) -> bool:
        return name in STRUCTURAL_TYPES or self.base_lexer.has(name)

    def format_error(self, token, message: str) -> str:
        return self.base_lexer.format_error(token, message)

    def _set_state(self, state: SavedState):
        self.indent_stack: List[IndentLevel] = list(state.indent_stack)
        self.token_queue = deque(state.token_queue)
        self.parse_state = state.parse_state
        self.last_real_token = state.last_real_token
        self.indent_tokens: List[Token] = list(state.indent_tokens)
        self.indent_text = state.indent_text

        listener_states = list(state.listener_states)
        for i, listener in enumerate(self.line_listeners):
            if hasattr(listener, "restore"):
                listener.restore(listener_states[i] if i < len(listener_states) else None)

    def _next_raw(self):
        token = self.base_lexer.next()
        if token is not None:
            self.last_real_token = token

        control_type = self.control_token_recognizer(token)
        if control_type not in classify.CONTROL_TYPES:
            raise UnknownControlTokenError(control_type, token)

        return token, control_type

    def _ready_more_tokens(self):
        if self.parse_state is ParseState.DONE:
            return

        token, control_type = self._next_raw()

        while token is not None and control_type is not None:
            if control_type == classify.INDENT:
                if self.parse_state is ParseState.INDENT:
                    self.indent_tokens.append(token)
                    self.indent_text += token.value
                else:
                    # Whitespace in the middle of a line, not ours to handle
                    self.token_queue.append(token)
            else:
                if self.parse_state is ParseState.INDENT:
                    self._empty_line(token, classify.NEWLINE)
                else:
                    self.token_queue.append(self.token_builder(EOL, token.value, token))
                self._start_line()

            token, control_type = self._next_raw()

        if token is None:
            self._end_of_stream()
        else:
            if self.parse_state is ParseState.INDENT:
                self._first_token_of_line(token, control_type)

            self.token_queue.append(token)
            self.parse_state = ParseState.CONTENT

    def _start_line(self):
        self.indent_tokens = []
        self.indent_text = ""
        self.parse_state = ParseState.INDENT

    def _empty_line(self, token, break_type):
        self.empty_line_strategy(token, self.token_queue.append)
        self._notify_listeners(token, break_type)

    def _notify_listeners(self, token, break_type):
        for listener in self.line_listeners:
            listener.on_line(
                self.indent_text, list(self.indent_tokens), token, break_type
            )

    def _end_of_stream(self):
        if self.last_real_token is None:
            self.last_real_token = self.default_token

        if self.parse_state is not ParseState.DONE:
            if self.parse_state is ParseState.CONTENT:
                self.token_queue.append(
                    self.token_builder(
                        EOL, self.last_real_token.value, self.last_real_token
                    )
                )
            else:
                self._empty_line(None, None)
            self.parse_state = ParseState.DONE

        while len(self.indent_stack) > 1:
            self.indent_stack.pop()
            self.token_queue.append(
                self.token_builder(
                    DEDENT, self.indent_stack[-1].text, self.last_real_token
                )
            )

    def _first_token_of_line(self, token, control_type):
        depth = self.determine_indent_level(list(self.indent_tokens), self.indent_text)
        self._notify_listeners(token, control_type)

        if not self.indent_stack:
            # First content line sets the baseline, no token for it
            self.indent_stack.append(IndentLevel(depth, self.indent_text))
            return

        current = self.indent_stack[-1].depth
        if depth < current:
            while self.indent_stack[-1].depth != depth:
                self.indent_stack.pop()
                if not self.indent_stack:
                    raise InconsistentDedentError(token, depth)

                self.token_queue.append(
                    self.token_builder(DEDENT, self.indent_text, token)
                )
            logger.debug("Dedent to depth %r at line %s", depth, getattr(token, "line", None))
        elif depth > current:
            self.indent_stack.append(IndentLevel(depth, self.indent_text))
            self.token_queue.append(
                self.token_builder(INDENT, self.indent_text, token)
            )
            logger.debug("Indent to depth %r at line %s", depth, getattr(token, "line", None))
