"""
Tests for save() and reset() on IndentifyLexer.
"""

import pytest

from indentify import ConsistentIndentEnforcer, IndentLevel, ParseState, SavedState
from tests.conftest import lex_all

TEXT = "blah-->blah\n-->blah\n-->-->blah\n\n-->blah"


def pull(lexer, count):
    return [lexer.next() for _ in range(count)]


def as_pairs(tokens):
    return [(t.type, t.value) for t in tokens]


class TestSaveAndReset:
    """Snapshots rewind the adapter and its base tokenizer together."""

    def test_save_reset_save_is_identity(self, make_lexer):
        """Restoring a snapshot and saving again gives an equal snapshot."""
        lexer = make_lexer()
        lexer.reset(TEXT)
        pull(lexer, 2)

        state1 = lexer.save()
        pull(lexer, 2)
        lexer.reset(TEXT, state1)
        state2 = lexer.save()

        assert state1 == state2

    @pytest.mark.parametrize("prefix", range(0, 14))
    def test_replay_after_restore(self, prefix, make_lexer):
        """After a rewind the remaining tokens are the same as in a straight run."""
        expected = as_pairs(lex_all(make_lexer(), TEXT))

        lexer = make_lexer()
        lexer.reset(TEXT)
        head = pull(lexer, prefix)
        state = lexer.save()
        list(lexer)

        lexer.reset(TEXT, state)
        tail = list(lexer)

        assert as_pairs([t for t in head if t is not None] + tail) == expected

    def test_snapshot_is_independent(self, make_lexer):
        """Pulling more tokens doesn't change an earlier snapshot."""
        lexer = make_lexer()
        lexer.reset(TEXT)
        pull(lexer, 5)

        state = lexer.save()
        list(lexer)

        assert lexer.indent_stack == [IndentLevel(0, "")]
        assert state.indent_stack == (IndentLevel(0, ""), IndentLevel(3, "-->"))
        assert as_pairs(state.token_queue) == [("BLAH", "blah")]

    def test_same_snapshot_restored_twice(self, make_lexer):
        """Two branches restored from one snapshot don't affect each other."""
        lexer = make_lexer()
        lexer.reset(TEXT)
        pull(lexer, 4)
        state = lexer.save()

        lexer.reset(TEXT, state)
        first = as_pairs(lexer)
        lexer.reset(TEXT, state)
        second = as_pairs(lexer)

        assert first == second
        assert first

    def test_fresh_state_defaults(self, make_lexer):
        """reset() without a state starts from the documented defaults."""
        lexer = make_lexer()
        lexer.reset(TEXT)
        list(lexer)

        lexer.reset(TEXT)
        state = lexer.save()

        assert state == SavedState(base_state=0, listener_states=("",))
        assert state.parse_state is ParseState.INDENT

    def test_done_state_survives_restore(self, make_lexer):
        """A snapshot taken at the end stays at the end."""
        lexer = make_lexer()
        lexer.reset(TEXT)
        list(lexer)
        state = lexer.save()

        lexer.reset(TEXT, state)

        assert state.parse_state is ParseState.DONE
        assert lexer.next() is None

    def test_listener_state_is_rewound(self, make_lexer):
        """The enforcer goes back to the indentation it had at save time."""
        enforcer = ConsistentIndentEnforcer()
        lexer = make_lexer(line_listeners=[enforcer])
        text = "blah\n-->blah\n-->-->blah\n==>blah\n"
        lexer.reset(text)
        pull(lexer, 3)
        state = lexer.save()

        pull(lexer, 4)
        assert enforcer.save() == "-->-->"

        lexer.reset(text, state)
        assert enforcer.save() == "-->"
