#!/usr/bin/env python3
"""
CLI tool for dumping the indentation-aware token stream of a file.
"""

import sys
import os
import argparse
import logging

from lark.exceptions import LarkError

from indentify.lexer import IndentifyLexer
from indentify.listeners import eol_on_empty_line
from indentify.tokenizer import DEFAULT_TERMINALS, LarkTokenizer
from indentify.tokens import tab_indent_level


def build_lexer(args):
    options = {}
    if args.tab_width:
        options["determine_indent_level"] = tab_indent_level(args.tab_width)
    if args.blank_lines:
        options["empty_line_strategy"] = eol_on_empty_line()
    if args.no_check:
        options["line_listeners"] = []

    return IndentifyLexer(LarkTokenizer.from_terminals(DEFAULT_TERMINALS), **options)


def format_token(token):
    return f"{token.line}:{token.column} {token.type} {token.value!r}"


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Print the token stream of a file with eol/indent/dedent tokens added.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  indentify source.txt                 # One token per line: line:col TYPE 'value'
  indentify source.txt --tab-width 8   # Count tabs as 8 columns
  indentify source.txt --blank-lines   # Emit eol for blank lines too
  indentify source.txt --no-check      # Skip the indentation prefix check
        """,
    )

    parser.add_argument("input_file", help="Path to the input file")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log indentation changes to stderr",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=0,
        help="Count a tab as this many columns (default: every character counts 1)",
    )
    parser.add_argument(
        "--blank-lines",
        action="store_true",
        help="Emit an eol token for every blank line",
    )
    parser.add_argument(
        "--no-check",
        action="store_true",
        help="Don't require consecutive lines' indentation to share a prefix",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not os.path.exists(args.input_file):
        print(f"Error: File '{args.input_file}' not found")
        sys.exit(1)

    try:
        with open(args.input_file, "r", encoding="utf-8") as f:
            content = f.read()

        lexer = build_lexer(args)
        lexer.reset(content)

        count = 0
        for token in lexer:
            print(format_token(token))
            count += 1

        if args.verbose:
            print(f"Tokens: {count}")

    except (LarkError, OSError, ValueError) as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
