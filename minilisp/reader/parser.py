"""
  Lisp Reader: tokenizer and parser

- Tokens are whitespace-separated runs, with every '(' and ')' split out on its own.
- No strings, comments or reader quoting; `quote` is only a special form.
- Emits Expressions:

    - "()"            -> empty LIST (the nil value)
    - "(f a b)"       -> FORM of the read elements
    - numeric token   -> NUMBER (ASCII decimal, optional fraction and exponent)
    - any other token -> SYMBOL with the raw token text
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from minilisp.errors import UnexpectedCloseParen, UnexpectedEndOfInput
from minilisp.types.expression import Expression

logger = logging.getLogger(__name__)

LPAREN = "("
RPAREN = ")"

# ASCII decimal with optional fraction and exponent: "12", "-3.5", ".5", "1e3"
NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def tokenize(source: str) -> list[str]:
    """Split source text into tokens, padding parentheses with whitespace."""
    padded = source.replace(LPAREN, f" {LPAREN} ").replace(RPAREN, f" {RPAREN} ")
    tokens = padded.split()
    logger.debug("tokenized %d token(s)", len(tokens))
    return tokens


def atom(token: str) -> Expression:
    if NUMBER_RE.fullmatch(token):
        return Expression.number(float(token))
    return Expression.symbol(token)


def read(tokens: list[str]) -> Expression:
    """Read one expression, consuming its tokens from the front of `tokens`."""
    if not tokens:
        raise UnexpectedEndOfInput("Unexpected end of input while reading")
    token = tokens.pop(0)

    if token == RPAREN:
        raise UnexpectedCloseParen("Unexpected ')'")

    if token == LPAREN:
        items: list[Expression] = []
        while True:
            if not tokens:
                raise UnexpectedEndOfInput("Unmatched '(': input ended before ')'")
            if tokens[0] == RPAREN:
                tokens.pop(0)
                break
            items.append(read(tokens))
        # "()" reads as the empty list value; anything else is code until quoted
        return Expression.form(items) if items else Expression.list()

    return atom(token)


def parse(source: str) -> Expression:
    """Read the first expression in `source`; trailing tokens are ignored."""
    return read(tokenize(source))


def parse_all(source: str) -> Iterator[Expression]:
    """Yield every top-level expression in `source`, in order."""
    tokens = tokenize(source)
    while tokens:
        yield read(tokens)
