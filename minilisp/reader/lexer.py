"""
  Lexer for minilisp source text.

- Lazy: yields (token_type, token_value) tuples
- Values are already converted: ints, floats, bools, Op members, str
- Never fails by default: a character that starts no token is yielded as
  ("error", char) and skipped by the parser. Strict mode raises instead.

Token types:

    integer, float, bool, op, lparen, rparen, keyword, if, name, error
"""

from __future__ import annotations

import logging
import re
from typing import Iterator

from minilisp import LispValue
from minilisp.config import resolve_strict
from minilisp.errors import MiniLispLexError
from minilisp.types.integer import I64_MIN, I64_MAX
from minilisp.types.operator import Op

logger = logging.getLogger(__name__)

Token = tuple[str, LispValue]

WHITESPACE = " \t\n\f"

# Alternation order gives the longest match for this token set:
# a float beats the integer prefix, and a signed number beats the "-" operator.
TOKEN_RE = re.compile(
    r"(?P<float>-?[0-9]+\.[0-9]*)"
    r"|(?P<integer>-?[0-9]+)"
    r"|(?P<bool>#[tf])"
    r"|(?P<op>==|!=|[-+*/<>])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<name>[a-zA-Z][a-zA-Z0-9_-]*)"
)

KEYWORDS = frozenset({"def", "lambda"})


def _skip(pos: int, lexeme: str, strict: bool, reason: str) -> Token:
    if strict:
        raise MiniLispLexError(f"{reason} {lexeme!r} at {pos}")
    logger.debug("skipping %s %r at %d", reason, lexeme, pos)
    return "error", lexeme


def lex(source: str, strict: bool | None = None) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value) tuples in source order."""
    strict = resolve_strict(strict)
    pos = 0
    n = len(source)

    while pos < n:
        if source[pos] in WHITESPACE:
            pos += 1
            continue

        m = TOKEN_RE.match(source, pos)
        if m is None:
            yield _skip(pos, source[pos], strict, "unexpected character")
            pos += 1
            continue

        kind, text = m.lastgroup, m.group()
        start, pos = pos, m.end()

        if kind == "integer":
            value = int(text)
            if not I64_MIN <= value <= I64_MAX:
                yield _skip(start, text, strict, "integer out of range")
                continue
            yield "integer", value
        elif kind == "float":
            yield "float", float(text)
        elif kind == "bool":
            yield "bool", text == "#t"
        elif kind == "op":
            yield "op", Op(text)
        elif kind == "name":
            if text in KEYWORDS:
                yield "keyword", text
            elif text == "if":
                yield "if", text
            else:
                yield "name", text
        else:
            yield kind, text
