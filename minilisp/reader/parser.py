"""
  Recursive-descent parser for minilisp.

The token sequence is used as a stack: the lexer's output is reversed once so
that popping from the tail yields tokens in source order. Each list is parsed
by one call; a nested "(" is pushed back and handed to a recursive call.

Leaf tokens become:

    integer, float, bool -> int, float, bool
    op                   -> Op
    keyword              -> Keyword("def" | "lambda")
    if                   -> Condition
    name                 -> Symbol
"""

from __future__ import annotations

import logging

from minilisp import SExpression
from minilisp.config import resolve_strict
from minilisp.errors import MiniLispParseError
from minilisp.reader.lexer import Token, lex
from minilisp.types.markers import Condition, Keyword
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def _leaf(tok_type: str, tok_val) -> SExpression:
    if tok_type in ("integer", "float", "bool", "op"):
        return tok_val
    if tok_type == "keyword":
        return Keyword(tok_val)
    if tok_type == "if":
        return Condition
    if tok_type == "name":
        return Symbol(tok_val)
    raise MiniLispParseError(f"Unexpected token {tok_type} {tok_val!r}")


def parse(tokens: list[Token]) -> list[SExpression]:
    """Parse one list from the tail of `tokens`, consuming what it reads."""
    token = tokens.pop() if tokens else None
    if token is None or token[0] != "lparen":
        found = "end of input" if token is None else repr(token[1])
        raise MiniLispParseError(f"Expected open parenthesis '(', but found {found}")

    items: list[SExpression] = []
    while tokens:
        tok_type, tok_val = tokens.pop()
        if tok_type == "rparen":
            return items
        if tok_type == "lparen":
            tokens.append((tok_type, tok_val))
            items.append(parse(tokens))
        elif tok_type == "error":
            continue
        else:
            items.append(_leaf(tok_type, tok_val))

    raise MiniLispParseError("Insufficient tokens: missing close parenthesis ')'")


def read(source: str, strict: bool | None = None) -> list[SExpression]:
    """Lex and parse a whole program. The source must hold exactly one list."""
    tokens = [tok for tok in lex(source, resolve_strict(strict)) if tok[0] != "error"]
    tokens.reverse()
    program = parse(tokens)
    if tokens:
        raise MiniLispParseError(
            f"Unexpected trailing tokens after program: {tokens[-1][1]!r}"
        )
    logger.debug("read %d top-level elements", len(program))
    return program
