"""
  Sprig Parser

Recursive-descent consumer of the lexer's token stream. Produces Node trees:

    - ( ... )       -> ListNode
    - #t / #f       -> BoolNode
    - 1+2i, -i      -> ComplexNode   (extended dialect)
    - 42            -> IntNode       (only inside the 32-bit range)
    - 4.2, 1e3      -> FloatNode     (larger integers land here too)
    - "text"        -> StringNode    (extended dialect)
    - anything else -> SymbolNode

A program is exactly one top-level form; see `parse`.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional

from sprig.config import is_extended_dialect
from sprig.errors import SprigParseError
from sprig.reader.lexer import Token, tokenize, OPEN_PAREN, CLOSE_PAREN, STRING
from sprig.types.node import (
    Node,
    BoolNode,
    ComplexNode,
    FloatNode,
    IntNode,
    ListNode,
    StringNode,
    SymbolNode,
)
from sprig.types.value import INT_MAX, INT_MIN

logger = logging.getLogger(__name__)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
# <real>±<imag>i; either part may be left empty or be a bare sign
COMPLEX_RE = re.compile(r"([+-]?[0-9]*\.?[0-9]*)([+-][0-9]*\.?[0-9]*)i")


def parse_complex(text: str) -> Optional[ComplexNode]:
    """Return a ComplexNode if `text` has the complex literal shape, else None.

    Raises SprigParseError when the shape matches but a part is not a number
    (for example "1.2.3+4i" never matches, while ".+i" matches and fails).
    """
    m = COMPLEX_RE.fullmatch(text)
    if m is None:
        return None
    real_text, imag_text = m.group(1), m.group(2)
    try:
        real = float(real_text) if real_text else 0.0
        if imag_text == "+":
            imag = 1.0
        elif imag_text == "-":
            imag = -1.0
        else:
            imag = float(imag_text)
    except ValueError:
        raise SprigParseError(f"Error parsing complex constant {text}")
    return ComplexNode(real, imag)


def parse_atom(text: str, extended: bool = True) -> Node:
    """Classify a bare (non-paren) token."""
    if text == "#t":
        return BoolNode(True)
    if text == "#f":
        return BoolNode(False)
    if extended:
        node = parse_complex(text)
        if node is not None:
            return node
    if INT_RE.fullmatch(text):
        value = int(text)
        if INT_MIN <= value <= INT_MAX:
            return IntNode(value)
    if FLOAT_RE.fullmatch(text):
        return FloatNode(float(text))
    return SymbolNode(text)


class TokenStream:
    def __init__(self, token_iter: Iterable[Token], extended: Optional[bool] = None):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.extended = is_extended_dialect() if extended is None else extended

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None))

    def parse_expr(self) -> Optional[Node]:
        """Parse one form; returns None when the stream is exhausted."""
        tok_type, tok_val = self.advance()
        if tok_type is None:
            return None

        if tok_type == OPEN_PAREN:
            items: list[Node] = []
            while True:
                next_type, _ = self.peek()
                if next_type is None:
                    raise SprigParseError("Unexpected end of input")
                if next_type == CLOSE_PAREN:
                    self.advance()
                    break
                items.append(self.parse_expr())
            return ListNode(items)

        if tok_type == CLOSE_PAREN:
            raise SprigParseError("Unexpected close paren")

        if tok_type == STRING:
            return StringNode(tok_val)

        return parse_atom(tok_val, self.extended)

    def parse_all(self) -> Iterator[Node]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(tokens: Iterable[Token], extended: Optional[bool] = None) -> Node:
    """Parse a token stream that must hold exactly one top-level form."""
    nodes = list(TokenStream(tokens, extended).parse_all())
    if not nodes:
        raise SprigParseError("Empty input")
    if len(nodes) > 1:
        raise SprigParseError("Only one outer level permitted")
    logger.debug("Parsed %s", nodes[0])
    return nodes[0]


def parse_source(source: str, extended: Optional[bool] = None) -> Node:
    """Tokenize and parse `source` in one go."""
    if extended is None:
        extended = is_extended_dialect()
    return parse(tokenize(source, extended), extended)
