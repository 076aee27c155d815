"""
  Jack Reader, Lexer and Parser

- Streaming, lazy tokenizing
- Emits code trees directly, with no intermediate AST:

    - (name arg ...)  -> [Form("name"), arg, ...]   operation node
    - [a b ...]       -> [a, b, ...]                raw code sequence (bodies, names)
    - name            -> Symbol("name")             variable read
    - @name           -> Form("name")               literal Form, e.g. a meta key
    - "text"          -> str
    - 12, -3, 1.5e3   -> int / float
    - true/false/none -> True / False / None
    - ; comment       -> skipped to end of line

Any callable with the same `parse(text) -> list` contract can replace this
reader; the evaluator never depends on it.
"""

from __future__ import annotations

import ast
import re
from typing import Iterator, Optional

from jack import CodeNode
from jack.errors import JackSyntaxError
from jack.types.symbol import Form, Symbol


TOKEN_RE = re.compile(
    r"(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbracket>\[)"  # [
    r"|(?P<rbracket>\])"  # ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r'|(?P<form>@[^\s()\[\]";@]+)'  # @name form literal
    r'|(?P<atom>[^\s()\[\]";@]+)'  # fallback: names and numbers
)

INT_RE = re.compile(r"[+-]?\d+")
FLOAT_RE = re.compile(r"[+-]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][+-]?\d+)?")

LITERALS: dict[str, CodeNode] = {
    "true": True,
    "false": False,
    "none": None,
}

CLOSERS = {"rparen": ")", "rbracket": "]"}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples.

    String tokens are yielded already decoded, escapes resolved.
    """
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            raise JackSyntaxError(f"Unexpected character {source[pos]!r} at {pos}", pos)
        pos = m.end()
        kind = m.lastgroup
        if kind == "comment":
            continue
        value = m.group(kind)
        if kind == "string":
            value = read_string(value, m.start())
        yield kind, value


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]]):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []

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

    def parse_expr(self) -> CodeNode:
        tok_type, tok_val = self.advance()
        if tok_type is None:
            raise JackSyntaxError("Unexpected end of input")

        if tok_type == "atom":
            return read_atom(tok_val)

        if tok_type == "form":
            return Form(tok_val[1:])

        if tok_type == "string":
            return tok_val

        # Operation node: the head must be a bare name
        if tok_type == "lparen":
            head_type, head_val = self.peek()
            if head_type == "rparen":
                self.advance()
                return []
            if head_type is None:
                raise JackSyntaxError("Unmatched '('")
            if head_type != "atom" or not isinstance(read_atom(head_val), Symbol):
                raise JackSyntaxError(f"Expected an operation name after '(', got {head_val!r}")
            self.advance()
            return [Form(head_val), *self._read_until("rparen")]

        # Raw code sequence
        if tok_type == "lbracket":
            return self._read_until("rbracket")

        if tok_type in CLOSERS:
            raise JackSyntaxError(f"Unmatched '{tok_val}'")

        raise JackSyntaxError(f"Unknown token: {tok_type} {tok_val}")

    def _read_until(self, closer: str) -> list[CodeNode]:
        items: list[CodeNode] = []
        while True:
            tok_type, tok_val = self.peek()
            if tok_type is None:
                opener = "(" if closer == "rparen" else "["
                raise JackSyntaxError(f"Unmatched '{opener}'")
            if tok_type == closer:
                self.advance()
                return items
            if tok_type in CLOSERS:
                raise JackSyntaxError(f"Expected '{CLOSERS[closer]}' but found '{tok_val}'")
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[CodeNode]:
        while True:
            tok_type, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def read_string(text: str, position: Optional[int] = None) -> str:
    """Decode a double-quoted literal using Python string escapes."""
    try:
        return ast.literal_eval(text)
    except (SyntaxError, ValueError) as err:
        raise JackSyntaxError(f"Invalid string literal at {position}: {text!r}", position) from err


def read_atom(text: str) -> CodeNode:
    """Turn a bare token into a literal or a Symbol."""
    if text in LITERALS:
        return LITERALS[text]
    if INT_RE.fullmatch(text):
        return int(text)
    if FLOAT_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


def parse(source: str) -> list[CodeNode]:
    """Read every top-level code node in `source`."""
    return list(TokenStream(lex(source)).parse_all())
