"""Interned identities for Jack code trees.

A Form tags an operation node (`[Form("add"), 1, 2]`); a Symbol marks a
variable read and doubles as a hashable key value. Both are interned: the same
name always yields the same object, so dispatch and keying compare by `is`.
"""

from __future__ import annotations
import sys


class Form:
    """Operation tag. `Form(name)` returns the process-wide interned instance."""

    __slots__ = ("id",)
    kind = "form"

    def __new__(cls, name: str) -> Form:
        return INTERNER.form(name)

    @property
    def name(self) -> str:
        return self.id

    def __repr__(self):
        return f"@{self.id}"

    def __str__(self):
        return self.id

    def __reduce__(self):
        return (Form, (self.id,))


class Symbol:
    """Name identity. `Symbol(name)` returns the process-wide interned instance."""

    __slots__ = ("id",)
    kind = "symbol"

    def __new__(cls, name: str) -> Symbol:
        return INTERNER.symbol(name)

    @property
    def name(self) -> str:
        return self.id

    def __repr__(self):
        return f":{self.id}"

    def __str__(self):
        return self.id

    def __reduce__(self):
        return (Symbol, (self.id,))


class Interner:
    """Owns the name -> identity tables for Forms and Symbols.

    Tables only grow; an identity lives as long as the interner. The module
    level `INTERNER` is the process-wide instance behind `Form()`/`Symbol()`.
    """

    __slots__ = ("forms", "symbols")

    def __init__(self):
        self.forms: dict[str, Form] = {}
        self.symbols: dict[str, Symbol] = {}

    @staticmethod
    def _make(cls, name: str):
        if not isinstance(name, str):
            raise TypeError(f"{cls.__name__} name must be a str, got {type(name).__name__}")
        obj = object.__new__(cls)
        obj.id = sys.intern(name)
        return obj

    def form(self, name: str) -> Form:
        found = self.forms.get(name)
        if found is None:
            found = self.forms[name] = self._make(Form, name)
        return found

    def symbol(self, name: str) -> Symbol:
        found = self.symbols.get(name)
        if found is None:
            found = self.symbols[name] = self._make(Symbol, name)
        return found

    def intern(self, kind: str, name: str) -> Form | Symbol:
        if kind == Form.kind:
            return self.form(name)
        if kind == Symbol.kind:
            return self.symbol(name)
        raise ValueError(f"Unknown identity kind {kind!r}")

    def __len__(self) -> int:
        return len(self.forms) + len(self.symbols)


INTERNER = Interner()


def intern(kind: str, name: str) -> Form | Symbol:
    """Intern `name` in the `kind` namespace ("form" or "symbol")."""
    return INTERNER.intern(kind, name)


def name_of(name: str | Symbol) -> str:
    """Normalize a binding name given as a str or a Symbol."""
    if isinstance(name, (Symbol, Form)):
        return name.id
    return name
