"""Collection kinds built by the `list`, `tuple` and `object` forms.

Host Python lists are accepted anywhere a List is. Tuples and keyed objects
get their own types so the `is` predicates can tell them apart from lists and
host dicts.
"""

from __future__ import annotations


def _fixed(name: str):
    def method(self, *args, **kwargs):
        raise TypeError(f"Tuple has a fixed length; {name} is not supported")
    method.__name__ = name
    return method


class List(list):
    """Growable ordered sequence built by the `list` form."""


class Tuple(list):
    """Fixed-length ordered sequence. Elements may be replaced, never added or removed."""

    append = _fixed("append")
    extend = _fixed("extend")
    insert = _fixed("insert")
    pop = _fixed("pop")
    remove = _fixed("remove")
    clear = _fixed("clear")
    __delitem__ = _fixed("__delitem__")
    __iadd__ = _fixed("__iadd__")
    __imul__ = _fixed("__imul__")

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = list(value)
            if len(range(*index.indices(len(self)))) != len(value):
                raise TypeError("Tuple has a fixed length; slice assignment must preserve it")
        super().__setitem__(index, value)

    def __repr__(self):
        return "(" + ", ".join(repr(v) for v in self) + ")"


class KeyedObject(dict):
    """Insertion-ordered key -> value mapping with no inherited members."""

    def __repr__(self):
        return "{" + ", ".join(f"{k!r}: {v!r}" for k, v in self.items()) + "}"
