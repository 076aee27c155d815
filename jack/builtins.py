"""Host bindings seeded into the Jack global frame.

`print` writes its arguments for diagnostics; `range` builds a generator
callable for the `for` form's generator protocol.
"""
from __future__ import annotations

import sys
from itertools import count
from typing import Callable, Optional, TextIO

from jack import JackValue
from jack.types.environment import Environment


def format_value(value: JackValue) -> str:
    """Render a value the way Jack source spells it."""
    if value is None:
        return "none"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, str):
        return value
    return repr(value)


def make_print(out: Optional[TextIO] = None) -> Callable[..., None]:
    """Return a `print` that writes to `out` (stdout at call time if None)."""

    def print_builtin(*values: JackValue) -> None:
        stream = out if out is not None else sys.stdout
        stream.write(" ".join(format_value(v) for v in values) + "\n")

    return print_builtin


def range_builtin(n: int) -> Callable[[], Optional[int]]:
    """Generator callable yielding 0..n-1, then None on every later call."""
    counter = count()

    def next_value() -> Optional[int]:
        i = next(counter)
        return i if i < n else None

    return next_value


def register(env: Environment, out: Optional[TextIO] = None) -> None:
    """Register all host bindings into the given environment."""
    env.update(
        {
            "print": make_print(out),
            "range": range_builtin,
        }
    )
