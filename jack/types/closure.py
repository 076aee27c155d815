"""Closure representation for Jack function values."""

from __future__ import annotations

from typing import Sequence

from jack import CodeNode, JackValue
from jack.types.environment import Environment


class Closure:
    """A first-class function: a captured frame plus a body of code nodes.

    The frame is captured by reference, so later mutations of it are visible
    inside the body. Calling a Closure from Python runs it exactly as the
    `call` form would.
    """

    # __dict__ holds raw members written through `set`
    __slots__ = ("env", "codes", "__weakref__", "__dict__")

    def __init__(self, env: Environment, codes: Sequence[CodeNode]):
        self.env: Environment = env
        self.codes: list[CodeNode] = list(codes)

    def __call__(self, *args: JackValue) -> JackValue:
        from jack.evaluation.apply import apply_closure
        return apply_closure(self, args)

    def __repr__(self) -> str:
        return f"<fn/{len(self.codes)}>"
