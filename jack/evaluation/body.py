from __future__ import annotations

from typing import Iterable

from jack import CodeNode, EvaluatorFn, JackValue
from jack.types.environment import Environment
from jack.types.symbol import Form


def is_tagged(node: CodeNode) -> bool:
    """True for an operation node: a list whose head is a Form."""
    return isinstance(node, list) and bool(node) and isinstance(node[0], Form)


def as_codes(body: CodeNode) -> list[CodeNode]:
    """Normalize a body argument to a code sequence.

    Bodies are normally lists of nodes; a lone tagged node or literal is
    treated as a one-statement body.
    """
    if is_tagged(body) or not isinstance(body, list):
        return [body]
    return body


def run_body(codes: Iterable[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    """Evaluate each node in order in `env`; the last result wins (None if empty)."""
    result: JackValue = None
    for code in codes:
        result = evaluate_fn(code, env)
    return result
