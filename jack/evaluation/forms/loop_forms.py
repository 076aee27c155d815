"""Looping forms for Jack: while, for.

Each loop is a small evaluator object that closes over the loop header and
reuses the main evaluator to run its body. Both loops run every iteration in
one child frame of the enclosing scope, so bindings made by the body survive
from one iteration to the next but never leak out of the loop.
"""

from __future__ import annotations

from typing import Any, Iterator

from jack import CodeNode, JackValue, EvaluatorFn
from jack.errors import JackArityError
from jack.evaluation.body import run_body
from jack.types.environment import Environment
from jack.types.meta import MetaRecord, adapt, meta_get
from jack.types.symbol import name_of


class WhileLoopEval:
    """Implements (while cond body...)."""

    def __init__(self, cond: CodeNode, body: list[CodeNode], evaluate_fn: EvaluatorFn):
        self.cond: CodeNode = cond
        self.body: list[CodeNode] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    def eval(self, env: Environment) -> JackValue:
        """Re-test `cond` in the loop frame before every iteration."""
        local_env = env.spawn()
        last_value = None
        while self.evaluate_fn(self.cond, local_env):
            last_value = run_body(self.body, local_env, self.evaluate_fn)
        return last_value


class ForLoopEval:
    """Implements (for collection names body...).

    `names` is one name (bind each item) or two (bind position or key, then
    item). How the collection is walked depends on its meta record:
    generator call, then index by len, then keys.
    """

    def __init__(self, names: Any, body: list[CodeNode], evaluate_fn: EvaluatorFn):
        if not isinstance(names, list):
            names = [names]
        if len(names) not in (1, 2):
            raise JackArityError(f"for binds one or two names, got {len(names)}")
        self.names: list[str] = [name_of(n) for n in names]
        self.body: list[CodeNode] = body
        self.evaluate_fn: EvaluatorFn = evaluate_fn

    def eval(self, collection: Any, env: Environment) -> JackValue:
        local_env = env.spawn()
        last_value = None
        for key, item in self._items(collection, adapt(collection)):
            if len(self.names) == 2:
                local_env.define(self.names[0], key)
                local_env.define(self.names[1], item)
            else:
                local_env.define(self.names[0], item)
            last_value = run_body(self.body, local_env, self.evaluate_fn)
        return last_value

    @staticmethod
    def _items(collection: Any, meta: MetaRecord) -> Iterator[tuple[Any, Any]]:
        if meta.supports("call"):
            index = 0
            while (item := meta.call()) is not None:
                yield index, item
                index += 1
        elif meta.supports("len"):
            for index in range(meta.len()):
                yield index, meta_get(collection, index)
        elif meta.supports("keys"):
            for key in meta.keys():
                yield key, meta_get(collection, key)


def while_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """Form (while cond ...): loop while cond is truthy."""
    if not tail:
        raise JackArityError("while requires a condition")
    return WhileLoopEval(tail[0], tail[1:], evaluate_fn).eval(env)


def for_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """Form (for collection names ...): iterate a generator, sequence or keyed value."""
    if len(tail) < 2:
        raise JackArityError("for requires a collection and binding names")
    collection = evaluate_fn(tail[0], env)
    return ForLoopEval(tail[1], tail[2:], evaluate_fn).eval(collection, env)
