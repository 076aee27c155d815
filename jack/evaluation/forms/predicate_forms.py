from typing import Any, Callable

from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError, JackUnknownPredicate
from jack.types.collections import KeyedObject, Tuple
from jack.types.environment import Environment
from jack.types.symbol import name_of


def is_integer(val: Any) -> bool:
    # Unsigned 32-bit range; an integral float such as `(div 6 2)` counts
    if isinstance(val, float) and val.is_integer():
        val = int(val)
    return isinstance(val, int) and not isinstance(val, bool) and 0 <= val < 2 ** 32


PREDICATES: dict[str, Callable[[Any], bool]] = {
    "Integer": is_integer,
    "Null": lambda val: val is None,
    "Boolean": lambda val: isinstance(val, bool),
    "String": lambda val: isinstance(val, str),
    "Buffer": lambda val: isinstance(val, (bytes, bytearray, memoryview)),
    "Function": callable,
    "Tuple": lambda val: isinstance(val, Tuple),
    "List": lambda val: isinstance(val, list) and not isinstance(val, Tuple),
    "Object": lambda val: isinstance(val, KeyedObject),
}


def is_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """(is value Name) classifies the evaluated value; Name is not evaluated."""
    if len(tail) != 2:
        raise JackArityError("is requires exactly 2 arguments: (is value predicate)")
    value = evaluate_fn(tail[0], env)
    name = name_of(tail[1])
    predicate = PREDICATES.get(name) if isinstance(name, str) else None
    if predicate is None:
        raise JackUnknownPredicate(f"Unknown type {name}")
    return predicate(value)
