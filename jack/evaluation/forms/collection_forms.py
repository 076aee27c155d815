"""Collection constructors and keyed access forms.

`get`, `set` and `delete` go through the meta access policy, so a Form used
as a key reaches the value's meta slots instead of its members.
"""

from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.types.collections import KeyedObject, List, Tuple
from jack.types.environment import Environment
from jack.types.meta import meta_delete, meta_get, meta_set


def list_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    return List(evaluate_fn(e, env) for e in tail)


def tuple_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    return Tuple(evaluate_fn(e, env) for e in tail)


def object_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    """(object k1 v1 k2 v2 ...) builds a KeyedObject; a later duplicate key overwrites."""
    obj = KeyedObject()
    for i in range(0, len(tail), 2):
        key = evaluate_fn(tail[i], env)
        value = evaluate_fn(tail[i + 1], env) if i + 1 < len(tail) else None
        meta_set(obj, key, value)
    return obj


def len_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    if len(tail) != 1:
        raise JackArityError("len requires exactly 1 argument")
    return len(evaluate_fn(tail[0], env))


def get_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    if len(tail) != 2:
        raise JackArityError("get requires exactly 2 arguments: (get obj key)")
    obj = evaluate_fn(tail[0], env)
    key = evaluate_fn(tail[1], env)
    return meta_get(obj, key)


def set_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    if len(tail) != 3:
        raise JackArityError("set requires exactly 3 arguments: (set obj key value)")
    obj = evaluate_fn(tail[0], env)
    key = evaluate_fn(tail[1], env)
    value = evaluate_fn(tail[2], env)
    return meta_set(obj, key, value)


def delete_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    if len(tail) != 2:
        raise JackArityError("delete requires exactly 2 arguments: (delete obj key)")
    obj = evaluate_fn(tail[0], env)
    key = evaluate_fn(tail[1], env)
    return meta_delete(obj, key)
