from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.evaluation.forms.operator_forms import binary, unary
from jack.types.environment import Environment
from jack.types.meta import meta_has


def _operands(name: str, tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn):
    if len(tail) != 2:
        raise JackArityError(f"{name} requires exactly 2 arguments")
    # Both operands always run, so side effects of the second are never skipped
    a = evaluate_fn(tail[0], env)
    b = evaluate_fn(tail[1], env)
    return a, b


def and_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    """(and a b) returns a if it is falsy, else b. Both operands are evaluated."""
    a, b = _operands("and", tail, env, evaluate_fn)
    return b if a else a


def or_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    """(or a b) returns a if it is truthy, else b. Both operands are evaluated."""
    a, b = _operands("or", tail, env, evaluate_fn)
    return a if a else b


xor_form = binary("xor", lambda a, b: bool(a) != bool(b))
not_form = unary("not", lambda a: not a)


def in_form(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
    """(in value key) is true when `value` holds `key`."""
    value, key = _operands("in", tail, env, evaluate_fn)
    return meta_has(value, key)
