"""Arithmetic and comparison forms.

Each form evaluates its operands left to right and applies the host Python
operator; no coercion happens beyond what Python itself does. `eq` and `neq`
additionally keep booleans apart from numbers.
"""

import operator
from typing import Callable

from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.types.environment import Environment

FormHandler = Callable[[list[CodeNode], Environment, EvaluatorFn], JackValue]


def binary(name: str, op: Callable[[JackValue, JackValue], JackValue]) -> FormHandler:
    """Build a form handler applying `op` to two evaluated operands."""

    def handler(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
        if len(tail) != 2:
            raise JackArityError(f"{name} requires exactly 2 arguments")
        a = evaluate_fn(tail[0], env)
        b = evaluate_fn(tail[1], env)
        return op(a, b)

    handler.__name__ = f"{name}_form"
    return handler


def unary(name: str, op: Callable[[JackValue], JackValue]) -> FormHandler:
    """Build a form handler applying `op` to one evaluated operand."""

    def handler(tail: list[CodeNode], env: Environment, evaluate_fn: EvaluatorFn) -> JackValue:
        if len(tail) != 1:
            raise JackArityError(f"{name} requires exactly 1 argument")
        return op(evaluate_fn(tail[0], env))

    handler.__name__ = f"{name}_form"
    return handler


def same_value(a: JackValue, b: JackValue) -> bool:
    """Value equality that never equates a boolean with a number."""
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return a == b


# -------------------------------
# Comparison
# -------------------------------
le_form = binary("le", operator.le)
lt_form = binary("lt", operator.lt)
ge_form = binary("ge", operator.ge)
gt_form = binary("gt", operator.gt)
eq_form = binary("eq", same_value)
neq_form = binary("neq", lambda a, b: not same_value(a, b))

# -------------------------------
# Arithmetic
# -------------------------------
add_form = binary("add", operator.add)
sub_form = binary("sub", operator.sub)
mul_form = binary("mul", operator.mul)
div_form = binary("div", operator.truediv)
pow_form = binary("pow", operator.pow)
mod_form = binary("mod", operator.mod)
unm_form = unary("unm", operator.neg)
