from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.types.environment import Environment


def params_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """(params a b ...) binds each name to the call argument at its position."""
    env.declare_params(tail)
    return None


def vars_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """(vars a b ...) declares each name in the current frame with no value."""
    env.declare_vars(tail)
    return None


def assign_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    if len(tail) != 2:
        raise JackArityError("assign requires exactly 2 arguments: (assign name value)")
    name, val_expr = tail
    value = evaluate_fn(val_expr, env)
    return env.assign(name, value)


def lookup_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    if len(tail) != 1:
        raise JackArityError("lookup requires exactly 1 argument: (lookup name)")
    return env.lookup(tail[0])
