from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.evaluation.apply import invoke
from jack.types.closure import Closure
from jack.types.environment import Environment
from jack.types.signals import ReturnSignal


def fn_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    # The body is every argument; the current frame is captured by reference.
    # With no body forms, calling the function yields no value.
    return Closure(env, tail)


def call_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """(call f arg ...) evaluates f, then each arg in the caller's frame, then invokes."""
    if not tail:
        raise JackArityError("call requires a function argument")
    target = evaluate_fn(tail[0], env)
    args = [evaluate_fn(arg, env) for arg in tail[1:]]
    return invoke(target, args)


def return_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    value = evaluate_fn(tail[0], env) if tail else None
    raise ReturnSignal(value)
