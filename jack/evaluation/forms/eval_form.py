from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackArityError
from jack.evaluation.body import run_body
from jack.runtime_context import get_current_parser
from jack.types.environment import Environment


def eval_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """
    (eval source)
    Parses the evaluated source string and runs it in the current frame, so
    declarations it makes are visible to the code that follows.
    """
    if len(tail) != 1:
        raise JackArityError("eval requires exactly 1 argument")
    source = evaluate_fn(tail[0], env)
    codes = get_current_parser()(source)
    return run_body(codes, env, evaluate_fn)
