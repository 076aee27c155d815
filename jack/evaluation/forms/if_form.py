from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.evaluation.body import as_codes, run_body
from jack.types.environment import Environment


def if_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """
    (if cond1 body1 cond2 body2 ... [else-body])
    Conditions are tried left to right; the body paired with the first truthy
    one runs in the current frame. A trailing unpaired body is the default.
    """
    n = len(tail)
    i = 0
    while i + 1 < n:
        if evaluate_fn(tail[i], env):
            return run_body(as_codes(tail[i + 1]), env, evaluate_fn)
        i += 2
    if i < n:
        return run_body(as_codes(tail[i]), env, evaluate_fn)
    return None
