import logging

from jack import EvaluatorFn
from jack import CodeNode, JackValue
from jack.errors import JackAbort
from jack.types.environment import Environment

logger = logging.getLogger(__name__)


def abort_form(
    tail: list[CodeNode],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> JackValue:
    """(abort message) reports the message and stops the whole evaluation."""
    message = evaluate_fn(tail[0], env) if tail else "abort"
    logger.error("abort: %s", message)
    raise JackAbort(str(message))
