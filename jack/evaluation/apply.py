"""Invocation engine for Jack.

Centralizes what it means to call a function value:
- Closures run their body in a fresh child of the captured frame, with the
  call's arguments attached to that child. A ReturnSignal raised anywhere in
  the body stops here and becomes the call's result.
- Python callables registered in the environment are called with the
  positional values.
- Anything else is a fatal JackNotCallable.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from jack import JackValue
from jack.errors import JackNotCallable
from jack.types.closure import Closure
from jack.types.signals import ReturnSignal

logger = logging.getLogger(__name__)


def apply_closure(fn: Closure, args: Sequence[JackValue]) -> JackValue:
    """Run `fn` with already-evaluated `args`."""
    # Lazy import: the evaluator imports the form table, which imports this module
    from jack.evaluation.evaluator import run_codes

    frame = fn.env.spawn(args)
    logger.debug("invoke %r with %d args", fn, len(args))
    try:
        return run_codes(fn.codes, frame)
    except ReturnSignal as signal:
        return signal.value


def invoke(target: Any, args: Sequence[JackValue]) -> JackValue:
    """Apply either a Closure or a Python callable."""
    if isinstance(target, Closure):
        return apply_closure(target, args)
    if callable(target):
        return target(*args)
    raise JackNotCallable(f"Attempt to call non-function {target!r}")
