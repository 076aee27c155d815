"""Core evaluator for the Jack interpreter.

`run` is the single dispatch point: operation nodes go to the handler that the
FORMS table registers for their Form, Symbols are variable reads, and every
other node is a literal. Handlers receive their arguments unevaluated and
decide for themselves what to evaluate and when.
"""

from __future__ import annotations

import logging
from typing import Iterable

from jack import CodeNode, JackValue
from jack.errors import JackUnknownForm
from jack.types.environment import Environment
from jack.types.symbol import Form, Symbol
from jack.evaluation.body import run_body
from jack.evaluation.forms import FORMS

logger = logging.getLogger(__name__)


def run(node: CodeNode, env: Environment) -> JackValue:
    """Evaluate one code node in `env`."""
    match node:
        case list([Form() as head, *args]):
            handler = FORMS.get(head)
            if handler is None:
                raise JackUnknownForm(f"Unknown operation {head!r}")
            logger.debug("dispatch %r with %d args", head, len(args))
            return handler(args, env, run)
        case Symbol():
            return env.lookup(node)

    # --- Literals return as-is ---
    return node


def run_codes(codes: Iterable[CodeNode], env: Environment) -> JackValue:
    """Evaluate a code sequence in one frame, returning the last value."""
    return run_body(codes, env, run)
