from __future__ import annotations

import logging
import sys
from typing import Literal, Optional, TextIO

from jack import JackValue, ParserFn
from jack.config import get_fatal_policy
from jack.errors import JackError, JackFatalError
from jack.evaluation.evaluator import run_codes
from jack.interpreter.result import ExecutionResult
from jack.reader.parser import parse
from jack.runtime_context import set_current_parser
from jack.types.environment import Environment
from jack.types.signals import ReturnSignal
from jack.builtins import register

logger = logging.getLogger(__name__)

FatalPolicy = Literal["exit", "raise"]


class Interpreter:
    """
    Orchestrates reading and evaluating Jack code via a pluggable parser.
    Maintains the seeded global frame across calls; each program runs in a
    fresh child of it.
    """

    def __init__(
        self,
        parser: ParserFn | None = None,
        *,
        out: Optional[TextIO] = None,
        on_fatal: FatalPolicy | None = None,
    ):
        self.parser: ParserFn = parser if parser is not None else parse
        self.on_fatal: FatalPolicy = on_fatal or get_fatal_policy()
        self.globals: Environment = Environment()
        register(self.globals, out)

    def execute(self, code: str) -> JackValue:
        """Parse and run `code`; errors propagate unchanged."""
        codes = list(self.parser(code))
        scope = self.globals.spawn()
        set_current_parser(self.parser)
        try:
            return run_codes(codes, scope)
        except ReturnSignal as signal:
            # `return` outside any function ends the program with its value
            return signal.value

    def eval(self, code: str) -> JackValue:
        """Run `code` and return its last value; fatal errors follow `on_fatal`."""
        try:
            return self.execute(code)
        except JackFatalError as err:
            if self.on_fatal == "raise":
                raise
            logger.debug("fatal %s, exiting", err.kind)
            print(err, file=sys.stderr)
            raise SystemExit(1) from err

    def run(self, code: str) -> ExecutionResult:
        """Run `code` for an embedding host: never exits, always returns a result."""
        try:
            value = self.execute(code)
        except JackFatalError as err:
            return ExecutionResult("error", error_kind=err.kind, error_message=str(err))
        except JackError as err:
            return ExecutionResult("error", error_kind=type(err).__name__, error_message=str(err))
        except Exception as err:
            logger.debug("host error during run", exc_info=True)
            return ExecutionResult("error", error_kind=type(err).__name__, error_message=str(err))
        return ExecutionResult("ok", value=value)


def evaluate(code: str, parser: ParserFn | None = None) -> JackValue:
    """Parse `code`, run it in a fresh child of a seeded global frame, return the last value."""
    return Interpreter(parser).eval(code)


__all__ = ["Interpreter", "ExecutionResult", "evaluate"]
