# Non-local return for Jack closures.
# Usage:
#   (call (fn (while true (return 42))))  ; => 42
#
# `return` raises ReturnSignal; only the closure invocation boundary catches it.
# Loops, `if` and every other form let it pass through untouched.

from typing import Any


class ReturnSignal(Exception):
    """Carries a function's result to the nearest enclosing closure call."""

    def __init__(self, value: Any):
        super().__init__(f"ReturnSignal(value={value!r})")
        self.value: Any = value
