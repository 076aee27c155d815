# Core type aliases for Jack's data model.
# Code trees and runtime values are both plain Python objects: tagged nodes are
# lists headed by a Form, name reads are Symbols, everything else is a literal.
#
# Naming guidance:
# - CodeNode: use in reader/evaluator code to denote an unevaluated code tree.
# - JackValue: use in runtime code to denote an evaluated value.
# Both aliases resolve to `Any`; they exist to document intent in signatures.

from typing import Any, Callable

# Runtime value alias
JackValue = Any
# Code tree node alias
CodeNode = Any

# Evaluator function type: `run(node, env)` as passed to form handlers
EvaluatorFn = Callable[..., JackValue]
# Parser contract: source text -> sequence of top-level code nodes
ParserFn = Callable[[str], list]
