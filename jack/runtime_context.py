from __future__ import annotations
from typing import Optional

from jack import ParserFn

# NOTE: process-global, like the interner. The Interpreter installs its parser
# here before running so the `eval` form reads source the same way.
_current_parser: Optional[ParserFn] = None


def set_current_parser(parser: Optional[ParserFn]) -> None:
    global _current_parser
    _current_parser = parser


def get_current_parser() -> ParserFn:
    if _current_parser is None:
        from jack.reader.parser import parse
        return parse
    return _current_parser
