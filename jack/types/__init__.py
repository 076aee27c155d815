from jack.types.symbol import Form, Symbol, Interner, INTERNER, intern
from jack.types.environment import Environment
from jack.types.closure import Closure
from jack.types.collections import List, Tuple, KeyedObject
from jack.types.signals import ReturnSignal

__all__ = [
    "Form",
    "Symbol",
    "Interner",
    "INTERNER",
    "intern",
    "Environment",
    "Closure",
    "List",
    "Tuple",
    "KeyedObject",
    "ReturnSignal",
]
