"""Meta-adapter registry: uniform access to heterogeneous host values.

Every container value that Jack code touches gets a MetaRecord describing what
it can do. The record's kind, and so its capability set, is decided once from
the value's intrinsic type and never revisited:

- sequence (list, Tuple, tuple, bytearray, ...): len, get/set/delete/has by index
- callable (Closure, Python functions): call; a zero-argument call is the
  generator protocol, yielding items until None
- keyed (dicts, KeyedObject, other host objects): keys, get/set/delete/has

Records live in a side table keyed by object id and are evicted when their
value is collected. Values that refuse weak references are never cached:
their record holds them strongly and lasts only as long as the caller keeps it.

The module-level `meta_get`/`meta_set`/`meta_has`/`meta_delete` functions
implement the access policy shared by the `get`/`set`/`delete`/`in` forms.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Mapping, MutableSequence, Sequence
from typing import Any, Optional

from jack import JackValue
from jack.types.collections import Tuple
from jack.types.symbol import Form, Symbol

logger = logging.getLogger(__name__)

# Values with no members of their own; the access policy ignores them.
SCALARS = (type(None), bool, int, float, complex, str, bytes, Form, Symbol)


class MetaRecord:
    """Base adapter. Holds the Form-keyed slot table and a handle on its target."""

    __slots__ = ("slots", "_ref", "_pinned")
    kind = "scalar"
    capabilities: frozenset[str] = frozenset()

    def __init__(self, target: Any = None):
        self.slots: dict[str, JackValue] = {}
        self._ref: Optional[weakref.ref] = None
        self._pinned: Any = None
        if target is not None:
            try:
                self._ref = weakref.ref(target)
            except TypeError:
                self._pinned = target

    @property
    def target(self) -> Any:
        return self._pinned if self._ref is None else self._ref()

    @property
    def pinned(self) -> bool:
        return self._ref is None

    def supports(self, capability: str) -> bool:
        return capability in self.capabilities

    def __repr__(self) -> str:
        return f"<MetaRecord {self.kind} {sorted(self.capabilities)}>"


class SequenceMeta(MetaRecord):
    """Index access within `0..len-1`; string keys reach raw members.

    Writing at index `len` appends to a growable list. Any other key is
    ignored on write and reads as no value.
    """

    __slots__ = ()
    kind = "sequence"
    capabilities = frozenset({"len", "get", "set", "has", "delete"})

    def len(self) -> int:
        return len(self.target)

    def has(self, key: Any) -> bool:
        index = _as_index(key)
        if index is not None:
            return 0 <= index < len(self.target)
        return isinstance(key, str) and key in _members(self.target)

    def get(self, key: Any) -> JackValue:
        if not self.has(key):
            return None
        return _read_own(self.target, key)

    def set(self, key: Any, value: JackValue) -> JackValue:
        seq = self.target
        if not isinstance(seq, MutableSequence):
            return None
        index = _as_index(key)
        if index is None:
            if not isinstance(key, str) or key.startswith("_") or not hasattr(seq, "__dict__"):
                return None
            setattr(seq, key, value)
        elif 0 <= index < len(seq):
            seq[index] = value
        elif index == len(seq) and not isinstance(seq, Tuple):
            seq.append(value)
        else:
            return None
        return value

    def delete(self, key: Any) -> None:
        seq = self.target
        if not self.has(key) or not isinstance(seq, MutableSequence):
            return
        index = _as_index(key)
        if index is None:
            delattr(seq, key)
        elif isinstance(seq, Tuple):
            seq[index] = None
        else:
            del seq[index]


class CallableMeta(MetaRecord):
    __slots__ = ()
    kind = "callable"
    capabilities = frozenset({"call"})

    def call(self, *args: JackValue) -> JackValue:
        return self.target(*args)


class KeyedMeta(MetaRecord):
    __slots__ = ()
    kind = "keyed"
    capabilities = frozenset({"keys", "get", "set", "has", "delete"})

    def keys(self) -> list:
        obj = self.target
        if isinstance(obj, Mapping):
            return list(obj.keys())
        return [k for k in _members(obj) if not k.startswith("_")]

    def has(self, key: Any) -> bool:
        return _has_own(self.target, key)

    def get(self, key: Any) -> JackValue:
        obj = self.target
        if isinstance(obj, Mapping):
            return obj.get(key) if _hashable(key) else None
        if isinstance(key, str):
            return _members(obj).get(key)
        return None

    def set(self, key: Any, value: JackValue) -> JackValue:
        obj = self.target
        if isinstance(obj, Mapping):
            obj[key] = value
        else:
            setattr(obj, str(key), value)
        return value

    def delete(self, key: Any) -> None:
        obj = self.target
        if not _has_own(obj, key):
            return
        if isinstance(obj, Mapping):
            del obj[key]
        else:
            delattr(obj, key)


_SCALAR_META = MetaRecord()


class MetaRegistry:
    """Side table mapping live values to their MetaRecord."""

    __slots__ = ("_records",)

    def __init__(self):
        self._records: dict[int, MetaRecord] = {}

    def adapt(self, value: Any) -> MetaRecord:
        """Return the MetaRecord for `value`.

        Records for weak-referenceable values are cached until the value is
        collected. Other values (plain `list`, `dict`, `tuple`) get a fresh
        record on every call, so Form-keyed slots do not persist on them.
        """
        if isinstance(value, SCALARS):
            return _SCALAR_META
        key = id(value)
        record = self._records.get(key)
        if record is not None:
            return record
        record = classify(value)
        if record.pinned:
            # A cached entry would keep the value alive, so it is rebuilt per use
            return record
        self._records[key] = record
        weakref.finalize(value, self._records.pop, key, None)
        logger.debug("meta record %s created for %s", record.kind, type(value).__name__)
        return record

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._records

    def __len__(self) -> int:
        return len(self._records)


def classify(value: Any) -> MetaRecord:
    """Build a fresh record for `value` from its intrinsic kind."""
    if _is_sequence(value):
        return SequenceMeta(value)
    if callable(value):
        return CallableMeta(value)
    return KeyedMeta(value)


REGISTRY = MetaRegistry()


def adapt(value: Any) -> MetaRecord:
    return REGISTRY.adapt(value)


# -------------------------------
# Access policy
# -------------------------------
def meta_get(obj: Any, key: Any) -> JackValue:
    """Read `key` from `obj`: Form slot, own member, record `get`, raw attribute."""
    if isinstance(obj, SCALARS):
        return None
    record = adapt(obj)
    if isinstance(key, Form):
        return record.slots.get(key.id)
    if _has_own(obj, key):
        return _read_own(obj, key)
    if record.supports("get"):
        return record.get(key)
    if isinstance(key, str) and not key.startswith("_"):
        return getattr(obj, key, None)
    return None


def meta_set(obj: Any, key: Any, value: JackValue) -> JackValue:
    """Write `key` on `obj`: Form slot, record `set` (own members included), raw attribute."""
    if isinstance(obj, SCALARS):
        return None
    record = adapt(obj)
    if isinstance(key, Form):
        record.slots[key.id] = value
        return value
    if record.supports("set"):
        return record.set(key, value)
    if not hasattr(obj, "__dict__"):
        return None
    setattr(obj, str(key), value)
    return value


def meta_has(obj: Any, key: Any) -> bool:
    if isinstance(obj, SCALARS):
        return False
    record = adapt(obj)
    if isinstance(key, Form):
        return key.id in record.slots
    if record.supports("has"):
        return record.has(key)
    return _has_own(obj, key)


def meta_delete(obj: Any, key: Any) -> None:
    if isinstance(obj, SCALARS):
        return None
    record = adapt(obj)
    if isinstance(key, Form):
        record.slots.pop(key.id, None)
    elif record.supports("delete"):
        record.delete(key)
    elif _has_own(obj, key):
        delattr(obj, key)
    return None


# -------------------------------
# Helpers
# -------------------------------
def _as_index(key: Any) -> Optional[int]:
    """Integral numbers as a sequence index (`2.0` is `2`); None for other keys."""
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, float) and key.is_integer():
        return int(key)
    return None


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _hashable(key: Any) -> bool:
    try:
        hash(key)
    except TypeError:
        return False
    return True


def _members(obj: Any) -> Mapping:
    return getattr(obj, "__dict__", None) or {}


def _has_own(obj: Any, key: Any) -> bool:
    if isinstance(obj, Mapping):
        return _hashable(key) and key in obj
    if _is_sequence(obj):
        index = _as_index(key)
        return index is not None and 0 <= index < len(obj)
    return isinstance(key, str) and key in _members(obj)


def _read_own(obj: Any, key: Any) -> JackValue:
    if isinstance(obj, Mapping):
        return obj[key]
    if _is_sequence(obj):
        index = _as_index(key)
        if index is not None:
            return obj[index]
    return getattr(obj, key)
