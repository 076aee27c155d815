"""Runtime environment for Jack.

An Environment is one lexical frame: an own mapping of names to values, a link
to its `outer` frame, and the argument list of the call that created it.
Declarations bind in the local frame; reads and assignments walk outward to
the nearest frame that owns the name.
"""

from __future__ import annotations

from io import StringIO
from typing import Iterable, Optional

from jack import JackValue
from jack.errors import JackUnboundName
from jack.types.symbol import Symbol, name_of


class Environment:
    """Hierarchical mapping from names to Jack values."""

    __slots__ = ("vars", "outer", "arguments")

    def __init__(self, outer: Optional[Environment] = None, arguments: Iterable[JackValue] = ()):
        self.vars: dict[str, JackValue] = {}
        self.outer: Environment | None = outer
        # Positional values of the call that created this frame (empty otherwise)
        self.arguments: tuple[JackValue, ...] = tuple(arguments)

    def spawn(self, arguments: Iterable[JackValue] = ()) -> Environment:
        """Create a child frame whose parent is this frame."""
        return Environment(outer=self, arguments=arguments)

    def define(self, name: str | Symbol, value: JackValue) -> None:
        """Bind `name` to `value` in this frame only."""
        self.vars[name_of(name)] = value

    def declare_params(self, names: Iterable[str | Symbol]) -> None:
        """Bind each name to the call argument at the same position (None if missing)."""
        args = self.arguments
        for i, name in enumerate(names):
            self.vars[name_of(name)] = args[i] if i < len(args) else None

    def declare_vars(self, names: Iterable[str | Symbol]) -> None:
        """Bind each name to no value in this frame."""
        for name in names:
            self.vars[name_of(name)] = None

    def find(self, name: str | Symbol) -> Optional[Environment]:
        """Find the nearest environment in the chain that owns `name`."""
        key = name_of(name)
        env: Optional[Environment] = self
        while env is not None:
            if key in env.vars:
                return env
            env = env.outer
        return None

    def assign(self, name: str | Symbol, value: JackValue) -> JackValue:
        """Update the nearest existing binding for `name`.

        Raises JackUnboundName if no frame in the chain owns the name.
        """
        env = self.find(name)
        if env is None:
            raise JackUnboundName(f"Attempt to access undefined variable '{name_of(name)}'")
        env.vars[name_of(name)] = value
        return value

    def lookup(self, name: str | Symbol) -> JackValue:
        """Look up the value bound to `name`.

        Raises JackUnboundName if not found. A declared but unset name is None.
        """
        env = self.find(name)
        if env is None:
            raise JackUnboundName(f"Attempt to access undefined variable '{name_of(name)}'")
        return env.vars[name_of(name)]

    def update(self, mapping: dict[str | Symbol, JackValue]) -> None:
        """Bulk-define a mapping of name -> value in the current frame."""
        for k, v in mapping.items():
            self.vars[name_of(k)] = v

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as frame:
                env._write_vars(frame)
                chain.append(frame.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
