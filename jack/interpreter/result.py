from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal, Optional


@dataclass
class ExecutionResult:
    """The structured result of running a program without ending the process."""
    status: Literal["ok", "error"]
    value: Any = None
    error_kind: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    def format_error(self) -> str:
        """Formats the error as `kind: message`; empty for successful runs."""
        if self.status != "error":
            return ""
        msg = str(self.error_message or "Unknown error")
        if self.error_kind:
            return f"{self.error_kind}: {msg}"
        return msg
