"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Encoding errors (value graph cannot be linearized)
        2000-2999: Decoding errors (tagged tree cannot be reconstructed)
        3000-3999: Encoding warnings (value degraded, encoding continued)
    """

    # Encoding errors (1000-1999)
    CYCLIC_REFERENCE = 1001
    MAX_DEPTH_EXCEEDED = 1002

    # Decoding errors (2000-2999)
    UNKNOWN_PROP_TYPE = 2001
    MALFORMED_NODE = 2002

    # Encoding warnings (3000-3999)
    UNSUPPORTED_VALUE = 3001
    NON_FINITE_NUMBER = 3002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Carries enough context to act on a
    failure without inspecting the value graph that caused it.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        component: Island label, e.g. "<Counter client:load>"
        prop_path: Keys/indices from the props root to the offending value
        value_type: Python type name of the offending value
        tag: Wire tag of the offending node (decoding only)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    component: str | None = None
    prop_path: tuple[str, ...] | None = None
    value_type: str | None = None
    tag: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[CYCLIC_REFERENCE]: Cyclic reference detected while ...
              --> props.items[0].parent
              = component: <Counter client:load>
              = help: Remove the cyclic reference

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
