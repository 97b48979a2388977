"""Diagnostic system for props serialization errors.

Provides structured error diagnostics with codes, prop paths and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    CyclicReferenceError,
    DepthLimitExceededError,
    PropsDecodeError,
    PropsError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CyclicReferenceError",
    "DepthLimitExceededError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "PropsDecodeError",
    "PropsError",
]
