"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic
from .templates import format_prop_path

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate messages to prevent leaking prop contents into logs
        max_content_length: Maximum message length when sanitizing

    Example:
        >>> from islandprops.diagnostics import ErrorTemplate
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unknown_prop_type(99)))
        UNKNOWN_PROP_TYPE: Unknown prop type tag 99
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[CYCLIC_REFERENCE]: Cyclic reference detected while ...
              --> props.a.self
              = component: <Counter client:load>
              = help: props.a.self refers back to one of its own ancestors
        """
        message = self._maybe_sanitize(diagnostic.message)
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.prop_path is not None:
            parts.append(f"  --> {format_prop_path(diagnostic.prop_path)}")

        if diagnostic.component:
            parts.append(f"  = component: {diagnostic.component}")

        if diagnostic.value_type:
            parts.append(f"  = type: {diagnostic.value_type}")

        if diagnostic.tag is not None:
            parts.append(f"  = tag: {diagnostic.tag}")

        if diagnostic.hint:
            parts.append(f"  = help: {diagnostic.hint}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            UNKNOWN_PROP_TYPE: Unknown prop type tag 99
        """
        message = self._maybe_sanitize(diagnostic.message).replace("\n", " ")
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "UNKNOWN_PROP_TYPE", "code_value": 2001, "message": "...", ...}
        """
        data: dict[str, str | int | list[str]] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.component:
            data["component"] = diagnostic.component

        if diagnostic.prop_path is not None:
            data["prop_path"] = list(diagnostic.prop_path)

        if diagnostic.value_type:
            data["value_type"] = diagnostic.value_type

        if diagnostic.tag is not None:
            data["tag"] = diagnostic.tag

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        return json.dumps(data, ensure_ascii=False)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled."""
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
