"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


def format_prop_path(prop_path: tuple[str, ...]) -> str:
    """Render a prop path as props.a[0].b for diagnostics."""
    parts = ["props"]
    for segment in prop_path:
        if segment.startswith("["):
            parts.append(segment)
        else:
            parts.append(f".{segment}")
    return "".join(parts)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    @staticmethod
    def island_label(display_name: str, hydrate: str) -> str:
        """Label identifying an island in error text: <Counter client:load>."""
        return f"<{display_name} client:{hydrate}>"

    @staticmethod
    def cyclic_reference(
        display_name: str, hydrate: str, prop_path: tuple[str, ...]
    ) -> Diagnostic:
        """Container found on its own ancestor path.

        Args:
            display_name: Component display name
            hydrate: Hydration directive label
            prop_path: Path from the props root to the repeated container

        Returns:
            Diagnostic for CYCLIC_REFERENCE
        """
        label = ErrorTemplate.island_label(display_name, hydrate)
        msg = (
            f"Cyclic reference detected while serializing props for {label}!\n\n"
            "Cyclic references cannot be safely serialized for client-side usage. "
            "Please remove the cyclic reference."
        )
        return Diagnostic(
            code=DiagnosticCode.CYCLIC_REFERENCE,
            message=msg,
            hint=f"{format_prop_path(prop_path)} refers back to one of its own ancestors",
            component=label,
            prop_path=prop_path,
        )

    @staticmethod
    def max_depth_exceeded(
        max_depth: int, prop_path: tuple[str, ...] = (), *, component: str | None = None
    ) -> Diagnostic:
        """Container nesting deeper than the configured limit.

        Args:
            max_depth: The maximum allowed depth
            prop_path: Path to the container that crossed the limit
            component: Island label, when known

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = (
            f"Maximum props nesting depth ({max_depth}) exceeded at "
            f"{format_prop_path(prop_path)}"
        )
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Flatten the props or raise max_depth",
            component=component,
            prop_path=prop_path,
        )

    @staticmethod
    def unknown_prop_type(tag: object) -> Diagnostic:
        """Node carries a tag this decoder does not know.

        Args:
            tag: The unrecognized tag value

        Returns:
            Diagnostic for UNKNOWN_PROP_TYPE
        """
        msg = f"Unknown prop type tag {tag!r}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_PROP_TYPE,
            message=msg,
            hint="Producer and consumer must be deployed from the same version",
            tag=tag if isinstance(tag, int) else None,
        )

    @staticmethod
    def malformed_node(tag: int | None, reason: str) -> Diagnostic:
        """Node shape or payload cannot be reconstructed.

        Args:
            tag: Wire tag of the node (None when the node has no usable tag)
            reason: What was wrong with the node

        Returns:
            Diagnostic for MALFORMED_NODE
        """
        msg = f"Malformed prop node: {reason}"
        return Diagnostic(
            code=DiagnosticCode.MALFORMED_NODE,
            message=msg,
            hint="The embedded props text was altered or produced by an incompatible encoder",
            tag=tag,
        )

    @staticmethod
    def unsupported_value(value_type: str, label: str, prop_path: tuple[str, ...]) -> Diagnostic:
        """Value kind outside the supported set, encoded as undefined.

        Args:
            value_type: Python type name of the value
            label: Island label from ErrorTemplate.island_label()
            prop_path: Path to the value

        Returns:
            Diagnostic for UNSUPPORTED_VALUE (warning)
        """
        msg = (
            f"Cannot serialize {value_type} at {format_prop_path(prop_path)} "
            f"for {label}; sending undefined"
        )
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_VALUE,
            message=msg,
            hint="Pass plain data: scalars, lists, dicts, sets, datetimes, patterns, URLs, buffers",
            component=label,
            prop_path=prop_path,
            value_type=value_type,
            severity="warning",
        )

    @staticmethod
    def non_finite_number(value: float, label: str, prop_path: tuple[str, ...]) -> Diagnostic:
        """NaN or infinity, encoded as null like JSON does.

        Args:
            value: The non-finite float
            label: Island label from ErrorTemplate.island_label()
            prop_path: Path to the value

        Returns:
            Diagnostic for NON_FINITE_NUMBER (warning)
        """
        msg = (
            f"Non-finite number {value!r} at {format_prop_path(prop_path)} "
            f"for {label}; sending null"
        )
        return Diagnostic(
            code=DiagnosticCode.NON_FINITE_NUMBER,
            message=msg,
            component=label,
            prop_path=prop_path,
            value_type="float",
            severity="warning",
        )
