"""islandprops exception hierarchy with structured diagnostics.

All exceptions may store a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class PropsError(Exception):
    """Base exception for all props serialization errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PropsError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class CyclicReferenceError(PropsError):
    """A container is reachable from itself.

    Example:
        o = {}
        o["self"] = o  <- cannot be linearized

    Raised the moment the encoder meets a container already on its own
    ancestor path. The message names the island so the failure can be traced
    without inspecting the props.

    Attributes:
        display_name: Component display name from the render metadata
        hydrate: Hydration directive from the render metadata
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        display_name: str = "",
        hydrate: str = "",
    ) -> None:
        """Initialize CyclicReferenceError.

        Args:
            message: Error message string OR Diagnostic object
            display_name: Component display name
            hydrate: Hydration directive label
        """
        super().__init__(message)
        self.display_name = display_name
        self.hydrate = hydrate


class DepthLimitExceededError(PropsError):
    """Container nesting exceeded the configured max_depth.

    Only raised when the caller opts into a depth limit. Without one, nesting
    is bounded by the interpreter recursion limit alone.
    """


class PropsDecodeError(PropsError):
    """Encoded node could not be reconstructed.

    Only raised by strict decoding. Lenient decoding (the default) degrades
    the node to UNDEFINED instead.

    Attributes:
        node: The raw node that failed to decode
    """

    def __init__(self, message: str | Diagnostic, *, node: object = None) -> None:
        """Initialize PropsDecodeError.

        Args:
            message: Error message string OR Diagnostic object
            node: The raw node that failed to decode
        """
        super().__init__(message)
        self.node = node
