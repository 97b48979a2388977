"""Optional container-nesting limit for the encoder.

Callers that want a hard bound on props nesting (instead of whatever the
interpreter recursion limit allows) pass max_depth to the encoder, which
enters one DepthGuard per container level.

Thread-safe: each top-level encode call builds its own guard.
Python 3.13+.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field

from islandprops.constants import DEPTH_RESERVE_FRAMES, ENCODE_FRAMES_PER_LEVEL
from islandprops.diagnostics import DepthLimitExceededError
from islandprops.diagnostics.templates import ErrorTemplate

__all__ = ["DepthGuard", "depth_clamp"]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DepthGuard:
    """Context manager counting container levels during one encode call.

    Usage in encoding:
        guard = DepthGuard(max_depth=8, path=ctx.path, component=label)
        with guard:
            encoded = [self._encode(child, ctx) for child in children]

    The guard shares the encoder's live path list, so the error raised on
    the first level past the limit points at the container that crossed it.

    Attributes:
        max_depth: Container levels allowed, clamped to what the stack can hold
        path: Live list of keys/indices from the props root (shared, not copied)
        component: Island label for the error text
        current_depth: Container levels currently open
    """

    max_depth: int
    path: list[str] = field(default_factory=list)
    component: str | None = None
    current_depth: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.max_depth = depth_clamp(self.max_depth)

    def __enter__(self) -> DepthGuard:
        """Open one container level.

        The limit is checked BEFORE incrementing: __exit__ does not run when
        __enter__ raises.
        """
        if self.current_depth >= self.max_depth:
            raise DepthLimitExceededError(
                ErrorTemplate.max_depth_exceeded(
                    self.max_depth, tuple(self.path), component=self.component
                )
            )
        self.current_depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        self.current_depth -= 1


def depth_clamp(
    requested_depth: int,
    *,
    frames_per_level: int = ENCODE_FRAMES_PER_LEVEL,
    reserve_frames: int = DEPTH_RESERVE_FRAMES,
) -> int:
    """Clamp a container-level limit to what the recursion limit can hold.

    Each container level costs frames_per_level interpreter frames, so the
    deepest reachable level is (recursion limit - reserve) // frames_per_level.
    Logs a warning when the requested depth is lowered.

    Example:
        >>> depth_clamp(10, frames_per_level=1, reserve_frames=sys.getrecursionlimit() - 20)
        10
        >>> depth_clamp(500, frames_per_level=2, reserve_frames=sys.getrecursionlimit() - 20)
        10
    """
    max_safe_depth = (sys.getrecursionlimit() - reserve_frames) // frames_per_level
    if requested_depth > max_safe_depth:
        logger.warning(
            "Requested max_depth %d needs more than the recursion limit (%d) allows. "
            "Clamping to %d container levels.",
            requested_depth,
            sys.getrecursionlimit(),
            max_safe_depth,
        )
        return max_safe_depth
    return requested_depth
