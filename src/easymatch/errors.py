"""Error types for match dispatch."""

from typing import Any


class MatchExhaustionError(RuntimeError):
    """No arm matched the scrutinee.

    Raised by the dispatcher after every arm was scanned. Callers that need
    totality end their arm list with a wildcard arm.
    """

    scrutinee: Any
    arm_count: int

    def __init__(self, scrutinee: Any, arm_count: int):
        self.scrutinee = scrutinee
        self.arm_count = arm_count
        super().__init__(f"Non-exhaustive patterns: no arm matches {scrutinee!r}")
