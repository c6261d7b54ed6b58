"""Error types raised by the date sampling functions."""

from typing import Optional


class ValidationError(ValueError):
    """
    Raised when a date sampling function receives input it cannot satisfy.

    **Conceptual**: Every precondition (bounds, century range, age of
    majority) is checked before any randomness is consumed, so a raised
    ValidationError means nothing happened. Failures are deterministic:
    retrying with the same input fails the same way.

    **Matching**: Callers can branch on `kind` (always "validation") rather
    than on the class, and may match on `message`, whose wording is kept
    stable. `source` names the function that rejected the input.

    Attributes:
        message: Human-readable description of the violated constraint.
        kind: Stable machine-readable error kind.
        source: Name of the rejecting function, when known.
    """

    kind = "validation"

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.source = source
