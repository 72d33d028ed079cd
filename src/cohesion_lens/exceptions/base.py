"""Base exception for Cohesion Lens."""

from typing import Mapping, Optional


class CohesionLensError(Exception):
    """Base exception for all Cohesion Lens errors.

    ``details`` carries the offending values (metric id, class name, config
    key, ...) so callers can report them without parsing the message. Empty
    values are left out of str().
    """

    def __init__(self, message: str, details: Optional[Mapping[str, object]] = None):
        super().__init__(message)
        self.message = message
        self.details: dict[str, object] = dict(details or {})

    def __str__(self) -> str:
        shown = [f"{k}={v}" for k, v in self.details.items() if v not in (None, "")]
        if shown:
            return f"{self.message} ({', '.join(shown)})"
        return self.message
