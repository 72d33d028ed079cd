"""Structure-related exceptions: malformed class snapshots, unreadable skeletons."""

from pathlib import Path

from .base import CohesionLensError


class StructureError(CohesionLensError):
    """Base class for errors in the structural input."""

    pass


class MalformedClassStructureError(StructureError):
    """Raised when a class snapshot violates its invariants.

    Always points at a defect in whatever produced the snapshot.
    """

    def __init__(self, class_name: str, reason: str):
        super().__init__(
            f"Malformed class structure: {class_name or '<anonymous>'}",
            details={"class": class_name, "reason": reason},
        )
        self.class_name = class_name
        self.reason = reason


class SkeletonFileError(StructureError):
    """Raised when a skeleton file cannot be read or decoded."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Cannot load skeleton file: {path}",
            details={"path": str(path), "reason": reason},
        )
        self.path = path
        self.reason = reason
