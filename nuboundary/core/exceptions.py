"""Exceptions raised by nuboundary."""


class NuboundaryError(Exception):
    """Base class for all nuboundary errors."""


class InvalidCandidateSequenceError(NuboundaryError, ValueError):
    """Raised when a boundary scanner returns unsorted, duplicated or out-of-range offsets."""

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"invalid candidate sequence: {message} (offset {offset})")
        self.offset = offset


class ModelFormatError(NuboundaryError, ValueError):
    """Raised when a model file or dictionary cannot be read as a maxent model."""


class TrainingError(NuboundaryError):
    """Raised when training cannot proceed, e.g. because there are no events."""
