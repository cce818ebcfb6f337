"""Domain error types."""


class FitnessTrackerError(Exception):
    """Base class for application errors."""


class ValidationError(FitnessTrackerError):
    """Raised when a write request carries invalid values."""


class NotFoundError(FitnessTrackerError):
    """Raised when a requested record does not exist."""


class ProfileNotFoundError(NotFoundError):
    """Raised when the singleton profile row is missing."""


class WorkoutNotFoundError(NotFoundError):
    """Raised when a workout id does not match any row."""


class StorageError(FitnessTrackerError):
    """Raised when the underlying database fails."""


class UpstreamError(FitnessTrackerError):
    """Raised when the hosted language model call fails."""
