class DomainError(Exception):
    """Base exception for roster rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidNameError(ValidationError):
    """Raised when a name is empty or holds anything but letters and spaces."""


class InvalidRollNumberError(ValidationError):
    """Raised when a roll number is not a positive integer."""


class InvalidDayError(ValidationError):
    """Raised when a day falls outside 1..days_in_month."""


class InvalidMonthError(ValidationError):
    """Raised when a month falls outside 1..12."""


class InvalidRemarkError(ValidationError):
    """Raised when a remark is not one of the canonical remarks."""


class DuplicateKeyError(DomainError):
    """Raised when a roll number is already taken by another student."""


class CapacityExceededError(DomainError):
    """Raised when the roster is full."""


class NotFoundError(DomainError):
    """Raised when no student has the given roll number."""


class EmptyStoreError(DomainError):
    """Raised when an aggregate is requested over an empty roster."""


class PersistenceUnavailableError(DomainError):
    """Raised when the data file is missing, unreadable or unwritable."""
