"""Error taxonomy for StudyWell.

Services raise these; the API layer maps them to HTTP responses:
- ValidationError -> 400
- NotFound -> 404
- StorageFailure -> 500 (generic message, details only in the server log)
"""


class StudyWellError(Exception):
    """Base class for all StudyWell errors."""


class ValidationError(StudyWellError):
    """Malformed or out-of-range input. Raised before any write."""


class InvalidDateFormat(ValidationError):
    """A civil date string is not a real `YYYY-MM-DD` date."""


class NotFound(StudyWellError):
    """Referenced task or record does not exist."""

    def __init__(self, kind: str, entity_id: str):
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} not found")


class StorageFailure(StudyWellError):
    """Unexpected failure from the persistence layer."""
