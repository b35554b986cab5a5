"""Exceptions raised by the course model and its serializers."""


class CourseKitError(Exception):
    """Base class for all coursekit errors."""


class InvalidArgumentError(CourseKitError, ValueError):
    """A required constructor argument is missing or empty."""

    def __init__(self, field_name: str, message: str | None = None):
        self.field_name = field_name
        super().__init__(message or f"'{field_name}' must be a non-empty string")


class ChapterIndexError(CourseKitError, IndexError):
    """A chapter index is outside of ``0 <= index < len(chapters)``."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Chapter index {index} out of range for {count} chapter(s)")


class CourseFormatError(CourseKitError, ValueError):
    """Serialized course data is missing required fields or is malformed."""
