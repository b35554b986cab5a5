from coursekit.core.chapter import Chapter
from coursekit.core.cloning import ClonePolicy
from coursekit.core.course import COURSE_CLONE_POLICY, DEFAULT_LANGUAGE, Course, CourseStatus
from coursekit.core.errors import (
    ChapterIndexError,
    CourseFormatError,
    CourseKitError,
    InvalidArgumentError,
)
from coursekit.core.identity import Entity
from coursekit.core.tag import Tag

__all__ = [
    "COURSE_CLONE_POLICY",
    "Chapter",
    "ChapterIndexError",
    "ClonePolicy",
    "Course",
    "CourseFormatError",
    "CourseKitError",
    "CourseStatus",
    "DEFAULT_LANGUAGE",
    "Entity",
    "InvalidArgumentError",
    "Tag",
]
