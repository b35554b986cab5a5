"""coursekit - course content object model.

Courses made of ordered chapters and taxonomy tags, with structural equality,
deep cloning and two serialization shapes (XML tree and flat JSON contract).
"""

from coursekit.__version__ import __version__

# Convenience imports for common classes
from coursekit.core.chapter import Chapter
from coursekit.core.course import Course, CourseStatus
from coursekit.core.tag import Tag

__all__ = [
    "__version__",
    "Chapter",
    "Course",
    "CourseStatus",
    "Tag",
]
