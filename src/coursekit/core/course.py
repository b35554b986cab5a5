import logging
from collections.abc import Iterator
from enum import IntFlag
from uuid import UUID

from attrs import Factory, define, field

from coursekit.core.chapter import Chapter
from coursekit.core.cloning import ClonePolicy, apply_clone_policy
from coursekit.core.errors import ChapterIndexError, InvalidArgumentError
from coursekit.core.identity import Entity
from coursekit.core.tag import Tag
from coursekit.core.utils.null_safe import null_safe_equals, null_safe_sequence_equals

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class CourseStatus(IntFlag):
    """A user's status within a course.

    This is vocabulary for other subsystems; nothing in this package evaluates
    it.
    """

    UNKNOWN = 0
    NOT_STARTED = 1
    STARTED = 2
    COMPLETED = 4
    # Submitted e.g. for continuing-education credits
    SUBMITTED = 8
    ALL_AVAILABLE = NOT_STARTED | STARTED | COMPLETED | SUBMITTED


# Tags are immutable values and are shared between a course and its clones.
# Chapters are mutable, so each clone gets its own copies.
COURSE_CLONE_POLICY = {
    "chapters": ClonePolicy.DEEP,
    "language": ClonePolicy.SHARED,
    "tags": ClonePolicy.SHARED,
    "thumbnail_image": ClonePolicy.SHARED,
    "version": ClonePolicy.SHARED,
}

_REQUIRED_TEXT_FIELDS = ("name", "short_name", "description")


@define(eq=False)
class Course(Entity):
    """A course: named, versioned, localized and split into ordered chapters.

    ``tags`` and ``chapters`` are lists after regular construction, but they may
    be ``None`` when a course is populated from serialized data that does not
    contain them. ``None`` (absent) and ``[]`` (empty) are different values for
    equality and for cloning.
    """

    name: str
    short_name: str
    description: str
    version: int = field(default=1, kw_only=True)
    language: str = field(default=DEFAULT_LANGUAGE, kw_only=True)
    thumbnail_image: str | None = field(default=None, kw_only=True)
    tags: list[Tag] | None = field(default=Factory(list), kw_only=True)
    chapters: list[Chapter] | None = field(default=Factory(list), kw_only=True)

    def __attrs_post_init__(self):
        for field_name in _REQUIRED_TEXT_FIELDS:
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise InvalidArgumentError(field_name)

    @classmethod
    def create(
        cls,
        name: str,
        short_name: str,
        description: str,
        id: UUID | None = None,
        language: str = DEFAULT_LANGUAGE,
    ) -> "Course":
        """Create a new version-1 course without tags or chapters.

        A fresh id is generated when ``id`` is not given.
        """
        if id is None:
            course = cls(name, short_name, description, language=language)
        else:
            course = cls(name, short_name, description, id=id, language=language)
        logger.debug(f"Created course {course.short_name!r} ({course.id})")
        return course

    # Indexed chapter access

    def get_chapter(self, index: int) -> Chapter | None:
        """Return the chapter at ``index``.

        Returns ``None`` if the course has no chapter list at all. Raises
        ``ChapterIndexError`` unless ``0 <= index < len(chapters)``.
        """
        if self.chapters is None:
            return None
        self._check_chapter_index(index)
        return self.chapters[index]

    def set_chapter(self, index: int, chapter: Chapter) -> None:
        """Replace the chapter at ``index``.

        An absent chapter list is replaced by an empty one first, so this only
        succeeds for existing positions.
        """
        if self.chapters is None:
            self.chapters = []
        self._check_chapter_index(index)
        self.chapters[index] = chapter

    def _check_chapter_index(self, index: int) -> None:
        count = len(self.chapters)
        if not 0 <= index < count:
            raise ChapterIndexError(index, count)

    def __getitem__(self, index: int) -> Chapter | None:
        return self.get_chapter(index)

    def __setitem__(self, index: int, chapter: Chapter) -> None:
        self.set_chapter(index, chapter)

    def __iter__(self) -> Iterator[Chapter]:
        return iter(self.chapters or ())

    def add_chapter(self, chapter: Chapter) -> None:
        if self.chapters is None:
            self.chapters = []
        self.chapters.append(chapter)

    def add_tag(self, tag: Tag) -> None:
        if self.tags is None:
            self.tags = []
        self.tags.append(tag)

    def bump_version(self) -> int:
        self.version += 1
        return self.version

    # Equality and cloning

    def _compare_fields(self, other: "Course") -> dict[str, bool]:
        return {
            "id": Entity.equals(self, other),
            "chapters": null_safe_sequence_equals(self.chapters, other.chapters),
            "description": self.description == other.description,
            "language": null_safe_equals(self.language, other.language),
            "name": self.name == other.name,
            "short_name": self.short_name == other.short_name,
            "tags": null_safe_sequence_equals(self.tags, other.tags),
            "thumbnail_image": null_safe_equals(self.thumbnail_image, other.thumbnail_image),
            "version": self.version == other.version,
        }

    def equals(self, other: "Course | None") -> bool:
        if not isinstance(other, Course):
            return False
        if other is self:
            return True
        return all(self._compare_fields(other).values())

    def changed_fields(self, other: "Course") -> list[str]:
        """Return the names of the fields in which ``other`` differs from this course.

        The identity is reported as ``"id"``.
        Raises ``TypeError`` if ``other`` is not a course.
        """
        if not isinstance(other, Course):
            raise TypeError(f"Cannot compare a course with {type(other).__name__}")
        if other is self:
            return []
        return [name for name, same in self._compare_fields(other).items() if not same]

    def clone(self) -> "Course":
        """Return an independent copy of this course with the same id.

        Chapters are cloned; the tag list is shared with the original (see
        ``COURSE_CLONE_POLICY``). The clone goes through the regular
        constructor, so a course whose name, short name or description was
        emptied after construction cannot be cloned and raises
        ``InvalidArgumentError``.
        """
        clone = Course(self.name, self.short_name, self.description)
        apply_clone_policy(self, clone, COURSE_CLONE_POLICY)
        return Entity.merge_clone(self, clone)


__all__ = [
    "COURSE_CLONE_POLICY",
    "Course",
    "CourseStatus",
    "DEFAULT_LANGUAGE",
]
