from attrs import define, field

from coursekit.core.cloning import ClonePolicy, apply_clone_policy
from coursekit.core.errors import InvalidArgumentError
from coursekit.core.identity import Entity

CHAPTER_CLONE_POLICY = {
    "description": ClonePolicy.SHARED,
    "version": ClonePolicy.SHARED,
}


@define(eq=False)
class Chapter(Entity):
    """A chapter of a course.

    Chapters are mutable entities. Their position inside a course is given by
    the order of ``Course.chapters``; the chapter itself does not store it.
    """

    name: str
    description: str | None = field(default=None, kw_only=True)
    version: int = field(default=1, kw_only=True)

    def __attrs_post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise InvalidArgumentError("name")

    def equals(self, other: "Chapter | None") -> bool:
        if not isinstance(other, Chapter):
            return False
        if other is self:
            return True
        return (
            super().equals(other)
            and self.name == other.name
            and self.description == other.description
            and self.version == other.version
        )

    def clone(self) -> "Chapter":
        clone = apply_clone_policy(self, Chapter(self.name), CHAPTER_CLONE_POLICY)
        return Entity.merge_clone(self, clone)


__all__ = ["CHAPTER_CLONE_POLICY", "Chapter"]
