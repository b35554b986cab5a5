from attrs import field, frozen

from coursekit.core.errors import InvalidArgumentError


def _require_term(instance, attribute, value):
    if not isinstance(value, str) or not value:
        raise InvalidArgumentError(attribute.name)


@frozen
class Tag:
    """A taxonomy term attached to a course.

    Tags are immutable values: two tags are equal when they name the same term
    in the same taxonomy.
    """

    term: str = field(validator=_require_term)
    taxonomy: str | None = None

    def clone(self) -> "Tag":
        return self

    def __str__(self):
        if self.taxonomy:
            return f"{self.taxonomy}:{self.term}"
        return self.term


__all__ = ["Tag"]
