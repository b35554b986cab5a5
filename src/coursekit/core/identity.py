"""Identity base shared by all entities of the course model."""

import logging
from typing import TypeVar
from uuid import UUID, uuid4

from attrs import define, field, setters

logger = logging.getLogger(__name__)

E = TypeVar("E", bound="Entity")


@define(eq=False)
class Entity:
    """An object with a stable identifier.

    The ``id`` is set exactly once, when the object is constructed. Assigning to
    it afterwards raises ``attrs.exceptions.FrozenAttributeError``.

    Two entities are equal when they are of the same type and ``equals()``
    returns true. Subclasses refine ``equals()``; they never override ``__eq__``
    or ``__hash__``. Since equal entities always share an id, hashing on the id
    is consistent with every refinement.
    """

    id: UUID = field(factory=uuid4, kw_only=True, on_setattr=setters.frozen)

    def equals(self, other: "Entity | None") -> bool:
        if other is None:
            return False
        return self.id == other.id

    def __eq__(self, other):
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.id)

    @staticmethod
    def merge_clone(original: "Entity", clone: E) -> E:
        """Give ``clone`` the identity of ``original`` and return it.

        ``clone`` is usually built through the regular constructor and therefore
        has a fresh id; afterwards it represents the same entity as
        ``original`` while being an independent object.
        """
        if clone is original:
            raise ValueError("Cannot merge an entity with itself")
        logger.debug(f"Merging identity {original.id} into {type(clone).__name__} clone")
        object.__setattr__(clone, "id", original.id)
        return clone


__all__ = ["Entity"]
