"""Flat data contract for courses (JSON).

The contract uses the PascalCase member names of the published course schema
(``Name``, ``ShortName``, ...). ``null`` and ``[]`` are kept apart for
``Tags`` and ``Chapters``: a course without a tag list reads back without a tag
list, not with an empty one.
"""

import logging
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from coursekit.core.chapter import Chapter
from coursekit.core.course import Course
from coursekit.core.tag import Tag
from coursekit.serialization.mapping import lookup

logger = logging.getLogger(__name__)

CONTRACT_NAMESPACE = "urn:coursekit:contracts:course"


def _alias(attribute: str) -> str:
    return lookup(attribute).contract_name


class ContractModel(BaseModel):
    """Common configuration for all contract models."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class TagContract(ContractModel):
    term: str = Field(..., alias="Term", min_length=1)
    taxonomy: str | None = Field(None, alias="Taxonomy")

    @classmethod
    def from_tag(cls, tag: Tag) -> "TagContract":
        return cls(term=tag.term, taxonomy=tag.taxonomy)

    def to_tag(self) -> Tag:
        return Tag(term=self.term, taxonomy=self.taxonomy)


class ChapterContract(ContractModel):
    id: UUID = Field(..., alias="Id")
    name: str = Field(..., alias="Name", min_length=1)
    description: str | None = Field(None, alias="Description")
    version: int = Field(1, alias="Version")

    @classmethod
    def from_chapter(cls, chapter: Chapter) -> "ChapterContract":
        return cls(
            id=chapter.id,
            name=chapter.name,
            description=chapter.description,
            version=chapter.version,
        )

    def to_chapter(self) -> Chapter:
        return Chapter(
            self.name,
            id=self.id,
            description=self.description,
            version=self.version,
        )


class CourseContract(ContractModel):
    """Flat representation of a ``Course``."""

    model_config = ConfigDict(
        title="Course",
        json_schema_extra={"$id": CONTRACT_NAMESPACE},
    )

    id: UUID | None = Field(None, alias=_alias("id"))
    name: str = Field(..., alias=_alias("name"), min_length=1)
    short_name: str = Field(..., alias=_alias("short_name"), min_length=1)
    description: str = Field(..., alias=_alias("description"), min_length=1)
    version: int = Field(..., alias=_alias("version"))
    language: str = Field(..., alias=_alias("language"), min_length=1)
    thumbnail_image: str | None = Field(None, alias=_alias("thumbnail_image"))
    tags: list[TagContract] | None = Field(None, alias=_alias("tags"))
    chapters: list[ChapterContract] | None = Field(None, alias=_alias("chapters"))

    @classmethod
    def from_course(cls, course: Course) -> "CourseContract":
        return cls(
            id=course.id,
            name=course.name,
            short_name=course.short_name,
            description=course.description,
            version=course.version,
            language=course.language,
            thumbnail_image=course.thumbnail_image,
            tags=None if course.tags is None else [TagContract.from_tag(t) for t in course.tags],
            chapters=(
                None
                if course.chapters is None
                else [ChapterContract.from_chapter(c) for c in course.chapters]
            ),
        )

    def to_course(self) -> Course:
        course_id = self.id
        if course_id is None:
            logger.warning(f"No id given for course {self.short_name!r}, generating a new one")
            course_id = uuid4()
        return Course(
            self.name,
            self.short_name,
            self.description,
            id=course_id,
            version=self.version,
            language=self.language,
            thumbnail_image=self.thumbnail_image,
            tags=None if self.tags is None else [t.to_tag() for t in self.tags],
            chapters=None if self.chapters is None else [c.to_chapter() for c in self.chapters],
        )


def dumps_contract(course: Course, indent: int | None = 2) -> str:
    logger.debug(f"Writing contract for course {course.short_name!r} ({course.id})")
    return CourseContract.from_course(course).model_dump_json(by_alias=True, indent=indent)


def loads_contract(text: str | bytes) -> Course:
    """Read a course from its JSON contract.

    Raises:
        pydantic.ValidationError: If required members are missing or invalid
    """
    return CourseContract.model_validate_json(text).to_course()


__all__ = [
    "CONTRACT_NAMESPACE",
    "ChapterContract",
    "CourseContract",
    "TagContract",
    "dumps_contract",
    "loads_contract",
]
