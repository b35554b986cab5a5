"""Tree/attribute (XML) representation of courses.

A course is written as::

    <course id="..." name="Intro to Systems" shortname="SYS101" version="1"
            language="en-US">
        <description>Foundations</description>
        <thumbnailImage>https://example.com/sys101.png</thumbnailImage>
        <tags>
            <tag>intro</tag>
        </tags>
        <chapters>
            <chapter id="..." name="Ch1" version="1" />
        </chapters>
    </course>

Optional values that are ``None`` are omitted, so that they read back as
``None``. An empty tag or chapter list is written as an empty container
element and reads back as an empty list; an empty thumbnail is written as an
empty element and reads back as ``""``. Tag terms are kept as written,
including surrounding whitespace.
"""

import io
import logging
from pathlib import Path
from typing import Any, Callable
from uuid import UUID, uuid4
from xml.etree import ElementTree as ETree

from coursekit.core.chapter import Chapter
from coursekit.core.course import Course
from coursekit.core.errors import CourseFormatError
from coursekit.core.tag import Tag
from coursekit.serialization.mapping import (
    COURSE_FIELDS,
    COURSE_ROOT_ELEMENT,
    FieldMapping,
    XmlKind,
)

logger = logging.getLogger(__name__)

DEFAULT_INDENT = "    "


# Tags


def tag_to_element(tag: Tag, name: str = "tag") -> ETree.Element:
    element = ETree.Element(name)
    if tag.taxonomy is not None:
        element.set("taxonomy", tag.taxonomy)
    element.text = tag.term
    return element


def tag_from_element(element: ETree.Element) -> Tag:
    term = element.text
    if not term:
        raise CourseFormatError("Tag element without a term")
    return Tag(term=term, taxonomy=element.get("taxonomy"))


# Chapters


def chapter_to_element(chapter: Chapter, name: str = "chapter") -> ETree.Element:
    element = ETree.Element(name)
    element.set("id", str(chapter.id))
    element.set("name", chapter.name)
    element.set("version", str(chapter.version))
    if chapter.description is not None:
        ETree.SubElement(element, "description").text = chapter.description
    return element


def chapter_from_element(element: ETree.Element) -> Chapter:
    name = element.get("name")
    if not name:
        raise CourseFormatError("Chapter element without a name attribute")
    description_elem = element.find("description")
    description = None
    if description_elem is not None:
        description = description_elem.text or ""
    return Chapter(
        name,
        id=_parse_id(element.get("id"), f"chapter {name!r}"),
        description=description,
        version=_parse_version(element.get("version", "1"), f"chapter {name!r}"),
    )


_ITEM_WRITERS: dict[str, Callable[[Any, str], ETree.Element]] = {
    "tags": tag_to_element,
    "chapters": chapter_to_element,
}

_ITEM_READERS: dict[str, Callable[[ETree.Element], Any]] = {
    "tags": tag_from_element,
    "chapters": chapter_from_element,
}


# Courses


def course_to_element(course: Course) -> ETree.Element:
    root = ETree.Element(COURSE_ROOT_ELEMENT)
    for mapping in COURSE_FIELDS:
        value = getattr(course, mapping.attribute)
        if mapping.required and (value is None or value == ""):
            raise CourseFormatError(
                f"Cannot serialize course {course.id}: "
                f"required field '{mapping.attribute}' is missing"
            )
        if value is None:
            continue
        if mapping.xml_kind is XmlKind.ATTRIBUTE:
            root.set(mapping.xml_name, str(value))
        elif mapping.xml_kind is XmlKind.ELEMENT:
            ETree.SubElement(root, mapping.xml_name).text = str(value)
        else:
            container = ETree.SubElement(root, mapping.xml_name)
            write_item = _ITEM_WRITERS[mapping.attribute]
            for item in value:
                container.append(write_item(item, mapping.xml_item_name))
    return root


def course_from_element(element: ETree.Element) -> Course:
    if element.tag != COURSE_ROOT_ELEMENT:
        raise CourseFormatError(
            f"Expected <{COURSE_ROOT_ELEMENT}> element, found <{element.tag}>"
        )
    raw = {mapping.attribute: _read_field(element, mapping) for mapping in COURSE_FIELDS}

    for mapping in COURSE_FIELDS:
        if mapping.required and not raw[mapping.attribute]:
            raise CourseFormatError(f"Course is missing required field '{mapping.xml_name}'")

    course_id = _parse_id(raw["id"], f"course {raw['short_name']!r}")
    logger.debug(f"Read course {raw['short_name']!r} ({course_id}) from XML")
    return Course(
        raw["name"],
        raw["short_name"],
        raw["description"],
        id=course_id,
        version=_parse_version(raw["version"], f"course {raw['short_name']!r}"),
        language=raw["language"],
        thumbnail_image=raw["thumbnail_image"],
        tags=raw["tags"],
        chapters=raw["chapters"],
    )


def _read_field(element: ETree.Element, mapping: FieldMapping) -> Any:
    if mapping.xml_kind is XmlKind.ATTRIBUTE:
        return element.get(mapping.xml_name)
    child = element.find(mapping.xml_name)
    if child is None:
        return None
    if mapping.xml_kind is XmlKind.ELEMENT:
        return child.text or ""
    read_item = _ITEM_READERS[mapping.attribute]
    return [read_item(item) for item in child.findall(mapping.xml_item_name)]


def _parse_id(text: str | None, what: str) -> UUID:
    if text is None:
        logger.warning(f"No id given for {what}, generating a new one")
        return uuid4()
    try:
        return UUID(text)
    except ValueError as e:
        raise CourseFormatError(f"Invalid id {text!r} for {what}") from e


def _parse_version(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise CourseFormatError(f"Invalid version {text!r} for {what}") from e


# Text and files


def dumps(course: Course, indent: str = DEFAULT_INDENT) -> str:
    root = course_to_element(course)
    if indent:
        ETree.indent(root, space=indent)
    return ETree.tostring(root, encoding="unicode")


def loads(text: str) -> Course:
    try:
        root = ETree.fromstring(text)
    except ETree.ParseError as e:
        raise CourseFormatError(f"Malformed course XML: {e}") from e
    return course_from_element(root)


def write_course(course: Course, xml_file: Path, indent: str = DEFAULT_INDENT) -> None:
    root = course_to_element(course)
    if indent:
        ETree.indent(root, space=indent)
    tree = ETree.ElementTree(root)
    tree.write(xml_file, encoding="utf-8", xml_declaration=True)
    logger.info(f"Wrote course {course.short_name!r} to {xml_file}")


def read_course(xml_file: Path | io.IOBase) -> Course:
    try:
        tree = ETree.parse(xml_file)
    except ETree.ParseError as e:
        raise CourseFormatError(f"Malformed course XML in {xml_file}: {e}") from e
    return course_from_element(tree.getroot())


__all__ = [
    "chapter_from_element",
    "chapter_to_element",
    "course_from_element",
    "course_to_element",
    "dumps",
    "loads",
    "read_course",
    "tag_from_element",
    "tag_to_element",
    "write_course",
]
