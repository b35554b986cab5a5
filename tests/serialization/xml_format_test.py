import io
from uuid import UUID
from xml.etree import ElementTree as ETree

import pytest

from conftest import CHAPTER_1_ID, INTRO_COURSE_ID, INTRO_COURSE_XML
from coursekit.core.chapter import Chapter
from coursekit.core.course import Course
from coursekit.core.errors import CourseFormatError
from coursekit.core.tag import Tag
from coursekit.serialization.xml_format import (
    chapter_from_element,
    chapter_to_element,
    course_from_element,
    course_to_element,
    dumps,
    loads,
    read_course,
    tag_from_element,
    tag_to_element,
    write_course,
)


def test_course_to_element_attributes(intro_course):
    element = course_to_element(intro_course)

    assert element.tag == "course"
    assert element.get("id") == str(INTRO_COURSE_ID)
    assert element.get("name") == "Intro to Systems"
    assert element.get("shortname") == "SYS101"
    assert element.get("version") == "1"
    assert element.get("language") == "en-US"


def test_course_to_element_children(intro_course):
    element = course_to_element(intro_course)

    assert element.find("description").text == "Foundations"
    assert element.find("thumbnailImage") is None
    assert [tag.text for tag in element.findall("tags/tag")] == ["intro"]
    assert [chapter.get("name") for chapter in element.findall("chapters/chapter")] == [
        "Ch1",
        "Ch2",
    ]


def test_course_to_element_absent_and_empty_collections(intro_course):
    intro_course.tags = None
    intro_course.chapters = []
    element = course_to_element(intro_course)

    assert element.find("tags") is None
    assert element.find("chapters") is not None
    assert len(element.find("chapters")) == 0


def test_course_to_element_rejects_missing_required_field(intro_course):
    intro_course.language = None
    with pytest.raises(CourseFormatError, match="language"):
        course_to_element(intro_course)


def test_course_from_element(intro_course_xml, intro_course):
    course = course_from_element(intro_course_xml)

    assert course.id == INTRO_COURSE_ID
    assert course.name == "Intro to Systems"
    assert course.short_name == "SYS101"
    assert course.description == "Foundations"
    assert course.version == 1
    assert course.language == "en-US"
    assert course.thumbnail_image is None
    assert course.tags == [Tag("intro")]
    assert [chapter.name for chapter in course.chapters] == ["Ch1", "Ch2"]
    assert course.chapters[0].id == CHAPTER_1_ID
    assert course == intro_course


def test_round_trip(intro_course):
    course = loads(dumps(intro_course))

    assert course == intro_course
    assert course is not intro_course
    assert course.thumbnail_image is None


def test_round_trip_with_all_fields(intro_course):
    intro_course.thumbnail_image = "https://example.com/sys101.png"
    intro_course.version = 3
    intro_course.language = "de-DE"
    intro_course.tags.append(Tag("systems", taxonomy="topic"))
    intro_course.chapters[0].description = "Getting started"

    course = loads(dumps(intro_course))

    assert course == intro_course
    assert course.thumbnail_image == "https://example.com/sys101.png"
    assert course.tags[1].taxonomy == "topic"


def test_round_trip_keeps_absent_collections_absent(intro_course):
    intro_course.tags = None
    intro_course.chapters = None

    course = loads(dumps(intro_course))

    assert course.tags is None
    assert course.chapters is None
    assert course == intro_course


def test_round_trip_keeps_empty_collections_empty(intro_course):
    intro_course.tags = []
    intro_course.chapters = []

    course = loads(dumps(intro_course))

    assert course.tags == []
    assert course.chapters == []


def test_round_trip_keeps_empty_thumbnail_empty(intro_course):
    intro_course.thumbnail_image = ""

    element = course_to_element(intro_course)
    assert element.find("thumbnailImage") is not None

    course = loads(dumps(intro_course))
    assert course.thumbnail_image == ""
    assert course == intro_course


@pytest.mark.parametrize(
    "xml",
    [
        '<course shortname="S" version="1" language="en-US"><description>D</description></course>',
        '<course name="N" version="1" language="en-US"><description>D</description></course>',
        '<course name="N" shortname="S" version="1" language="en-US"></course>',
        '<course name="N" shortname="S" language="en-US"><description>D</description></course>',
        '<course name="N" shortname="S" version="1"><description>D</description></course>',
        '<course name="" shortname="S" version="1" language="en-US"><description>D</description></course>',
        '<course name="N" shortname="S" version="1" language="en-US"><description/></course>',
    ],
)
def test_missing_required_fields(xml):
    with pytest.raises(CourseFormatError):
        loads(xml)


def test_invalid_version():
    xml = (
        '<course name="N" shortname="S" version="one" language="en-US">'
        "<description>D</description></course>"
    )
    with pytest.raises(CourseFormatError, match="version"):
        loads(xml)


def test_invalid_id():
    xml = (
        '<course id="not-a-uuid" name="N" shortname="S" version="1" language="en-US">'
        "<description>D</description></course>"
    )
    with pytest.raises(CourseFormatError, match="id"):
        loads(xml)


def test_missing_id_generates_new_one(caplog):
    xml = (
        '<course name="N" shortname="S" version="1" language="en-US">'
        "<description>D</description></course>"
    )
    course = loads(xml)
    assert isinstance(course.id, UUID)
    assert "No id given" in caplog.text


def test_wrong_root_element():
    with pytest.raises(CourseFormatError, match="<course>"):
        loads("<lecture/>")


def test_malformed_xml():
    with pytest.raises(CourseFormatError):
        loads("<course")


def test_tag_element_round_trip():
    tag = Tag("intro", taxonomy="level")
    element = tag_to_element(tag)
    assert element.tag == "tag"
    assert element.get("taxonomy") == "level"
    assert tag_from_element(element) == tag


def test_tag_without_taxonomy_has_no_attribute():
    element = tag_to_element(Tag("intro"))
    assert "taxonomy" not in element.attrib


@pytest.mark.parametrize("xml", ["<tag/>", "<tag></tag>", '<tag taxonomy="level" />'])
def test_empty_tag_element(xml):
    with pytest.raises(CourseFormatError):
        tag_from_element(ETree.fromstring(xml))


def test_tag_term_whitespace_is_kept(intro_course):
    intro_course.tags = [Tag(" intro "), Tag("  ", taxonomy="level")]

    course = loads(dumps(intro_course))

    assert course.tags == [Tag(" intro "), Tag("  ", taxonomy="level")]
    assert course == intro_course


def test_chapter_element(chapter_1):
    element = chapter_to_element(chapter_1)
    assert element.get("id") == str(CHAPTER_1_ID)
    assert element.get("name") == "Ch1"
    assert element.get("version") == "1"
    assert element.find("description") is None
    assert chapter_from_element(element) == chapter_1


def test_chapter_element_with_description():
    chapter = Chapter("Ch1", description="Getting started", version=2)
    assert chapter_from_element(chapter_to_element(chapter)) == chapter


def test_chapter_without_name():
    with pytest.raises(CourseFormatError):
        chapter_from_element(ETree.fromstring(f'<chapter id="{CHAPTER_1_ID}"/>'))


def test_read_course_from_stream(intro_course):
    assert read_course(io.StringIO(INTRO_COURSE_XML)) == intro_course


def test_write_and_read_file(intro_course, tmp_path):
    xml_file = tmp_path / "course.xml"
    write_course(intro_course, xml_file)

    assert xml_file.read_text(encoding="utf-8").startswith("<?xml")
    assert read_course(xml_file) == intro_course


def test_dumps_without_indent(intro_course):
    text = dumps(intro_course, indent="")
    assert "\n" not in text


def test_language_is_written_as_given():
    course = Course.create("Intro", "I101", "Basics", language="pt-BR")
    assert 'language="pt-BR"' in dumps(course)
