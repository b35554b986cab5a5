"""Pytest configuration and fixtures.

The ``intro_course`` fixture is the reference course used throughout the
tests: two chapters, one tag and no thumbnail image.
"""

from uuid import UUID
from xml.etree import ElementTree as ETree

import pytest

from coursekit.core.chapter import Chapter
from coursekit.core.course import Course
from coursekit.core.tag import Tag

INTRO_COURSE_ID = UUID("6f1c2a4e-8d3b-4c5a-9e7f-0a1b2c3d4e5f")
CHAPTER_1_ID = UUID("11111111-2222-4333-8444-555555555555")
CHAPTER_2_ID = UUID("66666666-7777-4888-9999-aaaaaaaaaaaa")

INTRO_COURSE_XML = f"""
<course id="{INTRO_COURSE_ID}" name="Intro to Systems" shortname="SYS101"
        version="1" language="en-US">
    <description>Foundations</description>
    <tags>
        <tag>intro</tag>
    </tags>
    <chapters>
        <chapter id="{CHAPTER_1_ID}" name="Ch1" version="1" />
        <chapter id="{CHAPTER_2_ID}" name="Ch2" version="1" />
    </chapters>
</course>
"""


@pytest.fixture
def chapter_1():
    return Chapter("Ch1", id=CHAPTER_1_ID)


@pytest.fixture
def chapter_2():
    return Chapter("Ch2", id=CHAPTER_2_ID)


@pytest.fixture
def intro_course(chapter_1, chapter_2):
    course = Course.create(
        "Intro to Systems",
        "SYS101",
        "Foundations",
        id=INTRO_COURSE_ID,
        language="en-US",
    )
    course.tags = [Tag("intro")]
    course.chapters = [chapter_1, chapter_2]
    return course


@pytest.fixture
def intro_course_xml():
    return ETree.fromstring(INTRO_COURSE_XML)
