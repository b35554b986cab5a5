"""Reading and writing course files, choosing the shape by file suffix."""

import logging
from enum import Enum
from pathlib import Path

from coursekit.core.course import Course
from coursekit.serialization import xml_format
from coursekit.serialization.contract import dumps_contract, loads_contract

logger = logging.getLogger(__name__)


class CourseFileFormat(Enum):
    """Supported course file formats."""

    XML = "xml"
    JSON = "json"

    @classmethod
    def from_path(cls, path: Path) -> "CourseFileFormat":
        suffix = path.suffix.lower().lstrip(".")
        try:
            return cls(suffix)
        except ValueError:
            raise ValueError(
                f"Cannot determine course format of '{path.name}': "
                f"expected one of {[f.value for f in cls]}"
            ) from None


def save_course(
    course: Course,
    path: Path,
    file_format: CourseFileFormat | None = None,
    xml_indent: str = xml_format.DEFAULT_INDENT,
    json_indent: int | None = 2,
) -> None:
    file_format = file_format or CourseFileFormat.from_path(path)
    if file_format is CourseFileFormat.XML:
        xml_format.write_course(course, path, indent=xml_indent)
    else:
        path.write_text(dumps_contract(course, indent=json_indent), encoding="utf-8")
        logger.info(f"Wrote course {course.short_name!r} to {path}")


def load_course(path: Path, file_format: CourseFileFormat | None = None) -> Course:
    file_format = file_format or CourseFileFormat.from_path(path)
    logger.debug(f"Loading course from {path} as {file_format.value}")
    if file_format is CourseFileFormat.XML:
        return xml_format.read_course(path)
    return loads_contract(path.read_text(encoding="utf-8"))


__all__ = ["CourseFileFormat", "load_course", "save_course"]
