"""Serialization of courses to XML trees and flat JSON contracts."""

from coursekit.serialization.contract import CourseContract, dumps_contract, loads_contract
from coursekit.serialization.files import CourseFileFormat, load_course, save_course
from coursekit.serialization.xml_format import dumps, loads, read_course, write_course

__all__ = [
    "CourseContract",
    "CourseFileFormat",
    "dumps",
    "dumps_contract",
    "load_course",
    "loads",
    "loads_contract",
    "read_course",
    "save_course",
    "write_course",
]
