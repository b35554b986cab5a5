"""Correspondence between ``Course`` attributes and the two wire shapes.

Both the XML reader/writer and the flat contract look up names and
required-ness here, so adding a field to the course means adding one row.
"""

from enum import Enum

from attrs import frozen


class XmlKind(Enum):
    """Where a field lives in the XML tree."""

    ATTRIBUTE = "attribute"
    ELEMENT = "element"
    ARRAY = "array"


@frozen
class FieldMapping:
    """Names of one course attribute in each serialization shape.

    Attributes:
        attribute: Python attribute name on ``Course``
        contract_name: Key in the flat contract
        xml_name: Attribute or child element name in the XML tree
        xml_kind: Whether the XML value is an attribute, element or array
        xml_item_name: Element name of the array items (arrays only)
        required: Whether the value must be present on read and write
    """

    attribute: str
    contract_name: str
    xml_name: str
    xml_kind: XmlKind
    xml_item_name: str | None = None
    required: bool = False


COURSE_ROOT_ELEMENT = "course"

COURSE_FIELDS: tuple[FieldMapping, ...] = (
    FieldMapping("id", "Id", "id", XmlKind.ATTRIBUTE),
    FieldMapping("name", "Name", "name", XmlKind.ATTRIBUTE, required=True),
    FieldMapping("short_name", "ShortName", "shortname", XmlKind.ATTRIBUTE, required=True),
    FieldMapping("description", "Description", "description", XmlKind.ELEMENT, required=True),
    FieldMapping("version", "Version", "version", XmlKind.ATTRIBUTE, required=True),
    FieldMapping("language", "Language", "language", XmlKind.ATTRIBUTE, required=True),
    FieldMapping("thumbnail_image", "ThumbnailImage", "thumbnailImage", XmlKind.ELEMENT),
    FieldMapping("tags", "Tags", "tags", XmlKind.ARRAY, xml_item_name="tag"),
    FieldMapping("chapters", "Chapters", "chapters", XmlKind.ARRAY, xml_item_name="chapter"),
)

_FIELDS_BY_ATTRIBUTE = {mapping.attribute: mapping for mapping in COURSE_FIELDS}


def lookup(attribute: str) -> FieldMapping:
    """Return the mapping for a ``Course`` attribute.

    Raises:
        KeyError: If the attribute is not serialized
    """
    return _FIELDS_BY_ATTRIBUTE[attribute]


def required_fields() -> list[FieldMapping]:
    return [mapping for mapping in COURSE_FIELDS if mapping.required]


def fields_of_kind(kind: XmlKind) -> list[FieldMapping]:
    return [mapping for mapping in COURSE_FIELDS if mapping.xml_kind is kind]


__all__ = [
    "COURSE_FIELDS",
    "COURSE_ROOT_ELEMENT",
    "FieldMapping",
    "XmlKind",
    "fields_of_kind",
    "lookup",
    "required_fields",
]
