"""XML naming metadata of the xAL records.

The records serialize to JSON with lowercase keys. An XML-aware codec needs to
know which keys were attributes, which were elements and which was the text
content, and under which name. These helpers read that from the field
markers declared on the records.
"""
from enum import Enum
from typing import List, Optional, Type, get_args, get_origin

from pydantic import BaseModel

from xal.core.exceptions import SchemaFieldError
from xal.models.base import XALModel
from xal.utils.constants import ATTRIBUTE_PREFIX, XAL_NAMESPACE


class FieldKind(str, Enum):
    """How a record field is represented in XML."""
    ATTRIBUTE = "attribute"
    ELEMENT = "element"
    TEXT = "text"


class XmlField(BaseModel):
    """XML view of one record field.

    Attributes:
        field_name: Name of the field (the JSON key)
        kind: Attribute, element or text content
        xml_name: Attribute or element name, None for text content
        item_name: Element name of each item when the list is wrapped
        repeated: Whether the field holds an ordered sequence
    """

    field_name: str
    kind: FieldKind
    xml_name: Optional[str] = None
    item_name: Optional[str] = None
    repeated: bool = False


def _field_extra(model_cls: Type[XALModel], field_name: str) -> dict:
    field_info = model_cls.model_fields.get(field_name)
    if field_info is None:
        raise SchemaFieldError(model_cls.__name__, field_name)
    extra = field_info.json_schema_extra
    return extra if isinstance(extra, dict) else {}


def camel_case(name: str) -> str:
    """Convert a lowercase underscore-separated name to CamelCase."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def field_kind(model_cls: Type[XALModel], field_name: str) -> FieldKind:
    """Return whether a field is an XML attribute, element or text content."""
    extra = _field_extra(model_cls, field_name)
    if extra.get("is_attribute"):
        return FieldKind.ATTRIBUTE
    if extra.get("is_text"):
        return FieldKind.TEXT
    return FieldKind.ELEMENT


def xml_name(model_cls: Type[XALModel], field_name: str) -> Optional[str]:
    """Return the XML attribute or element name of a field.

    ``attr_valid_from_date`` maps to ``ValidFromDate`` and
    ``country_name_code`` to ``CountryNameCode``. Text content has no name.
    """
    extra = _field_extra(model_cls, field_name)
    if "xml_name" in extra:
        return extra["xml_name"]
    kind = field_kind(model_cls, field_name)
    if kind == FieldKind.TEXT:
        return None
    if field_name.startswith(ATTRIBUTE_PREFIX):
        return camel_case(field_name[len(ATTRIBUTE_PREFIX):])
    return camel_case(field_name)


def xml_item_name(model_cls: Type[XALModel], field_name: str) -> Optional[str]:
    """Return the element name of each item of a wrapped list, e.g. AddressLine."""
    return _field_extra(model_cls, field_name).get("xml_item")


def is_repeated(model_cls: Type[XALModel], field_name: str) -> bool:
    """Return whether a field holds an ordered sequence of children."""
    _field_extra(model_cls, field_name)
    annotation = model_cls.model_fields[field_name].annotation
    if get_origin(annotation) is list:
        return True
    return any(get_origin(arg) is list for arg in get_args(annotation))


def tag_name(model_cls: Type[XALModel]) -> str:
    """Return the element name of a record; the root record is ``xAL``."""
    extra = model_cls.model_config.get("json_schema_extra")
    if isinstance(extra, dict) and "tag_name" in extra:
        return extra["tag_name"]
    return model_cls.__name__


def xml_qname(local_name: str) -> str:
    """Return a name qualified with the xAL namespace in Clark notation."""
    return f"{{{XAL_NAMESPACE}}}{local_name}"


def describe_fields(model_cls: Type[XALModel]) -> List[XmlField]:
    """Describe every field of a record in declaration order."""
    return [
        XmlField(
            field_name=name,
            kind=field_kind(model_cls, name),
            xml_name=xml_name(model_cls, name),
            item_name=xml_item_name(model_cls, name),
            repeated=is_repeated(model_cls, name),
        )
        for name in model_cls.model_fields
    ]
