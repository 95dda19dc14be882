"""Postal delivery records of the xAL address schema.

This module contains the postal code, post box and post office records.
"""

from typing import Optional
from typing_extensions import Annotated
from pydantic import Field

from xal.models.base import ATTRIBUTE, TEXT, XALModel


class PostalCodeNumber(XALModel):
    """Specification of a postcode.

    The postcode is formatted according to country-specific rules,
    e.g. ``SW3 0A8-1A``, ``600074``, ``2067``.

    Attributes:
        attr_type: Old postal code, new code, etc.
        attr_code: Used by postal services to encode the name of the element.
        text: The postcode itself.
    """

    attr_type: Annotated[
        Optional[str],
        Field(None, description="Old postal code, new code, etc", json_schema_extra=ATTRIBUTE),
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Postcode", json_schema_extra=TEXT)]


class PostalCodeNumberExtension(XALModel):
    """Extension of a postcode, e.g. ``1234`` (USA) or ``1G`` (UK).

    Attributes:
        attr_type: Type of the extension.
        attr_number_extension_separator: Separator between the postal code
            number and the extension, e.g. ``-``.
        text: The extension itself.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the extension", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=19
    attr_number_extension_separator: Annotated[
        Optional[str],
        Field(
            None,
            description="Separator between postal code number and extension, e.g. '-'",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    text: Annotated[Optional[str], Field(None, description="Postcode extension", json_schema_extra=TEXT)]


class PostalCode(XALModel):
    """Container for either simple or complex (extended) postal codes.

    Attributes:
        attr_type: Area Code, Postcode, etc.
        postal_code_number: The postcode.
        postal_code_number_extension: Extension of the postcode (ZIP+4 style).
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Area Code, Postcode, etc", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=9
    postal_code_number: Annotated[Optional[PostalCodeNumber], Field(None, description="Postcode")]
    postal_code_number_extension: Annotated[
        Optional[PostalCodeNumberExtension], Field(None, description="Extension of the postcode")
    ]


class PostBoxNumber(XALModel):
    """Specification of the number of a postbox."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Postbox number", json_schema_extra=TEXT)]


class PostBox(XALModel):
    """Specification of a postbox like mail delivery point.

    Only a single postbox number can be specified. Examples of postboxes are
    POBox, free mail numbers, etc.

    Attributes:
        attr_type: Type of the postbox, e.g. LOCKED BAG.
        attr_indicator: NO: in LOCKED BAG NO:1234.
        post_box_number: Number of the postbox.
        postal_code: Postal code of the postbox.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the postbox", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=5
    attr_indicator: Annotated[
        Optional[str],
        Field(
            None,
            description="LOCKED BAG NO:1234 where the Indicator is NO: and Type is LOCKED BAG",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    post_box_number: Annotated[Optional[PostBoxNumber], Field(None, description="Number of the postbox")]
    postal_code: Annotated[Optional[PostalCode], Field(None, description="Postal code of the postbox")]


class PostOfficeName(XALModel):
    """Name of a post office, rural or containing post office boxes."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Post office name", json_schema_extra=TEXT)]


class PostOfficeNumber(XALModel):
    """Number of a post office. Common in rural post offices."""

    attr_indicator: Annotated[
        Optional[str], Field(None, description="Indicator of the number", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=3
    text: Annotated[Optional[str], Field(None, description="Post office number", json_schema_extra=TEXT)]


class PostOffice(XALModel):
    """Specification of a post office.

    Examples are a rural post office where post is delivered and a post
    office containing post office boxes.

    Attributes:
        attr_type: Type of the post office.
        attr_indicator: (P.O) in Kottivakkam (P.O).
        post_office_name: Name of the post office.
        post_office_number: Number of the post office.
        postal_code: Postal code of the post office.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the post office", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=14
    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="Kottivakkam (P.O) here (P.O) is the Indicator", json_schema_extra=ATTRIBUTE),
    ]
    post_office_name: Annotated[Optional[PostOfficeName], Field(None, description="Name of the post office")]
    post_office_number: Annotated[
        Optional[PostOfficeNumber], Field(None, description="Number of the post office")
    ]
    postal_code: Annotated[Optional[PostalCode], Field(None, description="Postal code of the post office")]
