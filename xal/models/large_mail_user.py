"""Large mail user records of the xAL address schema.

Large mail users are high-volume recipients with their own postal handling:
postal companies, companies in France with a cedex number, hospitals and
airports with their own post code.
"""

from typing import Optional
from typing_extensions import Annotated
from pydantic import Field

from xal.models.base import ATTRIBUTE, TEXT, XALModel
from xal.models.premise import BuildingName


class DepartmentName(XALModel):
    """Specification of the name of a department."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the department name", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Department name", json_schema_extra=TEXT)]


class Department(XALModel):
    """Subdivision in the firm.

    School of Physics at Victoria University (School of Physics is the
    department).
    """

    attr_type: Annotated[
        Optional[str],
        Field(
            None,
            description="School in Physics School, Division in Radiology division of school of physics",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    department_name: Annotated[Optional[DepartmentName], Field(None, description="Name of the department")]


class LargeMailUserIdentifier(XALModel):
    """Identification number of a large mail user, e.g. the Cedex codes in France."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the identifier", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=14
    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="Building 429 in which Building is the Indicator", json_schema_extra=ATTRIBUTE),
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Identifier", json_schema_extra=TEXT)]


class LargeMailUserName(XALModel):
    """Name of the large mail user, e.g. Smith Ford International airport."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Airport, Hospital, etc", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Large mail user name", json_schema_extra=TEXT)]


class LargeMailUser(XALModel):
    """Specification of a large mail user address.

    Large mail user addresses do not have a street name with premise name or
    premise number in countries like the Netherlands, but they have a POBox
    and street also in countries like France.

    Attributes:
        attr_type: Type of the large mail user.
        building_name: Name of the building.
        department: Department of the large mail user.
        large_mail_user_identifier: Identification number (cedex etc).
        large_mail_user_name: Name of the large mail user.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the large mail user", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=8
    building_name: Annotated[Optional[BuildingName], Field(None, description="Name of the building")]
    department: Annotated[Optional[Department], Field(None, description="Department of the large mail user")]
    large_mail_user_identifier: Annotated[
        Optional[LargeMailUserIdentifier], Field(None, description="Identification number of the large mail user")
    ]
    large_mail_user_name: Annotated[
        Optional[LargeMailUserName], Field(None, description="Name of the large mail user")
    ]
