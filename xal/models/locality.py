"""Locality and thoroughfare records of the xAL address schema.

A thoroughfare may hold a dependent locality and a dependent locality may
hold a thoroughfare, so both families live in this module.
"""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import Field

from xal.models.base import ATTRIBUTE, TEXT, XALModel
from xal.models.large_mail_user import LargeMailUser
from xal.models.postal import PostalCode, PostBox, PostOffice
from xal.models.premise import Premise


class ThoroughfarePreDirection(XALModel):
    """North Baker Street, where North is the pre-direction.

    The direction appears before the name.
    """

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Pre-direction", json_schema_extra=TEXT)]


class ThoroughfarePostDirection(XALModel):
    """221-bis Baker Street North, where North is the post-direction.

    The post-direction appears after the name.
    """

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Post-direction", json_schema_extra=TEXT)]


class ThoroughfareTrailingType(XALModel):
    """Appears after the thoroughfare name. British: Baker Lane, where Lane is the trailing type."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Trailing type", json_schema_extra=TEXT)]


class ThoroughfareNumber(XALModel):
    """Number of a thoroughfare, e.g. 23 Archer street or 25/15 Zero Avenue.

    Attributes:
        attr_type: Type of the number.
        attr_number_type: 12 Archer Street is "Single" and 12-14 Archer Street
            is "Range".
        attr_indicator: No. in Street No.12 or "#" in Street # 12, etc.
        attr_indicator_occurrence: No.12 where "No." is before the actual
            street number.
        attr_number_occurrence: 23 Archer St, Archer Street 23, St Archer 23.
        text: The number itself.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the number", json_schema_extra=ATTRIBUTE)
    ]
    attr_number_type: Annotated[
        Optional[str],
        Field(
            None,
            description="12 Archer Street is 'Single' and 12-14 Archer Street is 'Range'",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="No. in Street No.12 or '#' in Street # 12, etc", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=3
    attr_indicator_occurrence: Annotated[
        Optional[str],
        Field(None, description="No.12 where 'No.' is before actual street number", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=6
    attr_number_occurrence: Annotated[
        Optional[str],
        Field(None, description="23 Archer St, Archer Street 23, St Archer 23", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Thoroughfare number", json_schema_extra=TEXT)]


class ThoroughfareNumberFrom(XALModel):
    """Starting number in the range."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    thoroughfare_number: Annotated[
        Optional[ThoroughfareNumber], Field(None, description="First number of the range")
    ]


class ThoroughfareNumberTo(XALModel):
    """Ending number in the range."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    thoroughfare_number: Annotated[
        Optional[ThoroughfareNumber], Field(None, description="Last number of the range")
    ]


class ThoroughfareNumberRange(XALModel):
    """A range of numbers (from x thru y) for a thoroughfare, e.g. 1-2 Albert Av."""

    attr_indicator: Annotated[
        Optional[str], Field(None, description="Indicator of the range", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=2
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the range", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=4
    thoroughfare_number_from: Annotated[
        Optional[ThoroughfareNumberFrom], Field(None, description="Starting number in the range")
    ]
    thoroughfare_number_to: Annotated[
        Optional[ThoroughfareNumberTo], Field(None, description="Ending number in the range")
    ]


class ThoroughfareNumberSuffix(XALModel):
    """Suffix after the number. A in 12A Archer Street."""

    attr_number_suffix_separator: Annotated[
        Optional[str],
        Field(
            None,
            description="12-A where 12 is number and A is suffix and '-' is the separator",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="NEAR, ADJACENT TO, etc", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Thoroughfare number suffix", json_schema_extra=TEXT)]


class DependentThoroughfare(XALModel):
    """Thoroughfare related to a street; occurs in GB, IE, ES, PT."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the dependent thoroughfare", json_schema_extra=ATTRIBUTE)
    ]
    thoroughfare_name: Annotated[
        Optional[str], Field(None, description="Name of the dependent thoroughfare")
    ]
    thoroughfare_pre_direction: Annotated[
        Optional[ThoroughfarePreDirection], Field(None, description="Direction before the name")
    ]
    thoroughfare_trailing_type: Annotated[
        Optional[ThoroughfareTrailingType], Field(None, description="Type after the name")
    ]


class Thoroughfare(XALModel):
    """Specification of a thoroughfare.

    A thoroughfare could be a road, street, canal, river, etc. In some
    countries a large street has many numbered subdivisions whose name is the
    road name plus a number, e.g. SOI SUKUMVIT 3, SUKUMVIT RD, BANGKOK; those
    are modeled by the dependent locality of the thoroughfare.

    Attributes:
        attr_dependent_thoroughfares: Whether a dependent thoroughfare exists.
        attr_dependent_thoroughfares_connector: Connector between the
            thoroughfare and the dependent thoroughfare.
        attr_dependent_thoroughfares_indicator: Indicator of the dependent
            thoroughfares.
        attr_dependent_thoroughfares_type: STS in GEORGE and ADELAIDE STS, RDS
            in A and B RDS, etc. Use only when both the street types are the
            same.
        attr_type: Type of the thoroughfare.
        dependent_locality: Subdivision along the thoroughfare.
        dependent_thoroughfare: Thoroughfare related to this one.
        postal_code: Postal code of the thoroughfare.
        premise: Premise on the thoroughfare.
        thoroughfare_leading_type: Type appearing before the name, e.g.
            Avenida in Avenida Aurora, Rue in Rue Moliere.
        thoroughfare_name: Name of the thoroughfare.
        thoroughfare_number: Number on the thoroughfare.
        thoroughfare_number_range: Range of numbers on the thoroughfare.
        thoroughfare_number_suffix: Suffix of the number.
        thoroughfare_post_direction: Direction after the name.
        thoroughfare_pre_direction: Direction before the name.
        thoroughfare_trailing_type: Type appearing after the name.
    """

    attr_dependent_thoroughfares: Annotated[
        Optional[str],
        Field(None, description="Whether a dependent thoroughfare exists", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=3
    attr_dependent_thoroughfares_connector: Annotated[
        Optional[str],
        Field(None, description="Connector of the dependent thoroughfares", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=3
    attr_dependent_thoroughfares_indicator: Annotated[
        Optional[str],
        Field(None, description="Indicator of the dependent thoroughfares", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=9
    attr_dependent_thoroughfares_type: Annotated[
        Optional[str],
        Field(
            None,
            description="STS in GEORGE and ADELAIDE STS, RDS IN A and B RDS, etc",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the thoroughfare", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=6
    dependent_locality: Annotated[
        Optional["DependentLocality"], Field(None, description="Subdivision along the thoroughfare")
    ]
    dependent_thoroughfare: Annotated[
        Optional[DependentThoroughfare], Field(None, description="Thoroughfare related to this one")
    ]
    postal_code: Annotated[Optional[PostalCode], Field(None, description="Postal code of the thoroughfare")]
    premise: Annotated[Optional[Premise], Field(None, description="Premise on the thoroughfare")]
    thoroughfare_leading_type: Annotated[
        Optional[str], Field(None, description="Type appearing before the thoroughfare name")
    ]
    thoroughfare_name: Annotated[Optional[str], Field(None, description="Name of the thoroughfare")]
    thoroughfare_number: Annotated[
        Optional[ThoroughfareNumber], Field(None, description="Number on the thoroughfare")
    ]
    thoroughfare_number_range: Annotated[
        Optional[ThoroughfareNumberRange], Field(None, description="Range of numbers on the thoroughfare")
    ]
    thoroughfare_number_suffix: Annotated[
        Optional[ThoroughfareNumberSuffix], Field(None, description="Suffix of the thoroughfare number")
    ]
    thoroughfare_post_direction: Annotated[
        Optional[ThoroughfarePostDirection], Field(None, description="Direction after the name")
    ]
    thoroughfare_pre_direction: Annotated[
        Optional[ThoroughfarePreDirection], Field(None, description="Direction before the name")
    ]
    thoroughfare_trailing_type: Annotated[
        Optional[ThoroughfareTrailingType], Field(None, description="Type appearing after the name")
    ]


class DependentLocalityName(XALModel):
    """Name of the dependent locality."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the name", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=12
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Dependent locality name", json_schema_extra=TEXT)]


class DependentLocalityNumber(XALModel):
    """Number of the dependent locality.

    Some areas are numbered, e.g. SECTOR 5 in a suburb as in India or
    SOI SUKUMVIT 10 as in Thailand.
    """

    attr_name_number_occurrence: Annotated[
        Optional[str],
        Field(None, description="Occurrence of the number before/after the name", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=6
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Dependent locality number", json_schema_extra=TEXT)]


class DependentLocality(XALModel):
    """Districts within cities/towns, locality divisions, postal divisions of cities, suburbs, etc.

    DependentLocality is recursive, but no nesting deeper than two is used in
    practice (Locality-DependentLocality-DependentLocality). The depth is not
    enforced.

    Attributes:
        attr_connector: "VIA" as in Hill Top VIA Parish where Parish is a
            locality and Hill Top is a dependent locality.
        attr_type: Type of the dependent locality.
        attr_usage_type: Postal or Political. Sometimes locations must be
            distinguished between the postal system and physical locations as
            defined by a political system.
        dependent_locality: Nested dependent locality.
        dependent_locality_name: Names of the dependent locality, in order.
        dependent_locality_number: Numbers of the dependent locality, in order.
        large_mail_user: Large mail user in the dependent locality.
        post_office: Post office of the dependent locality.
        premise: Premise in the dependent locality.
        thoroughfare: Thoroughfare in the dependent locality.
    """

    attr_connector: Annotated[
        Optional[str],
        Field(None, description="'VIA' as in Hill Top VIA Parish", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=25
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the dependent locality", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=12
    attr_usage_type: Annotated[
        Optional[str], Field(None, description="Postal or Political", json_schema_extra=ATTRIBUTE)
    ]
    dependent_locality: Annotated[
        Optional["DependentLocality"], Field(None, description="Nested dependent locality")
    ]
    dependent_locality_name: Annotated[
        Optional[List[DependentLocalityName]], Field(None, description="Names of the dependent locality")
    ]
    dependent_locality_number: Annotated[
        Optional[List[DependentLocalityNumber]], Field(None, description="Numbers of the dependent locality")
    ]
    large_mail_user: Annotated[
        Optional[LargeMailUser], Field(None, description="Large mail user in the dependent locality")
    ]
    post_office: Annotated[Optional[PostOffice], Field(None, description="Post office of the dependent locality")]
    premise: Annotated[Optional[Premise], Field(None, description="Premise in the dependent locality")]
    thoroughfare: Annotated[Optional[Thoroughfare], Field(None, description="Thoroughfare in the dependent locality")]


Thoroughfare.model_rebuild()
DependentLocality.model_rebuild()


class LocalityName(XALModel):
    """Name of the locality."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the name", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=12
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Locality name", json_schema_extra=TEXT)]


class Locality(XALModel):
    """Locality is one level lower than administrative area.

    E.g. cities, reservations and any other built-up areas.

    Attributes:
        attr_type: City, IndustrialEstate, etc.
        attr_usage_type: Postal or Political.
        attr_indicator: Erode (Dist) where (Dist) is the Indicator.
        dependent_locality: District within the locality.
        large_mail_user: Large mail user in the locality.
        locality_name: Names of the locality, in order.
        post_box: Postbox in the locality.
        post_office: Post office of the locality.
        postal_code: Postal code of the locality.
        premise: Premise in the locality.
        thoroughfare: Thoroughfare in the locality.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="City, IndustrialEstate, etc", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=8
    attr_usage_type: Annotated[
        Optional[str], Field(None, description="Postal or Political", json_schema_extra=ATTRIBUTE)
    ]
    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="Erode (Dist) where (Dist) is the Indicator", json_schema_extra=ATTRIBUTE),
    ]
    dependent_locality: Annotated[
        Optional[DependentLocality], Field(None, description="District within the locality")
    ]
    large_mail_user: Annotated[Optional[LargeMailUser], Field(None, description="Large mail user in the locality")]
    locality_name: Annotated[Optional[List[LocalityName]], Field(None, description="Names of the locality")]
    post_box: Annotated[Optional[PostBox], Field(None, description="Postbox in the locality")]
    post_office: Annotated[Optional[PostOffice], Field(None, description="Post office of the locality")]
    postal_code: Annotated[Optional[PostalCode], Field(None, description="Postal code of the locality")]
    premise: Annotated[Optional[Premise], Field(None, description="Premise in the locality")]
    thoroughfare: Annotated[Optional[Thoroughfare], Field(None, description="Thoroughfare in the locality")]
