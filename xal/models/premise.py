"""Premise records of the xAL address schema.

A premise is a building, house or similarly bounded unit; a sub-premise is a
unit within it (apartment, suite, floor). Both are self-recursive.
"""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import Field

from xal.models.base import ATTRIBUTE, TEXT, XALModel
from xal.models.postal import PostalCode


class BuildingName(XALModel):
    """Specification of the name of a building.

    Attributes:
        attr_type: Type of the building name.
        attr_type_occurrence: Occurrence of the building name before/after the
            type, e.g. EGIS BUILDING where the name appears before the type.
        attr_code: Used by postal services to encode the name of the element.
        text: The building name.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the building name", json_schema_extra=ATTRIBUTE)
    ]
    attr_type_occurrence: Annotated[
        Optional[str],
        Field(None, description="Occurrence of the building name before/after the type", json_schema_extra=ATTRIBUTE),
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Building name", json_schema_extra=TEXT)]


class PremiseLocation(XALModel):
    """LOBBY, BASEMENT, GROUND FLOOR, etc."""

    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Location within the premise", json_schema_extra=TEXT)]


class PremiseName(XALModel):
    """Name of the premise (house, building, park, farm, etc).

    A premise name is specified when the premise cannot be addressed using a
    street name plus premise (house) number.
    """

    attr_type_occurrence: Annotated[
        Optional[str],
        Field(
            None,
            description="EGIS Building where EGIS occurs before Building, DES JARDINS occurs after COMPLEXE DES JARDINS",
            json_schema_extra=ATTRIBUTE,
        ),
    ]  # maxLength=5
    text: Annotated[Optional[str], Field(None, description="Premise name", json_schema_extra=TEXT)]


class PremiseNumber(XALModel):
    """Identifier of the premise (house, building, etc).

    Premises in a street are often uniquely identified by means of
    consecutive identifiers. The identifier can be a number, a letter or any
    combination of the two.

    Attributes:
        attr_number_type: Building 12-14 is "Range" and Building 12 is "Single".
        attr_type: Type of the premise number.
        attr_indicator: No. in House No.12, # in #12, etc.
        attr_indicator_occurrence: No. occurs before 12 in No.12.
        attr_number_type_occurrence: 12 in BUILDING 12 occurs "after" the
            premise type BUILDING.
        code: Used by postal services to encode the name of the element.
        text: The premise number.
    """

    attr_number_type: Annotated[
        Optional[str],
        Field(None, description="Building 12-14 is 'Range' and Building 12 is 'Single'", json_schema_extra=ATTRIBUTE),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the premise number", json_schema_extra=ATTRIBUTE)
    ]
    attr_indicator: Annotated[
        Optional[str], Field(None, description="No. in House No.12, # in #12, etc", json_schema_extra=ATTRIBUTE)
    ]
    attr_indicator_occurrence: Annotated[
        Optional[str], Field(None, description="No. occurs before 12 No.12", json_schema_extra=ATTRIBUTE)
    ]
    attr_number_type_occurrence: Annotated[
        Optional[str],
        Field(None, description="12 in BUILDING 12 occurs 'after' premise type BUILDING", json_schema_extra=ATTRIBUTE),
    ]
    # Keyed without the attr_ prefix but still the Code attribute in XML.
    code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Premise number", json_schema_extra=TEXT)]


class PremiseNumberSuffix(XALModel):
    """A in 12A."""

    attr_number_prefix_separator: Annotated[
        Optional[str],
        Field(
            None,
            description="A-12 where 12 is number and A is prefix and '-' is the separator",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the suffix", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Premise number suffix", json_schema_extra=TEXT)]


class SubPremiseName(XALModel):
    """Name of the sub-premise."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the sub-premise name", json_schema_extra=ATTRIBUTE)
    ]
    attr_type_occurrence: Annotated[
        Optional[str],
        Field(None, description="EGIS Building where EGIS occurs before Building", json_schema_extra=ATTRIBUTE),
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Sub-premise name", json_schema_extra=TEXT)]


class SubPremiseNumber(XALModel):
    """Identifier of a sub-premise.

    Examples of sub-premises are apartments and suites. Sub-premises in a
    building are often uniquely identified by means of consecutive
    identifiers. The identifier can be a number, a letter or any combination
    of the two. In the latter case, the identifier includes exactly one
    variable (range) part, which is either a number or a single letter that
    is surrounded by fixed parts at the left (prefix) or the right (postfix).

    Attributes:
        attr_indicator: "TH" in 12TH which is a floor number, "NO." in NO.1,
            "#" in APT #12, etc.
        attr_indicator_occurrence: "No." occurs before 1 in No.1, or TH occurs
            after 12 in 12TH.
        attr_number_type_occurrence: 12TH occurs "before" FLOOR (a type of
            sub-premise) in 12TH FLOOR.
        attr_premise_number_separator: "/" in 12/14 Archer Street where 12 is
            the sub-premise number and 14 is the premise number.
        attr_type: Type of the sub-premise number.
        attr_code: Used by postal services to encode the name of the element.
        text: The sub-premise number.
    """

    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="'TH' in 12TH, 'NO.' in NO.1, '#' in APT #12, etc", json_schema_extra=ATTRIBUTE),
    ]
    attr_indicator_occurrence: Annotated[
        Optional[str],
        Field(None, description="'No.' occurs before 1 in No.1, or TH occurs after 12 in 12TH", json_schema_extra=ATTRIBUTE),
    ]
    attr_number_type_occurrence: Annotated[
        Optional[str],
        Field(None, description="12TH occurs 'before' FLOOR in 12TH FLOOR", json_schema_extra=ATTRIBUTE),
    ]
    attr_premise_number_separator: Annotated[
        Optional[str],
        Field(
            None,
            description="'/' in 12/14 Archer Street where 12 is sub-premise number and 14 is premise number",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the sub-premise number", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Sub-premise number", json_schema_extra=TEXT)]


class SubPremiseNumberSuffix(XALModel):
    """Suffix of the sub-premise number, e.g. A in 12-A."""

    attr_number_suffix_separator: Annotated[
        Optional[str],
        Field(
            None,
            description="12-A where 12 is number and A is suffix and '-' is the separator",
            json_schema_extra=ATTRIBUTE,
        ),
    ]
    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the suffix", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Sub-premise number suffix", json_schema_extra=TEXT)]


class SubPremise(XALModel):
    """Specification of a single sub-premise.

    Examples of sub-premises are apartments and suites. Each sub-premise
    should be uniquely identifiable. Sub-premises nest: a suite on a floor
    is a sub-premise within a sub-premise.

    Attributes:
        attr_type: Type of the sub-premise (Suite, Floor, Apartment, etc).
        sub_premise: Nested sub-premises, in order.
        sub_premise_name: Names of the sub-premise, in order.
        sub_premise_number: Numbers of the sub-premise, in order.
        sub_premise_number_suffix: Suffix of the sub-premise number.
    """

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the sub-premise", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=9
    sub_premise: Annotated[
        Optional[List["SubPremise"]], Field(None, description="Nested sub-premises")
    ]
    sub_premise_name: Annotated[
        Optional[List[SubPremiseName]], Field(None, description="Names of the sub-premise")
    ]
    sub_premise_number: Annotated[
        Optional[List[SubPremiseNumber]], Field(None, description="Numbers of the sub-premise")
    ]
    sub_premise_number_suffix: Annotated[
        Optional[SubPremiseNumberSuffix], Field(None, description="Suffix of the sub-premise number")
    ]


class Premise(XALModel):
    """Specification of a single premise, for example a house or a building.

    The premise as a whole has a unique premise (house) number or a premise
    name. There could be more than one premise in a street referenced in an
    address, for example a building address near a major shopping centre or
    railway station, which is modeled by nesting a premise in a premise.

    Attributes:
        attr_premise_dependency: STREET, PREMISE, SUBPREMISE, PARK, FARM, etc.
        attr_premise_dependency_type: NEAR, ADJACENT TO, etc.
        attr_type: COMPLEXE in COMPLEX DES JARDINS, A building, station, etc.
        attr_premise_thoroughfare_connector: DES, DE, LA, DU in RUE DU BOIS.
            These terms connect a premise/thoroughfare type and
            premise/thoroughfare name.
        building_name: Name of the building.
        postal_code: Postal code of the premise.
        premise: Nested premise.
        premise_location: LOBBY, BASEMENT, GROUND FLOOR, etc.
        premise_name: Name of the premise.
        premise_number: Number of the premise.
        premise_number_suffix: Suffix of the premise number.
        sub_premise: Sub-premises of the premise, in order.
    """

    attr_premise_dependency: Annotated[
        Optional[str],
        Field(None, description="STREET, PREMISE, SUBPREMISE, PARK, FARM, etc", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=7
    attr_premise_dependency_type: Annotated[
        Optional[str], Field(None, description="NEAR, ADJACENT TO, etc", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=19
    attr_type: Annotated[
        Optional[str],
        Field(None, description="COMPLEXE in COMPLEX DES JARDINS, A building, station, etc", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=18
    attr_premise_thoroughfare_connector: Annotated[
        Optional[str],
        Field(None, description="DES, DE, LA, DU in RUE DU BOIS", json_schema_extra=ATTRIBUTE),
    ]
    building_name: Annotated[Optional[BuildingName], Field(None, description="Name of the building")]
    postal_code: Annotated[Optional[PostalCode], Field(None, description="Postal code of the premise")]
    premise: Annotated[Optional["Premise"], Field(None, description="Nested premise")]
    premise_location: Annotated[
        Optional[PremiseLocation], Field(None, description="LOBBY, BASEMENT, GROUND FLOOR, etc")
    ]
    premise_name: Annotated[Optional[PremiseName], Field(None, description="Name of the premise")]
    premise_number: Annotated[Optional[PremiseNumber], Field(None, description="Number of the premise")]
    premise_number_suffix: Annotated[
        Optional[PremiseNumberSuffix], Field(None, description="Suffix of the premise number")
    ]
    sub_premise: Annotated[
        Optional[List[SubPremise]], Field(None, description="Sub-premises of the premise")
    ]
