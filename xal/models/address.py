"""Top-level records of the xAL address schema.

This module contains the root ``XAL`` record, the address details it lists
and the three ways an address is anchored: administrative area, country and
locality.
"""

from typing import List, Optional
from typing_extensions import Annotated
from pydantic import ConfigDict, Field

from xal.models.base import ATTRIBUTE, TEXT, XALModel
from xal.models.locality import Locality, Thoroughfare


class AddressLine(XALModel):
    """Free format address representation.

    An address can have more than one line. The order of the lines must be
    preserved.

    Attributes:
        attr_type: Type of the address line, e.g. Street, Address Line 1.
        attr_code: Used by postal services to encode the name of the element.
        text: The line itself.
    """

    attr_type: Annotated[
        Optional[str],
        Field(None, description="Type of address line. eg. Street, Address Line 1, etc", json_schema_extra=ATTRIBUTE),
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Address line", json_schema_extra=TEXT)]


AddressLines = List[AddressLine]


class AdministrativeAreaName(XALModel):
    """Name of the administrative area, e.g. MI in USA, NSW in Australia."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Type of the name", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=12
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Administrative area name", json_schema_extra=TEXT)]


class AdministrativeArea(XALModel):
    """Provinces, counties, special regions (such as "Rijnmond"), etc.

    Attributes:
        attr_type: Province or State or County or Kanton, etc.
        attr_usage_type: Postal or Political.
        attr_indicator: Erode (Dist) where (Dist) is the Indicator.
        administrative_area_name: Names of the area, in order.
        locality: Locality within the area.
    """

    attr_type: Annotated[
        Optional[str],
        Field(None, description="Province or State or County or Kanton, etc", json_schema_extra=ATTRIBUTE),
    ]  # maxLength=8
    attr_usage_type: Annotated[
        Optional[str], Field(None, description="Postal or Political", json_schema_extra=ATTRIBUTE)
    ]
    attr_indicator: Annotated[
        Optional[str],
        Field(None, description="Erode (Dist) where (Dist) is the Indicator", json_schema_extra=ATTRIBUTE),
    ]
    administrative_area_name: Annotated[
        Optional[List[AdministrativeAreaName]], Field(None, description="Names of the administrative area")
    ]
    locality: Annotated[Optional[Locality], Field(None, description="Locality within the administrative area")]


class CountryName(XALModel):
    """Specification of the name of a country."""

    attr_type: Annotated[
        Optional[str], Field(None, description="Old name, new name, etc", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Country name", json_schema_extra=TEXT)]


class CountryNameCode(XALModel):
    """A country code according to the specified scheme.

    Scheme values include, but are not limited to, ``iso.3166-2`` and
    ``iso.3166-3`` for two and three character country codes.
    """

    attr_scheme: Annotated[
        Optional[str], Field(None, description="Country code scheme, e.g. iso.3166-2", json_schema_extra=ATTRIBUTE)
    ]
    attr_code: Annotated[
        Optional[str],
        Field(None, description="Used by postal services to encode the name of the element", json_schema_extra=ATTRIBUTE),
    ]
    text: Annotated[Optional[str], Field(None, description="Country code", json_schema_extra=TEXT)]


class Country(XALModel):
    """Specification of a country.

    Attributes:
        administrative_area: Administrative area within the country.
        country_name: Name of the country.
        country_name_code: Coded name of the country.
        locality: Locality within the country.
        thoroughfare: Thoroughfare within the country.
    """

    administrative_area: Annotated[
        Optional[AdministrativeArea], Field(None, description="Administrative area within the country")
    ]
    country_name: Annotated[Optional[CountryName], Field(None, description="Name of the country")]
    country_name_code: Annotated[
        Optional[CountryNameCode], Field(None, description="Country code according to a scheme")
    ]
    locality: Annotated[Optional[Locality], Field(None, description="Locality within the country")]
    thoroughfare: Annotated[Optional[Thoroughfare], Field(None, description="Thoroughfare within the country")]


class AddressDetails(XALModel):
    """Details of one address.

    A subject can have several, e.g. to track address history.

    Attributes:
        attr_address_type: Type of the address (postal, residential, etc).
        attr_current_status: Moved, living, investment, deceased, etc.
        attr_usage: Business, personal, etc.
        attr_valid_from_date: Start date of the validity of the address.
        attr_valid_to_date: End date of the validity of the address.
        address_lines: Free format lines of the address, in order.
        administrative_area: Administrative area of the address.
        country: Country of the address.
        locality: Locality of the address.
    """

    attr_address_type: Annotated[
        Optional[str], Field(None, description="Type of the address", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=23
    attr_current_status: Annotated[
        Optional[str], Field(None, description="Current status of the address", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=10
    attr_usage: Annotated[
        Optional[str], Field(None, description="Usage of the address", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=6
    attr_valid_from_date: Annotated[
        Optional[str], Field(None, description="Start of validity", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=11
    attr_valid_to_date: Annotated[
        Optional[str], Field(None, description="End of validity", json_schema_extra=ATTRIBUTE)
    ]  # maxLength=13
    address_lines: Annotated[
        Optional[AddressLines],
        Field(None, description="Free format address lines", json_schema_extra={"xml_item": "AddressLine"}),
    ]
    administrative_area: Annotated[
        Optional[AdministrativeArea], Field(None, description="Administrative area of the address")
    ]
    country: Annotated[Optional[Country], Field(None, description="Country of the address")]
    locality: Annotated[Optional[Locality], Field(None, description="Locality of the address")]


class XAL(XALModel):
    """Root element for a list of addresses.

    Attributes:
        attr_version: Version number of the xAL document.
        address_details: Addresses, in order.
    """

    attr_version: Annotated[
        Optional[str], Field(None, description="Version number of the document", json_schema_extra=ATTRIBUTE)
    ]
    address_details: Annotated[
        Optional[List[AddressDetails]], Field(None, description="Addresses of the document")
    ]

    model_config = ConfigDict(from_attributes=True, json_schema_extra={"tag_name": "xAL"})
