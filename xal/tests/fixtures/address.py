import pytest
from xal.models.address import XAL, AddressDetails, AddressLine, Country, CountryNameCode
from xal.models.locality import Locality, LocalityName
from xal.services.json_service import AddressJSONService
from xal.tests.constants.address import AddressTestConstants


@pytest.fixture(scope="function")
def mock_address_details_model():
    """Fixture providing the address used in the documentation example."""
    return AddressDetails(
        address_lines=[
            AddressLine(text=line) for line in AddressTestConstants.MOCK_ADDRESS_LINES.value
        ],
        country=Country(
            country_name_code=CountryNameCode(
                attr_scheme=AddressTestConstants.MOCK_ISO_SCHEME.value,
                text=AddressTestConstants.MOCK_COUNTRY_CODE.value,
            )
        ),
        locality=Locality(locality_name=[LocalityName(text="Springfield")]),
    )


@pytest.fixture(scope="function")
def mock_xal_model():
    """Fixture providing a fully populated XAL document."""
    return XAL.model_validate(AddressTestConstants.MOCK_XAL_DATA.value)


@pytest.fixture(scope="function")
def compact_json_service():
    """Fixture providing a JSON service writing compact output."""
    return AddressJSONService(indent=0)
