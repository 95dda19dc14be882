import pytest
from xal.core.exceptions import SchemaFieldError
from xal.models import address, large_mail_user, locality, postal, premise
from xal.models.address import XAL, AddressDetails, CountryNameCode
from xal.models.base import XALModel
from xal.models.locality import Thoroughfare
from xal.models.premise import PremiseNumber
from xal.utils.xml_names import (
    FieldKind,
    camel_case,
    describe_fields,
    field_kind,
    is_repeated,
    tag_name,
    xml_item_name,
    xml_name,
    xml_qname,
)


ALL_RECORDS = sorted(
    {
        value
        for module in (address, large_mail_user, locality, postal, premise)
        for value in vars(module).values()
        if isinstance(value, type) and issubclass(value, XALModel) and value is not XALModel
    },
    key=lambda record: record.__name__,
)


class TestFieldKinds:

    def test_every_record_is_collected(self):
        """Test that all xAL records are covered by the parametrized checks."""
        assert len(ALL_RECORDS) == 46

    @pytest.mark.parametrize("model", ALL_RECORDS, ids=lambda record: record.__name__)
    def test_attribute_prefix_marks_attributes(self, model):
        """Test that attr_ fields are attributes, text is text content and the rest are elements."""
        for name in model.model_fields:
            kind = field_kind(model, name)
            if name.startswith("attr_"):
                assert kind == FieldKind.ATTRIBUTE, name
            elif name == "text":
                assert kind == FieldKind.TEXT, name
            elif model is PremiseNumber and name == "code":
                assert kind == FieldKind.ATTRIBUTE
            else:
                assert kind == FieldKind.ELEMENT, name

    def test_premise_number_code_is_an_attribute(self):
        """Test the one attribute keyed without the attr_ prefix."""
        assert field_kind(PremiseNumber, "code") == FieldKind.ATTRIBUTE
        assert xml_name(PremiseNumber, "code") == "Code"

    def test_unknown_field_raises(self):
        """Test that asking about an undeclared field raises SchemaFieldError."""
        with pytest.raises(SchemaFieldError) as exc_info:
            field_kind(XAL, "country")

        assert isinstance(exc_info.value, KeyError)
        assert str(exc_info.value) == "XAL has no field 'country'"


class TestXmlNames:

    @pytest.mark.parametrize(
        "model,field_name,expected",
        [
            (XAL, "attr_version", "Version"),
            (XAL, "address_details", "AddressDetails"),
            (AddressDetails, "attr_valid_from_date", "ValidFromDate"),
            (AddressDetails, "address_lines", "AddressLines"),
            (CountryNameCode, "attr_scheme", "Scheme"),
            (CountryNameCode, "text", None),
            (Thoroughfare, "thoroughfare_number_range", "ThoroughfareNumberRange"),
            (Thoroughfare, "attr_dependent_thoroughfares_type", "DependentThoroughfaresType"),
            (Thoroughfare, "thoroughfare_name", "ThoroughfareName"),
        ],
    )
    def test_xml_name(self, model, field_name, expected):
        """Test the XML names derived from the JSON keys."""
        assert xml_name(model, field_name) == expected

    def test_address_lines_are_wrapped(self):
        """Test that address lines are written as AddressLine items inside AddressLines."""
        assert xml_item_name(AddressDetails, "address_lines") == "AddressLine"
        assert xml_item_name(AddressDetails, "locality") is None

    def test_tag_names(self):
        """Test record element names, the root being xAL."""
        assert tag_name(XAL) == "xAL"
        assert tag_name(AddressDetails) == "AddressDetails"

    def test_xml_qname(self):
        """Test names qualified with the xAL namespace."""
        assert xml_qname("xAL") == "{urn:oasis:names:tc:ciq:xsdschema:xAL:2.0}xAL"

    def test_camel_case(self):
        assert camel_case("post_office_number") == "PostOfficeNumber"
        assert camel_case("type") == "Type"


class TestDescribeFields:

    def test_repeated_fields(self):
        """Test detection of ordered sequences."""
        assert is_repeated(XAL, "address_details")
        assert is_repeated(AddressDetails, "address_lines")
        assert not is_repeated(AddressDetails, "country")
        assert not is_repeated(XAL, "attr_version")

    def test_describe_address_details(self):
        """Test the full XML description of AddressDetails in declaration order."""
        fields = describe_fields(AddressDetails)

        assert [field.field_name for field in fields] == list(AddressDetails.model_fields)
        assert fields[0].kind == FieldKind.ATTRIBUTE
        assert fields[0].xml_name == "AddressType"

        lines = fields[5]
        assert lines.field_name == "address_lines"
        assert lines.kind == FieldKind.ELEMENT
        assert lines.item_name == "AddressLine"
        assert lines.repeated is True

    def test_describe_text_field(self):
        """Test that text content is described without a name."""
        text = describe_fields(CountryNameCode)[-1]

        assert text.kind == FieldKind.TEXT
        assert text.xml_name is None
        assert text.repeated is False
