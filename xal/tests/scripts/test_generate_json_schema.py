import yaml
from xal.core.config import settings
from xal.generate_json_schema import generate_schema


class TestGenerateJsonSchema:

    def test_schema_is_written(self, tmp_path):
        """Test that the XAL schema is written as YAML and returned."""
        path = tmp_path / "xal_schema.yaml"

        schema = generate_schema(path)

        with open(path) as f:
            written = yaml.safe_load(f)

        assert written == schema
        assert written["title"] == "XAL"
        assert written["tag_name"] == "xAL"
        assert written["x-xal-version"] == "2.0"
        assert written["properties"]["attr_version"]["is_attribute"] is True

    def test_recursive_records_are_defined(self, tmp_path):
        """Test that the self-recursive records appear among the definitions."""
        schema = generate_schema(tmp_path / "xal_schema.yaml")

        for name in ("DependentLocality", "Premise", "SubPremise", "Thoroughfare"):
            assert name in schema["$defs"]

        text = schema["$defs"]["AddressLine"]["properties"]["text"]
        assert text["is_text"] is True
        assert schema["$defs"]["AddressDetails"]["properties"]["address_lines"]["xml_item"] == "AddressLine"

    def test_default_output_path(self, tmp_path, mocker):
        """Test that the configured output path is used when none is given."""
        path = tmp_path / "default.yaml"
        mocker.patch.object(settings, "SCHEMA_OUTPUT_PATH", str(path))

        generate_schema()

        assert path.exists()
