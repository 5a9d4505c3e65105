"""Tests for the command-line interface."""

from click.testing import CliRunner

from json_value import JsonValue, __version__
from json_value.cli import main, navigate


class TestCli:
    """Tests for the json-value commands."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version(self):
        """Test the version option."""
        result = self.runner.invoke(main, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.output

    def test_pretty(self, sample_json_file, sample_value):
        """Test pretty-printing a file to stdout."""
        result = self.runner.invoke(main, ["pretty", str(sample_json_file), "--indent", "2"])

        assert result.exit_code == 0
        assert result.output == sample_value.pretty_stringify(indent=2) + "\n"
        assert '"nickname"' not in result.output

    def test_pretty_keep_null(self, sample_json_file):
        """Test that --keep-null writes null fields."""
        result = self.runner.invoke(main, ["pretty", str(sample_json_file), "--keep-null"])

        assert result.exit_code == 0
        assert '   "nickname": null,' in result.output

    def test_compact_to_file(self, sample_json_file, sample_value, temp_dir):
        """Test writing compact output to a file."""
        output = temp_dir / "out.json"

        result = self.runner.invoke(main, ["compact", str(sample_json_file),
                                           "--empty-to-null", "-o", str(output)])

        assert result.exit_code == 0
        assert "Successfully wrote JSON" in result.output
        text = output.read_text(encoding="utf-8")
        assert text == sample_value.stringify(empty_values_to_null=True) + "\n"
        assert '"history":null' in text

    def test_invalid_json(self, temp_dir):
        """Test that parse failures exit with status 1."""
        path = temp_dir / "broken.json"
        path.write_text('{"a": ', encoding="utf-8")

        result = self.runner.invoke(main, ["compact", str(path)])

        assert result.exit_code == 1
        assert "JSON parsing failed" in result.output

    def test_missing_file(self, temp_dir):
        """Test that click rejects a missing input path."""
        result = self.runner.invoke(main, ["pretty", str(temp_dir / "absent.json")])

        assert result.exit_code == 2

    def test_get(self, sample_json_file):
        """Test selecting values by key and index."""
        result = self.runner.invoke(main, ["get", str(sample_json_file), "tags", "1"])
        assert result.exit_code == 0
        assert result.output == '"ops"\n'

        result = self.runner.invoke(main, ["get", str(sample_json_file), "nickname"])
        assert result.output == "null\n"

    def test_get_pretty(self, sample_json_file):
        """Test pretty output of a selected subtree."""
        result = self.runner.invoke(main, ["get", str(sample_json_file), "address", "--pretty"])

        assert result.exit_code == 0
        assert result.output == '{\n   "city": "Lyon",\n   "zip_code": "69001"\n}\n'

    def test_get_missing_path(self, sample_json_file):
        """Test that an absent path exits with status 1."""
        result = self.runner.invoke(main, ["get", str(sample_json_file), "address", "country"])

        assert result.exit_code == 1
        assert "Nothing found at address/country" in result.output


class TestNavigate:
    """Tests for path navigation."""

    def test_digit_segment_is_key_on_objects(self):
        """Test that numeric segments are keys when the node is an object."""
        value = JsonValue.of({"1": "one", "list": ["a", "b"]})

        assert navigate(value, ("1",)).as_string() == "one"
        assert navigate(value, ("list", "0")).as_string() == "a"

    def test_negative_index_is_absent(self):
        """Test that a negative index yields nothing."""
        value = JsonValue.of(["a"])

        assert navigate(value, ("-1",)).is_json_optional()
