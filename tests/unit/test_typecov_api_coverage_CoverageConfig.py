"""Unit tests for typecov.api.coverage.CoverageConfig module."""

import json

import pytest

from typecov.api.coverage.CoverageConfig import CoverageConfig
from typecov.api.coverage.CoverageConfigError import CoverageConfigError

pytestmark = pytest.mark.unit


class TestCoverageConfig:
    """Test CoverageConfig class."""

    def test_defaults(self):
        """Defaults match the reference output format."""
        config = CoverageConfig()
        assert config.sentinel == "any"
        assert config.snippet_length == 40
        assert config.indent == 2
        assert config.language is None

    def test_from_config_dict_missing_section(self):
        """A missing coverage section yields defaults."""
        assert CoverageConfig.from_config_dict({}) == CoverageConfig()

    def test_from_config_dict_valid(self):
        """Options are read from the coverage section."""
        config = CoverageConfig.from_config_dict({"coverage": {"snippet_length": 10, "language": "tsx"}})
        assert config.snippet_length == 10
        assert config.language == "tsx"

    def test_from_config_dict_not_a_dict(self):
        """A non-dict section is rejected."""
        with pytest.raises(CoverageConfigError, match="must be a dict"):
            CoverageConfig.from_config_dict({"coverage": "yes"})

    def test_from_config_dict_collects_all_errors(self):
        """Every invalid field is reported at once."""
        with pytest.raises(CoverageConfigError) as exc_info:
            CoverageConfig.from_config_dict({"coverage": {"snippet_length": 0, "indent": -1, "bogus": 1}})
        errors = exc_info.value.errors
        assert len(errors) == 3
        assert any(error.startswith("coverage.snippet_length") for error in errors)
        assert any(error.startswith("coverage.indent") for error in errors)
        assert any(error.startswith("coverage.bogus") for error in errors)

    def test_load(self, tmp_path):
        """Config is loaded from a JSON file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"coverage": {"sentinel": "unknown"}}), encoding="utf-8")
        assert CoverageConfig.load(path).sentinel == "unknown"

    def test_load_missing_file(self, tmp_path):
        """A missing file is a config error."""
        with pytest.raises(CoverageConfigError, match="not found"):
            CoverageConfig.load(tmp_path / "missing.json")

    def test_load_invalid_json(self, tmp_path):
        """Broken JSON is a config error."""
        path = tmp_path / "config.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(CoverageConfigError, match="Invalid JSON"):
            CoverageConfig.load(path)


class TestCoverageConfigError:
    """Test CoverageConfigError exception."""

    def test_is_value_error(self):
        """CoverageConfigError is a ValueError."""
        assert issubclass(CoverageConfigError, ValueError)

    def test_message_lists_errors(self):
        """The message lists every error."""
        error = CoverageConfigError(["first", "second"])
        assert str(error) == "Coverage configuration validation failed:\n  - first\n  - second"

    def test_single_string(self):
        """A single string is wrapped in a list."""
        assert CoverageConfigError("only").errors == ["only"]
