"""Tests for configuration loading and validation."""

import tempfile
from pathlib import Path

import pydantic
import pytest
import yaml

from elo_ranker.core.config import RankerConfig, load_config
from elo_ranker.core.errors import ConfigurationError, InvalidRosterError


class TestRankerConfig:
    """Tests for RankerConfig."""

    def test_defaults(self):
        """Test default values."""
        config = RankerConfig()
        assert config.initial_rating == 1000
        assert config.k_factor == 32.0
        assert config.rating_divisor == 10.0
        assert config.total_rounds == 3
        assert config.extension_rounds == 3
        assert config.seed is None

    @pytest.mark.parametrize(
        "field",
        ["k_factor", "rating_divisor", "total_rounds", "extension_rounds"],
    )
    def test_non_positive_values_fail(self, field):
        """Test non-positive tuning values are rejected."""
        with pytest.raises(pydantic.ValidationError):
            RankerConfig(**{field: 0})

    def test_negative_initial_rating_allowed(self):
        """Test ratings have no floor."""
        assert RankerConfig(initial_rating=-5).initial_rating == -5


class TestLoadConfig:
    """Tests for YAML config loading."""

    def test_load_valid_config(self):
        """Test loading a valid YAML file."""
        config_data = {"total_rounds": 5, "seed": 123, "rating_divisor": 400}

        with tempfile.NamedTemporaryFile(suffix=".yaml", delete=False, mode="w") as f:
            yaml.dump(config_data, f)
            f.flush()

            config = load_config(f.name)
            assert config.total_rounds == 5
            assert config.seed == 123
            assert config.rating_divisor == 400
            assert config.k_factor == 32.0

        Path(f.name).unlink()

    def test_load_empty_file_gives_defaults(self, tmp_path):
        """Test an empty file yields the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(path) == RankerConfig()

    def test_load_non_mapping_fails(self, tmp_path):
        """Test a YAML list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="Expected a mapping"):
            load_config(path)

    def test_load_invalid_value_fails(self, tmp_path):
        """Test invalid values are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("total_rounds: 0\n")
        with pytest.raises(pydantic.ValidationError):
            load_config(path)

    def test_load_missing_file_fails(self):
        """Test missing file raises error."""
        with pytest.raises(FileNotFoundError):
            load_config("/nonexistent/config.yaml")


class TestErrors:
    """Tests for error formatting."""

    def test_message_with_suggestion(self):
        """Test errors carry a label and suggestion."""
        error = InvalidRosterError(" , ")
        assert str(error).startswith("[Roster Error] No participant names")
        assert "[Suggestion]" in str(error)

    def test_message_without_suggestion(self):
        """Test suggestion line is omitted when absent."""
        error = ConfigurationError("bad value")
        assert str(error) == "[Configuration Error] bad value"
