"""
Tests for configuration dataclasses and YAML loading.
"""

import pytest

from ocrtex.config import LINE_TOLERANCE, AlignmentConfig, RepairConfig, load_config
from ocrtex.exceptions import ConfigurationError
from ocrtex.models import COORDINATE_TOLERANCE


class TestRepairConfig:
    """Test RepairConfig behavior."""

    def test_default_config(self):
        """Default config has expected values."""
        config = RepairConfig()

        assert config.fuzzy_commands is True
        assert config.unify_greek_case is True
        assert config.max_prefixed_distance == 2
        assert config.max_plain_distance == 1
        assert config.additional_commands == set()

    def test_negative_distance(self):
        """Negative plain distance raises error."""
        with pytest.raises(ValueError, match="max_plain_distance"):
            RepairConfig(max_plain_distance=-1)

    def test_prefixed_below_plain(self):
        """Prefixed budget below plain budget raises error."""
        with pytest.raises(ValueError, match="max_prefixed_distance"):
            RepairConfig(max_prefixed_distance=0, max_plain_distance=1)

    def test_non_alphabetic_command(self):
        """Command names must be letters only."""
        with pytest.raises(ValueError, match="additional_commands"):
            RepairConfig(additional_commands={"\\mathfrak"})


class TestAlignmentConfig:
    """Test AlignmentConfig behavior."""

    def test_default_config(self):
        """Default config has expected values."""
        config = AlignmentConfig()

        assert config.line_tolerance == LINE_TOLERANCE
        assert config.coordinate_tolerance == COORDINATE_TOLERANCE
        assert isinstance(config.repair, RepairConfig)

    @pytest.mark.parametrize("value", [-0.1, 1.0, 5])
    def test_tolerance_out_of_range(self, value):
        """Tolerance outside [0, 1) raises error."""
        with pytest.raises(ValueError, match="line_tolerance"):
            AlignmentConfig(line_tolerance=value)


class TestLoadConfig:
    """Test loading config from YAML."""

    def test_full_file(self, tmp_path):
        """All sections are read."""
        path = tmp_path / "settings.yaml"
        path.write_text(
            "line_tolerance: 0.02\n"
            "coordinate_tolerance: 0.005\n"
            "repair:\n"
            "  fuzzy_commands: false\n"
            "  additional_commands: [mathfrak, operatorname]\n"
        )

        config = load_config(path)

        assert config.line_tolerance == 0.02
        assert config.coordinate_tolerance == 0.005
        assert config.repair.fuzzy_commands is False
        assert config.repair.additional_commands == {"mathfrak", "operatorname"}

    def test_empty_file_gives_defaults(self, tmp_path):
        """Empty file gives the default config."""
        path = tmp_path / "empty.yaml"
        path.write_text("")

        config = load_config(str(path))

        assert config.line_tolerance == LINE_TOLERANCE
        assert config.repair.fuzzy_commands is True

    def test_unknown_key(self, tmp_path):
        """Misspelled option is rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("line_tolerence: 0.02\n")

        with pytest.raises(ConfigurationError, match="line_tolerence"):
            load_config(path)

    def test_unknown_repair_key(self, tmp_path):
        """Unknown repair option is rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("repair:\n  fuzzy: false\n")

        with pytest.raises(ConfigurationError, match="fuzzy"):
            load_config(path)

    def test_invalid_value(self, tmp_path):
        """Validation errors become ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("line_tolerance: 2\n")

        with pytest.raises(ConfigurationError, match="line_tolerance"):
            load_config(path)

    def test_not_a_mapping(self, tmp_path):
        """Top level must be a mapping."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="mapping"):
            load_config(path)

    def test_missing_file(self, tmp_path):
        """Missing file raises ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Cannot read"):
            load_config(tmp_path / "missing.yaml")

    def test_single_additional_command(self, tmp_path):
        """Scalar command name is read as one name."""
        path = tmp_path / "settings.yaml"
        path.write_text("repair:\n  additional_commands: mathfrak\n")

        assert load_config(path).repair.additional_commands == {"mathfrak"}

    def test_additional_commands_must_be_names(self, tmp_path):
        """Non-name entries are rejected."""
        path = tmp_path / "bad.yaml"
        path.write_text("repair:\n  additional_commands: [3]\n")

        with pytest.raises(ConfigurationError, match="additional_commands"):
            load_config(path)

    def test_additional_commands_unhashable_entry(self, tmp_path):
        """Mapping entry is rejected as ConfigurationError."""
        path = tmp_path / "bad.yaml"
        path.write_text("repair:\n  additional_commands:\n    - mathfrak: true\n")

        with pytest.raises(ConfigurationError, match="additional_commands"):
            load_config(path)
