"""
Tests for Configuration.

This test suite covers:
1. Schema validation (type mismatch, constraint violation)
2. TOML generation from schema (with comments)
3. Loading from defaults, TOML files, composer.json and overrides
4. Error cases
"""

import json
import tempfile
from pathlib import Path

import pytest

from wp_automator.config import (
    AUTOMATOR_SCHEMA,
    AutomatorConfig,
    ConfigError,
    load_config,
    vendor_dir_from_composer,
    write_default_config,
)
from wp_automator.config.schema import (
    ConfigField,
    SchemaError,
    ValidationError,
    generate_default_config,
    validate_config,
)
from wp_automator.config.toml_handler import (
    TOMLError,
    generate_toml_from_schema,
    read_toml,
)
from wp_automator.tree import resolve_root


class TestSchemaValidation:
    """Test schema field validation."""

    def test_field_default_type_mismatch(self):
        """ConfigField should reject default value that doesn't match type."""
        with pytest.raises(SchemaError, match="Expected type int"):
            ConfigField(int, "not an int", "Bad default")

    def test_field_min_max_constraints(self):
        """ConfigField should enforce min/max for numbers."""
        field = ConfigField(int, 0o755, "Mode", min=0, max=0o7777)
        field.validate(0)
        field.validate(0o7777)

        with pytest.raises(ValidationError, match="less than minimum"):
            field.validate(-1)

        with pytest.raises(ValidationError, match="greater than maximum"):
            field.validate(0o10000)

    def test_bool_is_not_an_int(self):
        """ConfigField should reject booleans for int fields."""
        with pytest.raises(ValidationError, match="Expected type int"):
            AUTOMATOR_SCHEMA["dir_mode"].validate(True)

    def test_string_length_constraint(self):
        """ConfigField should enforce string length minimums."""
        with pytest.raises(ValidationError, match="less than minimum"):
            AUTOMATOR_SCHEMA["plugins_dir_name"].validate("")

    def test_unsupported_type(self):
        """ConfigField should only accept int and str fields."""
        with pytest.raises(SchemaError, match="Unsupported field type bool"):
            ConfigField(bool, True, "Flag")

    def test_max_only_for_int(self):
        """ConfigField should reject max on string fields."""
        with pytest.raises(SchemaError, match="max is only supported"):
            ConfigField(str, "a", "Name", max=3)

    def test_default_checked_against_constraints(self):
        """ConfigField should reject a default that breaks its own bounds."""
        with pytest.raises(SchemaError, match="less than minimum"):
            ConfigField(str, "", "Name", min=1)

    def test_validate_partial_config(self):
        """validate_config should accept a subset of fields."""
        validate_config({"plugins_dir_name": "public"}, AUTOMATOR_SCHEMA)

    def test_validate_unknown_field(self):
        """validate_config should reject unknown fields."""
        with pytest.raises(ValidationError, match="Unknown configuration field"):
            validate_config({"colour": "blue"}, AUTOMATOR_SCHEMA)

    def test_schema_matches_dataclass_defaults(self):
        """Schema defaults should equal AutomatorConfig defaults."""
        defaults = generate_default_config(AUTOMATOR_SCHEMA)
        config = AutomatorConfig()
        for name, value in defaults.items():
            assert getattr(config, name) == value


class TestTOMLGeneration:
    """Test TOML generation from schema."""

    def test_comments_and_values(self):
        """Generated TOML should carry descriptions and constraints."""
        content = generate_toml_from_schema(
            "wp-automator", AUTOMATOR_SCHEMA, {"plugins_dir_name": "public"}
        )

        assert "# Configuration for wp-automator" in content
        assert "[wp-automator]" in content
        assert "# Destination plugin tree beneath the content root" in content
        assert 'plugins_dir_name = "public"' in content
        assert "dir_mode = 493" in content

    def test_read_missing_file(self):
        """read_toml should raise TOMLError for a missing file."""
        with pytest.raises(TOMLError, match="TOML file not found"):
            read_toml(Path("/nonexistent/wp-automator.toml"))

    def test_read_invalid_file(self, tmp_path):
        """read_toml should raise TOMLError for invalid TOML."""
        path = tmp_path / "bad.toml"
        path.write_text("not = [valid")
        with pytest.raises(TOMLError, match="Failed to parse"):
            read_toml(path)


class TestLoadConfig:
    """Test building AutomatorConfig."""

    def test_defaults(self, tmp_path):
        """Should default the vendor dir to <project>/vendor."""
        config = load_config(project_dir=tmp_path)

        assert config.vendor_dir == str(tmp_path / "vendor")
        assert config.plugins_pro_dir_name == "plugins-pro"
        assert config.dir_mode == 0o755

    def test_reads_project_config_file(self, tmp_path):
        """Should pick up wp-automator.toml in the project directory."""
        (tmp_path / "wp-automator.toml").write_text(
            '[wp-automator]\nplugins_dir_name = "public"\ndir_mode = 0o750\n'
        )

        config = load_config(project_dir=tmp_path)

        assert config.plugins_dir_name == "public"
        assert config.dir_mode == 0o750

    def test_relative_vendor_dir_in_file(self, tmp_path):
        """Should resolve a relative vendor_dir against the project dir."""
        (tmp_path / "wp-automator.toml").write_text(
            '[wp-automator]\nvendor_dir = "lib/vendor"\n'
        )

        config = load_config(project_dir=tmp_path)

        assert config.vendor_dir == str(tmp_path / "lib" / "vendor")

    def test_overrides_win(self, tmp_path):
        """Should apply overrides after the file."""
        (tmp_path / "wp-automator.toml").write_text(
            '[wp-automator]\nplugins_dir_name = "public"\n'
        )

        config = load_config(
            project_dir=tmp_path, plugins_dir_name="other", vendor_dir=None
        )

        assert config.plugins_dir_name == "other"

    def test_invalid_value(self, tmp_path):
        """Should raise ConfigError for a wrongly typed value."""
        (tmp_path / "wp-automator.toml").write_text('[wp-automator]\ndir_mode = "755"\n')

        with pytest.raises(ConfigError, match="dir_mode"):
            load_config(project_dir=tmp_path)

    def test_unknown_field(self, tmp_path):
        """Should raise ConfigError for unknown fields."""
        (tmp_path / "wp-automator.toml").write_text('[wp-automator]\nextra = 1\n')

        with pytest.raises(ConfigError, match="Unknown configuration field"):
            load_config(project_dir=tmp_path)

    def test_section_must_be_a_table(self, tmp_path):
        """Should raise ConfigError when the section is not a table."""
        (tmp_path / "wp-automator.toml").write_text("wp-automator = 5\n")

        with pytest.raises(ConfigError, match="must be a table"):
            load_config(project_dir=tmp_path)

    def test_relative_project_dir(self, tmp_path, monkeypatch):
        """Should make a relative project dir absolute so the root resolves."""
        root = tmp_path / "wp-content"
        root.mkdir()
        monkeypatch.chdir(root)

        config = load_config(project_dir=Path("."))

        assert Path(config.vendor_dir).is_absolute()
        assert resolve_root(config.vendor_dir) is not None
        assert Path(config.vendor_dir).name == "vendor"

    def test_relative_vendor_override(self, tmp_path, monkeypatch):
        """Should join a relative vendor override to the absolute project dir."""
        root = tmp_path / "wp-content"
        root.mkdir()
        monkeypatch.chdir(root)

        config = load_config(vendor_dir="vendor")

        assert resolve_root(config.vendor_dir) == Path(config.vendor_dir).parent

    def test_explicit_missing_file(self, tmp_path):
        """Should raise ConfigError when an explicit config file is missing."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(project_dir=tmp_path, config_file=tmp_path / "missing.toml")

    def test_invalid_override(self, tmp_path):
        """Should raise ConfigError for an invalid override."""
        with pytest.raises(ConfigError, match="Invalid override"):
            load_config(project_dir=tmp_path, dir_mode="755")

    def test_default_config_file_loads(self):
        """A generated default file should load back to the defaults."""
        with tempfile.TemporaryDirectory() as tmpdir:
            project = Path(tmpdir)
            write_default_config(project / "wp-automator.toml")

            config = load_config(project_dir=project)

            assert config == AutomatorConfig(vendor_dir=str(project / "vendor"))


class TestComposerVendorDir:
    """Test vendor directory lookup in composer.json."""

    def test_without_composer_json(self, tmp_path):
        """Should fall back to vendor."""
        assert vendor_dir_from_composer(tmp_path) == tmp_path / "vendor"

    def test_configured_vendor_dir(self, tmp_path):
        """Should honour config.vendor-dir."""
        (tmp_path / "composer.json").write_text(
            json.dumps({"config": {"vendor-dir": "deps"}})
        )

        assert vendor_dir_from_composer(tmp_path) == tmp_path / "deps"

    def test_composer_without_config(self, tmp_path):
        """Should fall back to vendor when composer.json has no config."""
        (tmp_path / "composer.json").write_text(json.dumps({"name": "acme/site"}))

        assert vendor_dir_from_composer(tmp_path) == tmp_path / "vendor"

    def test_invalid_composer_json(self, tmp_path):
        """Should raise ConfigError for unparsable composer.json."""
        (tmp_path / "composer.json").write_text("{ invalid json }")

        with pytest.raises(ConfigError, match="Failed to read"):
            vendor_dir_from_composer(tmp_path)

    def test_load_config_uses_composer(self, tmp_path):
        """load_config should use composer.json when vendor_dir is unset."""
        (tmp_path / "composer.json").write_text(
            json.dumps({"config": {"vendor-dir": "deps"}})
        )

        assert load_config(project_dir=tmp_path).vendor_dir == str(tmp_path / "deps")
