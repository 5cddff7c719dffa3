"""
WP Automator Configuration - TOML-based settings for the lifecycle hooks.

This module provides:
- The settings schema with defaults and descriptions
- An immutable AutomatorConfig value handed to every hook
- Vendor directory lookup from composer.json
- Config file generation from the schema

Example usage:
    from wp_automator.config import load_config

    config = load_config(project_dir=Path("/srv/site/wp-content"))
    print(config.vendor_dir)  # /srv/site/wp-content/vendor
"""

import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

from wp_automator.config.schema import (
    ConfigField,
    ValidationError,
    generate_default_config,
    validate_config,
)
from wp_automator.config.toml_handler import (
    TOMLError,
    generate_toml_from_schema,
    read_toml,
    write_toml,
)

SECTION = "wp-automator"
CONFIG_FILE_NAME = "wp-automator.toml"
COMPOSER_FILE_NAME = "composer.json"
DEFAULT_VENDOR_DIR = "vendor"

AUTOMATOR_SCHEMA: dict[str, ConfigField] = {
    "vendor_dir": ConfigField(
        str, "", "Dependency vendor directory; empty means read composer.json"
    ),
    "content_dir_name": ConfigField(
        str, "wp-content", "Name the vendor directory's parent must have", min=1
    ),
    "mu_plugins_dir_name": ConfigField(
        str, "mu-plugins", "Bootstrap directory beneath the content root", min=1
    ),
    "plugins_pro_dir_name": ConfigField(
        str, "plugins-pro", "Source plugin tree beneath the content root", min=1
    ),
    "plugins_dir_name": ConfigField(
        str, "plugins", "Destination plugin tree beneath the content root", min=1
    ),
    "dir_mode": ConfigField(
        int, 0o755, "Mode for created directories (493 is 0o755)", min=0, max=0o7777
    ),
    "template_dir": ConfigField(
        str, "", "Directory holding loader templates; empty means bundled ones"
    ),
    "loader_name": ConfigField(
        str, "autoloader.php", "Base loader template and output file name", min=1
    ),
    "mu_loader_name": ConfigField(
        str, "mu-loader.php", "Template appended when nested groups exist", min=1
    ),
}

BUNDLED_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


class ConfigError(Exception):
    """Base exception for config API errors."""

    pass


@dataclass(frozen=True)
class AutomatorConfig:
    """
    Settings consumed by the reconciler and loader provisioner.

    Attributes:
        vendor_dir: Dependency vendor directory (the content root is its parent)
        content_dir_name: Required name of the content root
        mu_plugins_dir_name: Bootstrap directory name
        plugins_pro_dir_name: Source plugin tree name
        plugins_dir_name: Destination plugin tree name
        dir_mode: Permission mode for directories the hooks create
        template_dir: Template directory override ("" for bundled templates)
        loader_name: Base loader template / output file name
        mu_loader_name: Secondary loader template name
    """

    vendor_dir: str = ""
    content_dir_name: str = "wp-content"
    mu_plugins_dir_name: str = "mu-plugins"
    plugins_pro_dir_name: str = "plugins-pro"
    plugins_dir_name: str = "plugins"
    dir_mode: int = 0o755
    template_dir: str = ""
    loader_name: str = "autoloader.php"
    mu_loader_name: str = "mu-loader.php"

    @property
    def templates(self) -> Path:
        """Directory the loader templates are read from."""
        return Path(self.template_dir) if self.template_dir else BUNDLED_TEMPLATE_DIR

    def with_overrides(self, **overrides: Any) -> "AutomatorConfig":
        """Return a copy with validated overrides applied (None values ignored)."""
        values = {k: v for k, v in overrides.items() if v is not None}
        try:
            validate_config(values, AUTOMATOR_SCHEMA)
        except ValidationError as e:
            raise ConfigError(f"Invalid override: {e}") from e
        return replace(self, **values)


def vendor_dir_from_composer(project_dir: Path) -> Path:
    """
    Resolve the vendor directory the way Composer does.

    Reads ``config.vendor-dir`` from ``composer.json`` in ``project_dir``;
    falls back to ``vendor``. Relative values are joined to ``project_dir``.

    Raises:
        ConfigError: If composer.json exists but cannot be parsed
    """
    vendor = DEFAULT_VENDOR_DIR
    composer_file = project_dir / COMPOSER_FILE_NAME

    if composer_file.is_file():
        try:
            with open(composer_file, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read {composer_file}: {e}") from e

        settings = data.get("config") if isinstance(data, dict) else None
        configured = settings.get("vendor-dir") if isinstance(settings, dict) else None
        if isinstance(configured, str) and configured:
            vendor = configured

    return project_dir / vendor


def load_config(
    project_dir: Path | None = None,
    config_file: Path | None = None,
    **overrides: Any,
) -> AutomatorConfig:
    """
    Build an AutomatorConfig from defaults, a TOML file and overrides.

    Args:
        project_dir: Project directory (default: current working directory)
        config_file: TOML file to read (default: wp-automator.toml in
            project_dir, read only when present)
        **overrides: Field values that win over the file

    Returns:
        AutomatorConfig with vendor_dir always set

    Raises:
        ConfigError: If the file is unreadable or a value is invalid
    """
    project_dir = (project_dir or Path.cwd()).absolute()
    values = generate_default_config(AUTOMATOR_SCHEMA)

    explicit = config_file is not None
    config_file = config_file or project_dir / CONFIG_FILE_NAME

    if explicit or config_file.exists():
        try:
            data = read_toml(config_file)
        except TOMLError as e:
            raise ConfigError(str(e)) from e

        section = data.get(SECTION, {})
        if not isinstance(section, dict):
            raise ConfigError(f"[{SECTION}] in {config_file} must be a table")

        try:
            validate_config(section, AUTOMATOR_SCHEMA)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_file}: {e}") from e
        values.update(section)

    known = {f.name for f in fields(AutomatorConfig)}
    config = AutomatorConfig(**{k: v for k, v in values.items() if k in known})
    config = config.with_overrides(**overrides)

    if not config.vendor_dir:
        vendor = vendor_dir_from_composer(project_dir)
    else:
        vendor = Path(config.vendor_dir)
        if not vendor.is_absolute():
            vendor = project_dir / vendor

    return replace(config, vendor_dir=os.fspath(vendor))


def write_default_config(file_path: Path) -> None:
    """
    Write a commented default configuration file.

    Raises:
        ConfigError: If the file cannot be written
    """
    content = generate_toml_from_schema(
        SECTION, AUTOMATOR_SCHEMA, generate_default_config(AUTOMATOR_SCHEMA)
    )
    try:
        write_toml(file_path, content)
    except TOMLError as e:
        raise ConfigError(str(e)) from e


__all__ = [
    "AUTOMATOR_SCHEMA",
    "AutomatorConfig",
    "ConfigError",
    "load_config",
    "vendor_dir_from_composer",
    "write_default_config",
]
