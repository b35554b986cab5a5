"""Configuration management for coursekit.

This module provides a unified configuration system that supports:
- Configuration files in TOML format
- Environment variables
- Multiple configuration file locations (project, user, system)
- Type-safe configuration using Pydantic

Configuration Priority (highest to lowest):
1. Environment variables
2. Project configuration file (.coursekit/config.toml or coursekit.toml)
3. User configuration file (~/.config/coursekit/config.toml)
4. System configuration file (/etc/coursekit/config.toml)
5. Default values

Environment Variable Naming:
- Nested fields: COURSEKIT_<SECTION>__<FIELD> (e.g., COURSEKIT_LOGGING__LOG_LEVEL)
"""

import logging
from pathlib import Path

import platformdirs
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from coursekit.core.course import DEFAULT_LANGUAGE

logger = logging.getLogger(__name__)

APP_NAME = "coursekit"

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CourseDefaultsConfig(BaseModel):
    """Defaults for newly created courses."""

    default_language: str = Field(
        default=DEFAULT_LANGUAGE,
        min_length=1,
        description="Language tag for new courses (e.g. 'en-US', 'de-DE')",
    )


class SerializationConfig(BaseModel):
    """Output formatting for course files."""

    xml_indent: str = Field(
        default="    ",
        description="Indentation used when writing XML course files",
    )

    json_indent: int = Field(
        default=2,
        ge=0,
        le=8,
        description="Indentation used when writing JSON contract files",
    )

    default_format: str = Field(
        default="xml",
        description="Format used when the output file has no recognized suffix: 'xml' or 'json'",
    )

    @field_validator("default_format")
    @classmethod
    def validate_default_format(cls, v: str) -> str:
        """Validate the default format."""
        v_lower = v.lower()
        if v_lower not in ("xml", "json"):
            raise ValueError(f"Default format must be 'xml' or 'json', got '{v}'")
        return v_lower


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        v_upper = v.upper()
        if v_upper not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {LOG_LEVELS}, got {v}")
        return v_upper


class CourseKitConfig(BaseSettings):
    """Main coursekit configuration.

    Loaded from multiple sources in priority order: environment variables >
    project config > user config > system config > defaults.

    Environment Variables:
        - COURSEKIT_COURSE__DEFAULT_LANGUAGE: Language of new courses
        - COURSEKIT_SERIALIZATION__XML_INDENT: XML indentation
        - COURSEKIT_SERIALIZATION__JSON_INDENT: JSON indentation
        - COURSEKIT_LOGGING__LOG_LEVEL: Logging level
    """

    model_config = SettingsConfigDict(
        env_prefix="COURSEKIT_",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    course: CourseDefaultsConfig = Field(
        default_factory=CourseDefaultsConfig,
        description="Defaults for new courses",
    )

    serialization: SerializationConfig = Field(
        default_factory=SerializationConfig,
        description="Course file formatting",
    )

    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging configuration",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customize the sources and their priority for settings.

        Priority order (highest to lowest):
        1. Environment variables
        2. Project configuration file
        3. User configuration file
        4. System configuration file
        5. Init settings (programmatic)
        """
        config_files = find_config_files()

        # pydantic-settings gives sources further left a higher priority, so
        # collect the files from lowest to highest and reverse them below.
        toml_sources = []
        for kind in ("system", "user", "project"):
            config_file = config_files[kind]
            if config_file is None:
                continue
            toml_sources.append(TomlConfigSettingsSource(settings_cls, toml_file=config_file))
            logger.debug(f"Loaded {kind} config: {config_file}")

        return (
            env_settings,
            *reversed(toml_sources),
            init_settings,
        )


def find_config_files() -> dict[str, Path | None]:
    """Find configuration files in standard locations.

    Returns:
        Dictionary with keys 'system', 'user', 'project', each containing
        a Path to the config file if it exists, or None otherwise.
    """
    config_files: dict[str, Path | None] = {
        "system": None,
        "user": None,
        "project": None,
    }

    system_config = Path("/etc") / APP_NAME / "config.toml"
    if system_config.exists():
        config_files["system"] = system_config

    user_config = Path(platformdirs.user_config_dir(APP_NAME, appauthor=False)) / "config.toml"
    if user_config.exists():
        config_files["user"] = user_config

    # .coursekit/config.toml takes precedence over coursekit.toml
    cwd = Path.cwd()
    for project_config in (cwd / f".{APP_NAME}" / "config.toml", cwd / f"{APP_NAME}.toml"):
        if project_config.exists():
            config_files["project"] = project_config
            break

    return config_files


def get_config_file_locations() -> dict[str, Path]:
    """Get the standard configuration file locations (which may not exist)."""
    return {
        "system": Path("/etc") / APP_NAME / "config.toml",
        "user": Path(platformdirs.user_config_dir(APP_NAME, appauthor=False)) / "config.toml",
        "project": Path.cwd() / f".{APP_NAME}" / "config.toml",
    }


# Lazily initialized on first access
_config: CourseKitConfig | None = None


def get_config(reload: bool = False) -> CourseKitConfig:
    """Get the global configuration instance.

    Args:
        reload: If True, reload the configuration from files and environment.
    """
    global _config

    if _config is None or reload:
        _config = CourseKitConfig()

    return _config


def create_example_config() -> str:
    """Return the content of a documented example configuration file."""
    return f"""# coursekit configuration file
#
# Configuration files are loaded from (in priority order):
#   1. .coursekit/config.toml or coursekit.toml (project directory)
#   2. ~/.config/coursekit/config.toml (user directory)
#   3. /etc/coursekit/config.toml (system directory, Linux/Unix only)
#
# Environment variables override any setting (highest priority).
# Nested settings use double underscores: COURSEKIT_<SECTION>__<KEY>

[course]
# Language tag for new courses
# Environment variable: COURSEKIT_COURSE__DEFAULT_LANGUAGE
default_language = "{DEFAULT_LANGUAGE}"

[serialization]
# Indentation of XML course files
# Environment variable: COURSEKIT_SERIALIZATION__XML_INDENT
xml_indent = "    "

# Indentation of JSON contract files
# Environment variable: COURSEKIT_SERIALIZATION__JSON_INDENT
json_indent = 2

# Format for output files without a .xml or .json suffix
# Environment variable: COURSEKIT_SERIALIZATION__DEFAULT_FORMAT
default_format = "xml"

[logging]
# Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL
# Environment variable: COURSEKIT_LOGGING__LOG_LEVEL
log_level = "WARNING"
"""


def write_example_config(location: str = "project") -> Path:
    """Write an example configuration file to one of the standard locations.

    Raises:
        ValueError: If ``location`` is not 'system', 'user' or 'project'
        FileExistsError: If the file already exists
    """
    locations = get_config_file_locations()
    if location not in locations:
        raise ValueError(f"Unknown config location '{location}', expected one of {list(locations)}")

    config_path = locations[location]
    if config_path.exists():
        raise FileExistsError(f"Configuration file already exists: {config_path}")

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(create_example_config(), encoding="utf-8")
    logger.info(f"Wrote example configuration to {config_path}")
    return config_path


__all__ = [
    "CourseKitConfig",
    "create_example_config",
    "find_config_files",
    "get_config",
    "get_config_file_locations",
    "write_example_config",
]
