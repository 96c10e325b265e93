import configparser
import os
from dataclasses import dataclass, field

from .exceptions import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ReportSettings:
    include_labels: bool = True
    sort_values: bool = True
    indent: str = "\t"


@dataclass(frozen=True)
class Settings:
    report: ReportSettings = field(default_factory=ReportSettings)
    log_level: str = DEFAULT_LOG_LEVEL


def _normalize_log_level(value, source):
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"Invalid log level '{value}' in {source}. Expected one of: {', '.join(LOG_LEVELS)}")
    return level


def load_settings(config_file_path=None):
    """
    Loads settings from an optional config.ini file.

    The file may contain a [Report] section (include_labels, sort_values, indent)
    and a [Logging] section (level). Missing sections or keys keep their defaults.

    Args:
        config_file_path (str | None): Path to the config file. None means defaults only.

    Returns:
        Settings: The resolved settings.

    Raises:
        ConfigError: If the file does not exist, cannot be parsed, or holds invalid values.
    """
    if config_file_path is None:
        return Settings()

    if not os.path.isfile(config_file_path):
        raise ConfigError(f"Configuration file '{config_file_path}' not found.")

    config = configparser.ConfigParser()
    try:
        with open(config_file_path, "r", encoding="utf-8") as config_file:
            config.read_file(config_file)
    except OSError as e:
        raise ConfigError(f"Could not read {config_file_path}: {e.strerror or e}") from e
    except (configparser.Error, UnicodeDecodeError) as e:
        raise ConfigError(f"Could not read or parse {config_file_path}: {e}") from e

    defaults = ReportSettings()
    try:
        if config.has_section('Report'):
            report_config = config['Report']
            report = ReportSettings(
                include_labels=report_config.getboolean('include_labels', fallback=defaults.include_labels),
                sort_values=report_config.getboolean('sort_values', fallback=defaults.sort_values),
                indent=report_config.get('indent', fallback=defaults.indent).replace("\\t", "\t"),
            )
        else:
            report = defaults
    except (ValueError, configparser.Error) as e:
        raise ConfigError(f"Invalid value in [Report] section of {config_file_path}: {e}") from e

    log_level = DEFAULT_LOG_LEVEL
    if config.has_section('Logging') and 'level' in config['Logging']:
        log_level = _normalize_log_level(config.get('Logging', 'level', raw=True), config_file_path)

    return Settings(report=report, log_level=log_level)
