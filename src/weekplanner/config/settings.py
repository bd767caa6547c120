"""Runtime settings for weekplanner.

Settings are immutable dataclasses. The module-level defaults are used
when callers don't pass their own, and ``load_settings`` builds a fresh
pair from the environment (and optionally a ``.env`` file).
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

from dotenv import dotenv_values

from weekplanner.config.constants import (
    DEFAULT_EXPORT_DIR,
    DEFAULT_EXPORT_FORMAT,
    DEFAULT_SCHEDULE_NAME,
    ENV_CALENDAR_NAME,
    ENV_EXPORT_DIR,
    ENV_EXPORT_FORMAT,
    ENV_LOG_LEVEL,
    ENV_PREFIX,
    ENV_SCHEDULE_NAME,
    SUPPORTED_EXPORT_FORMATS,
    VALID_LOG_LEVELS,
)
from weekplanner.exceptions.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScheduleConfig:
    """Settings that affect schedules and logging."""

    default_schedule_name: str = DEFAULT_SCHEDULE_NAME
    log_level: str = "INFO"


@dataclass(frozen=True)
class ExportConfig:
    """Settings for report export."""

    output_dir: Path = Path(DEFAULT_EXPORT_DIR)
    default_format: str = DEFAULT_EXPORT_FORMAT
    calendar_name: str = DEFAULT_SCHEDULE_NAME


# Default configuration instances
SCHEDULE_CONFIG = ScheduleConfig()
EXPORT_CONFIG = ExportConfig()


def _read_environment(env_file: Optional[Union[str, Path]]) -> Dict[str, str]:
    """Collect WEEKPLANNER_* values; process environment wins over the file.

    Args:
        env_file: Optional path to a ``.env`` file.

    Returns:
        Mapping of variable name to value.
    """
    values: Dict[str, str] = {}

    if env_file is not None:
        path = Path(env_file)
        if path.exists():
            # Parse without mutating os.environ
            for key, value in dotenv_values(path).items():
                if key.startswith(ENV_PREFIX) and value is not None:
                    values[key] = value
        else:
            logger.warning("Settings file %s does not exist, ignoring", path)

    for key, value in os.environ.items():
        if key.startswith(ENV_PREFIX):
            values[key] = value

    return values


def load_settings(
    env_file: Optional[Union[str, Path]] = None,
) -> Tuple[ScheduleConfig, ExportConfig]:
    """Build settings from WEEKPLANNER_* variables.

    Args:
        env_file: Optional ``.env`` file to read before the process environment.

    Returns:
        Tuple of (ScheduleConfig, ExportConfig).

    Raises:
        ConfigurationError: If a value is not acceptable.
    """
    values = _read_environment(env_file)
    schedule_config = SCHEDULE_CONFIG
    export_config = EXPORT_CONFIG

    name = values.get(ENV_SCHEDULE_NAME)
    if name is not None:
        if not name.strip():
            raise ConfigurationError(ENV_SCHEDULE_NAME, name, "must not be empty")
        schedule_config = replace(schedule_config, default_schedule_name=name.strip())
        export_config = replace(export_config, calendar_name=name.strip())

    level = values.get(ENV_LOG_LEVEL)
    if level is not None:
        level = level.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                ENV_LOG_LEVEL, level, f"expected one of {sorted(VALID_LOG_LEVELS)}"
            )
        schedule_config = replace(schedule_config, log_level=level)

    output_dir = values.get(ENV_EXPORT_DIR)
    if output_dir is not None:
        if not output_dir.strip():
            raise ConfigurationError(ENV_EXPORT_DIR, output_dir, "must not be empty")
        export_config = replace(export_config, output_dir=Path(output_dir.strip()).expanduser())

    export_format = values.get(ENV_EXPORT_FORMAT)
    if export_format is not None:
        export_format = export_format.strip().lower()
        if export_format not in SUPPORTED_EXPORT_FORMATS:
            raise ConfigurationError(
                ENV_EXPORT_FORMAT, export_format, f"expected one of {SUPPORTED_EXPORT_FORMATS}"
            )
        export_config = replace(export_config, default_format=export_format)

    calendar_name = values.get(ENV_CALENDAR_NAME)
    if calendar_name is not None and calendar_name.strip():
        export_config = replace(export_config, calendar_name=calendar_name.strip())

    return schedule_config, export_config
