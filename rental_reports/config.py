"""
Reporting tool configuration.

Loads and validates configuration values from environment variables and the
.env file. Nothing here is mandatory: every value falls back to a default,
invalid values are logged and replaced by the default.

Usage:
    from rental_reports.config import REPORTS_DIR, CURRENCY

    # Or through the loaded values directly
    from rental_reports import config
    currency = config.CURRENCY
"""
import os
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Final
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# ============================================================================
# CONSTANTS
# ============================================================================

# Environment variable names
ENV_REPORTS_DIR: Final[str] = 'REPORTS_DIR'
ENV_LOG_LEVEL: Final[str] = 'LOG_LEVEL'
ENV_CURRENCY: Final[str] = 'CURRENCY'
ENV_EXPORT_TIMESTAMP_FORMAT: Final[str] = 'EXPORT_TIMESTAMP_FORMAT'
ENV_LOAD_SAMPLE_DATA: Final[str] = 'LOAD_SAMPLE_DATA'

# Defaults
DEFAULT_REPORTS_DIR: Final[str] = 'reports'
DEFAULT_LOG_LEVEL: Final[str] = 'INFO'
DEFAULT_CURRENCY: Final[str] = 'RM'
DEFAULT_EXPORT_TIMESTAMP_FORMAT: Final[str] = '%Y%m%d_%H%M%S'
DEFAULT_DISPLAY_DATE_FORMAT: Final[str] = '%Y-%m-%d %H:%M:%S'

VALID_LOG_LEVELS: Final[frozenset] = frozenset({'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'})
TRUE_VALUES: Final[frozenset] = frozenset({'1', 'true', 'yes', 'on'})
FALSE_VALUES: Final[frozenset] = frozenset({'0', 'false', 'no', 'off'})

# ============================================================================
# ENVIRONMENT LOADING
# ============================================================================

def _load_env_file() -> Path:
    """
    Loads environment variables from the .env file.

    Returns:
        Path: Path of the .env file

    Note:
        The .env file lives in the project root (one level above rental_reports/).
        Variables already present in the environment win.
    """
    env_path = Path(__file__).parent.parent / '.env'

    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)
        logger.debug(f"Loaded .env file: {env_path}")
    else:
        logger.debug(f".env file not found at {env_path}, using process environment only")

    return env_path


_env_file_path = _load_env_file()

# ============================================================================
# VALIDATION AND PARSING
# ============================================================================

def _validate_reports_dir(reports_dir: Optional[str]) -> str:
    """
    Validates the reports output directory.

    Args:
        reports_dir: Directory from the environment

    Returns:
        str: Stripped directory, or the default when empty

    Note:
        Parent references and absolute paths are accepted with a warning.
    """
    if not reports_dir or not reports_dir.strip():
        return DEFAULT_REPORTS_DIR

    reports_dir = reports_dir.strip()

    if '..' in reports_dir or reports_dir.startswith('/'):
        logger.warning(
            f"Reports directory points outside the working directory: {reports_dir}. "
            "Relative paths are recommended."
        )

    return reports_dir


def _parse_log_level(log_level: Optional[str]) -> str:
    """
    Normalizes the logging level name.

    Returns:
        str: Upper-case level name, DEFAULT_LOG_LEVEL when unknown
    """
    if not log_level:
        return DEFAULT_LOG_LEVEL

    log_level = log_level.strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        logger.warning(
            f"Invalid log level: {log_level}. "
            f"Falling back to {DEFAULT_LOG_LEVEL}"
        )
        return DEFAULT_LOG_LEVEL
    return log_level


def _parse_currency(currency: Optional[str]) -> str:
    """Currency label printed in front of amounts"""
    if not currency or not currency.strip():
        return DEFAULT_CURRENCY
    return currency.strip()


def _validate_timestamp_format(timestamp_format: Optional[str]) -> str:
    """
    Validates the strftime pattern used in export file names.

    Note:
        A pattern that produces no directives (the same text for every call)
        would overwrite earlier exports, so it is rejected as well.
    """
    if not timestamp_format or not timestamp_format.strip():
        return DEFAULT_EXPORT_TIMESTAMP_FORMAT

    timestamp_format = timestamp_format.strip()
    try:
        rendered = datetime(2000, 1, 2, 3, 4, 5).strftime(timestamp_format)
    except ValueError:
        rendered = timestamp_format

    if rendered == timestamp_format or '/' in rendered:
        logger.warning(
            f"Invalid {ENV_EXPORT_TIMESTAMP_FORMAT}: {timestamp_format!r}. "
            f"Using {DEFAULT_EXPORT_TIMESTAMP_FORMAT!r}"
        )
        return DEFAULT_EXPORT_TIMESTAMP_FORMAT
    return timestamp_format


def _parse_bool(value: Optional[str], default: bool) -> bool:
    """Parses 1/true/yes/on and 0/false/no/off, anything else gives default"""
    if value is None or not value.strip():
        return default

    value = value.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False

    logger.warning(f"Cannot parse boolean value {value!r}, using {default}")
    return default

# ============================================================================
# CONFIGURATION LOADING
# ============================================================================

def _load_configuration() -> tuple[str, str, str, str, bool]:
    """
    Loads and validates the whole configuration.

    Returns:
        tuple: (REPORTS_DIR, LOG_LEVEL, CURRENCY, EXPORT_TIMESTAMP_FORMAT, LOAD_SAMPLE_DATA)
    """
    reports_dir = _validate_reports_dir(os.getenv(ENV_REPORTS_DIR, DEFAULT_REPORTS_DIR))
    log_level = _parse_log_level(os.getenv(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL))
    currency = _parse_currency(os.getenv(ENV_CURRENCY))
    timestamp_format = _validate_timestamp_format(os.getenv(ENV_EXPORT_TIMESTAMP_FORMAT))
    load_sample_data = _parse_bool(os.getenv(ENV_LOAD_SAMPLE_DATA), default=True)

    logger.debug(
        f"Configuration loaded: reports_dir={reports_dir}, log_level={log_level}, "
        f"currency={currency}"
    )
    return reports_dir, log_level, currency, timestamp_format, load_sample_data


REPORTS_DIR, LOG_LEVEL, CURRENCY, EXPORT_TIMESTAMP_FORMAT, LOAD_SAMPLE_DATA = _load_configuration()

# ============================================================================
# PUBLIC API
# ============================================================================

__all__ = [
    'REPORTS_DIR',
    'LOG_LEVEL',
    'CURRENCY',
    'EXPORT_TIMESTAMP_FORMAT',
    'LOAD_SAMPLE_DATA',
]
