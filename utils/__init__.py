"""
Utility modules.

This package contains shared utility functions and configurations:
- Logging configuration
- Shared constants and configurations
"""

from .logging_config import setup_logging, get_logger, set_log_level
from .constants import (
    SubtitleFormat,
    SubpictureAlign,
    JUSTIFICATIONS,
    DEFAULT_JUSTIFICATION,
    DEFAULT_SUBTITLE_ENCODING,
    SUBTITLE_ENCODINGS,
    UTF8_BOM,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'set_log_level',
    'SubtitleFormat',
    'SubpictureAlign',
    'JUSTIFICATIONS',
    'DEFAULT_JUSTIFICATION',
    'DEFAULT_SUBTITLE_ENCODING',
    'SUBTITLE_ENCODINGS',
    'UTF8_BOM',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
]
