"""Configuration management for polyaffine.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- WindowConfig: Interactive window settings
- HtmlConfig: HTML/SVG export settings
- LogLevel: Accepted logging level names
- LoggingConfig: Logging settings
- PolyaffineSettings: Main application settings
"""

from polyaffine.config.settings import (
    HtmlConfig,
    LoggingConfig,
    LogLevel,
    PolyaffineSettings,
    WindowConfig,
    get_default_settings,
)

__all__ = [
    "HtmlConfig",
    "LogLevel",
    "LoggingConfig",
    "PolyaffineSettings",
    "WindowConfig",
    "get_default_settings",
]
