"""Configuration management for bdfedit.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- EditorConfig: Limits applied by editing operations
- NewFontConfig: Defaults for newly created fonts
- LoggingConfig: Logging settings
- BdfEditSettings: Main application settings
"""

from bdfedit.config.settings import (
    BdfEditSettings,
    EditorConfig,
    LoggingConfig,
    NewFontConfig,
    get_default_settings,
)

__all__ = [
    "BdfEditSettings",
    "EditorConfig",
    "LoggingConfig",
    "NewFontConfig",
    "get_default_settings",
]
