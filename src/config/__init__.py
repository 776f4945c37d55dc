# src/config/__init__.py
# This file makes the config folder a Python package
# It exports the settings object that other modules can import

from .settings import Settings, AppConfig, load_settings, settings

__all__ = [
    "Settings",
    "AppConfig",
    "load_settings",
    "settings",
]
