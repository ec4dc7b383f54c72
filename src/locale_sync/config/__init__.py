"""
Configuration module for locale-sync
"""

from .settings import Settings, TranslatorSettings, RunSettings
from .load_config import load_settings, get_settings, reload_settings

__all__ = ['Settings', 'TranslatorSettings', 'RunSettings', 'load_settings', 'get_settings', 'reload_settings']
