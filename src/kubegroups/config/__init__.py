"""
Configuration module for group discovery settings
"""

from .settings import Settings, settings, LoggingSettings, DiscoverySettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "DiscoverySettings"
]
