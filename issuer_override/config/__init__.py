"""Configuration module for the issuer override mapper."""
from .settings import MapperSettings, configure_logging, get_settings, load_settings, reset_settings

__all__ = ["MapperSettings", "configure_logging", "get_settings", "load_settings", "reset_settings"]
