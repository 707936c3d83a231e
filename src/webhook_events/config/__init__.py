"""Configuration package for webhook events."""

from .settings import EventSettings, get_settings

__all__ = ["EventSettings", "get_settings"]
