"""Configuration loading for the navigation service."""

from .config_loader import load_navigation_config

__all__ = ["load_navigation_config"]
