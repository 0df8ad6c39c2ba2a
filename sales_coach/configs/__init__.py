"""
Settings for the sales-coach service.

Import get_settings() for the process-wide, environment-driven Settings.
"""

from sales_coach.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
