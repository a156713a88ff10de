"""
Common views module.
"""
from .site_settings_views import SiteSettingsView

__all__ = [
    'SiteSettingsView',
]
