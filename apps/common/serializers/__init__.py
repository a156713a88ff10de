"""
Common serializers module.
"""
from .site_settings_serializers import SiteSettingsSerializer

__all__ = [
    'SiteSettingsSerializer',
]
