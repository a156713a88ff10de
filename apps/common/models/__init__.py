"""
Common models module.

All models are exported from this module to maintain backward compatibility.
"""
from .audit import AdminAuditLog
from .site_settings import SiteSettings

__all__ = [
    'AdminAuditLog',
    'SiteSettings',
]
