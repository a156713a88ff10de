"""
User views module.

All views are exported from this module to maintain backward compatibility.
"""
from .profile_views import UserProfileView
from .admin_views import AdminUserXPView, AdminUserDiscountView

__all__ = [
    'UserProfileView',
    'AdminUserXPView',
    'AdminUserDiscountView',
]
