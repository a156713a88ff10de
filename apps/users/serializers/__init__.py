"""
User serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .user_serializers import (
    UserDetailSerializer, UserUpdateSerializer,
    AdminUserXPSerializer, AdminUserDiscountSerializer
)

__all__ = [
    'UserDetailSerializer',
    'UserUpdateSerializer',
    'AdminUserXPSerializer',
    'AdminUserDiscountSerializer',
]
