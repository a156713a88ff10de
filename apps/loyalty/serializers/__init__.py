"""
Loyalty serializers module.
"""
from .status_serializers import (
    LoyaltyLevelSerializer, LoyaltyStatusSerializer, XPPreviewSerializer
)

__all__ = [
    'LoyaltyLevelSerializer',
    'LoyaltyStatusSerializer',
    'XPPreviewSerializer',
]
