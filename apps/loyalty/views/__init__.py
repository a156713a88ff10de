"""
Loyalty views module.
"""
from .level_views import LoyaltyLevelsView, LoyaltyStatusView, XPPreviewView

__all__ = [
    'LoyaltyLevelsView',
    'LoyaltyStatusView',
    'XPPreviewView',
]
