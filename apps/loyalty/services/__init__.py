"""
Loyalty services module.

All services are exported from this module to maintain backward compatibility.
"""
from .config import (
    DEFAULT_LOYALTY_CONFIG, LoyaltyConfig, LoyaltyTier, ensure_valid_loyalty_config,
    resolve_loyalty_config, validate_loyalty_config
)
from .level_calculator import (
    LEVEL_NAMES, LoyaltyLevel, UserLoyaltyStatus,
    get_level_table, get_loyalty_discount, resolve_level, xp_earned_for_purchase
)
from .discount_calculator import OrderPricing, calculate_order_pricing
from .loyalty_service import LoyaltyService

__all__ = [
    'DEFAULT_LOYALTY_CONFIG',
    'LoyaltyConfig',
    'LoyaltyTier',
    'ensure_valid_loyalty_config',
    'resolve_loyalty_config',
    'validate_loyalty_config',
    'LEVEL_NAMES',
    'LoyaltyLevel',
    'UserLoyaltyStatus',
    'get_level_table',
    'get_loyalty_discount',
    'resolve_level',
    'xp_earned_for_purchase',
    'OrderPricing',
    'calculate_order_pricing',
    'LoyaltyService',
]
