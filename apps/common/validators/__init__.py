"""
Common validators module.

All validators are exported from this module to maintain backward compatibility.
"""
from .user_validators import validate_phone
from .loyalty_validators import validate_xp_value
from .order_validators import validate_price_per_gram, validate_quantity, validate_percent

__all__ = [
    'validate_phone',
    'validate_xp_value',
    'validate_price_per_gram',
    'validate_quantity',
    'validate_percent',
]
