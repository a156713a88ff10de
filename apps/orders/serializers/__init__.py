"""
Order serializers module.

All serializers are exported from this module to maintain backward compatibility.
"""
from .order_serializers import (
    OrderItemInputSerializer, OrderCreateSerializer,
    OrderItemSerializer, OrderSerializer, OrderStatusSerializer
)

__all__ = [
    'OrderItemInputSerializer',
    'OrderCreateSerializer',
    'OrderItemSerializer',
    'OrderSerializer',
    'OrderStatusSerializer',
]
