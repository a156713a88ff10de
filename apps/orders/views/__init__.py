"""
Order views module.

All views are exported from this module to maintain backward compatibility.
"""
from .order_views import CreateOrderView, MyOrdersView
from .admin_order_views import AdminOrderListView, AdminOrderStatusView

__all__ = [
    'CreateOrderView',
    'MyOrdersView',
    'AdminOrderListView',
    'AdminOrderStatusView',
]
