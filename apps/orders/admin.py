from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0
    readonly_fields = ['product_id', 'name', 'price_per_gram', 'quantity', 'amount']
    can_delete = False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """Admin interface for orders"""

    list_display = ['order_number', 'user', 'name', 'status', 'subtotal', 'total', 'xp_awarded', 'created_at']
    list_filter = ['status', 'created_at']
    search_fields = ['order_number', 'name', 'email', 'phone', 'user__username']
    ordering = ['-created_at']
    inlines = [OrderItemInline]
    # Status changes go through the API so XP is awarded exactly once
    readonly_fields = [
        'order_number', 'user', 'status', 'subtotal', 'first_order_discount', 'loyalty_discount',
        'custom_discount', 'discount_details', 'total', 'xp_awarded', 'created_at', 'updated_at'
    ]
