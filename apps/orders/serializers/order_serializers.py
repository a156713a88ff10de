"""
Order serializers for checkout, customer views and admin status changes.
"""
from rest_framework import serializers

from apps.common.validators import validate_phone, validate_price_per_gram, validate_quantity
from ..models import Order, OrderItem


class OrderItemInputSerializer(serializers.Serializer):
    """Cart line as sent by the storefront"""
    id = serializers.IntegerField()
    name = serializers.CharField(max_length=200)
    price_per_gram = serializers.DecimalField(
        max_digits=10, decimal_places=2, validators=[validate_price_per_gram]
    )
    quantity = serializers.IntegerField(validators=[validate_quantity])


class OrderCreateSerializer(serializers.Serializer):
    """
    Checkout payload.
    Used for: POST /api/orders/
    """
    name = serializers.CharField(min_length=2, max_length=100)
    email = serializers.EmailField()
    phone = serializers.CharField(min_length=10, max_length=20)
    address = serializers.CharField(min_length=10)
    comment = serializers.CharField(required=False, allow_blank=True, default='')
    items = OrderItemInputSerializer(many=True)

    def validate_phone(self, value):
        return validate_phone(value)

    def validate_items(self, value):
        if not value:
            raise serializers.ValidationError("Cart must not be empty.")
        return value


class OrderItemSerializer(serializers.ModelSerializer):

    class Meta:
        model = OrderItem
        fields = ['product_id', 'name', 'price_per_gram', 'quantity', 'amount']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    """
    Serializer for order detail.
    Used for: POST /api/orders/, GET /api/orders/mine/
    """
    items = OrderItemSerializer(many=True, read_only=True)
    total_discount = serializers.DecimalField(max_digits=12, decimal_places=2, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'order_number', 'status', 'name', 'email', 'phone', 'address', 'comment',
            'items', 'subtotal', 'first_order_discount', 'loyalty_discount', 'custom_discount',
            'discount_details', 'total_discount', 'total', 'xp_awarded', 'created_at'
        ]
        read_only_fields = fields


class OrderStatusSerializer(serializers.Serializer):
    """
    Status change by an administrator.
    Used for: PATCH /api/orders/admin/{id}/status/
    """
    status = serializers.ChoiceField(choices=Order.STATUS_CHOICES)
