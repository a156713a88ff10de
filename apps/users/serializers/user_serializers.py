"""
User serializers for profile and admin operations.
"""
from rest_framework import serializers

from apps.common.validators import validate_percent, validate_phone as validate_phone_format, validate_xp_value
from ..models import User


class UserDetailSerializer(serializers.ModelSerializer):
    """
    Serializer for the profile view.
    Used for: GET /api/users/profile/
    """

    class Meta:
        model = User
        fields = [
            'id', 'username', 'email', 'phone', 'phone_verified', 'first_name', 'last_name',
            'xp', 'first_order_discount_used', 'custom_discount', 'created_at'
        ]
        read_only_fields = fields


class UserUpdateSerializer(serializers.ModelSerializer):
    """
    Serializer for profile updates made by the customer.
    Used for: PATCH /api/users/profile/
    """
    phone = serializers.CharField(max_length=20, required=False, allow_blank=True, allow_null=True)

    class Meta:
        model = User
        fields = ['email', 'first_name', 'last_name', 'phone']

    def validate_phone(self, value):
        value = validate_phone_format(value) or None
        if value and User.objects.filter(phone=value).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError("Phone number already registered.")
        return value

    def update(self, instance, validated_data):
        # A new number has to be verified again before loyalty discounts apply
        if 'phone' in validated_data and validated_data['phone'] != instance.phone:
            instance.phone_verified = False
        return super().update(instance, validated_data)


class AdminUserXPSerializer(serializers.Serializer):
    """
    Serializer for setting a user's XP.
    Used for: PATCH /api/users/admin/{id}/xp/
    """
    xp = serializers.IntegerField(validators=[validate_xp_value])


class AdminUserDiscountSerializer(serializers.ModelSerializer):
    """
    Serializer for personal discount and phone verification flags.
    Used for: PATCH /api/users/admin/{id}/discount/
    """
    custom_discount = serializers.IntegerField(
        required=False, allow_null=True, validators=[validate_percent]
    )

    class Meta:
        model = User
        fields = ['custom_discount', 'phone_verified']
