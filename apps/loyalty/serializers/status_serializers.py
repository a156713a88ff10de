"""
Loyalty status serializers.

The level calculator returns plain dataclasses; these serializers only shape
them for the API.
"""
from decimal import Decimal

from rest_framework import serializers


class LoyaltyLevelSerializer(serializers.Serializer):
    """One row of the level table"""
    level = serializers.IntegerField(read_only=True)
    name = serializers.CharField(read_only=True)
    min_xp = serializers.IntegerField(read_only=True)
    max_xp = serializers.IntegerField(read_only=True, allow_null=True)
    discount_percent = serializers.IntegerField(read_only=True)
    perks = serializers.ListField(child=serializers.CharField(), read_only=True)


class LoyaltyStatusSerializer(serializers.Serializer):
    """
    Serializer for a user's loyalty status.
    Used for: GET /api/loyalty/status/ and GET /api/users/profile/
    """
    current_level = serializers.IntegerField(read_only=True)
    level_name = serializers.CharField(source='current.name', read_only=True)
    current_xp = serializers.IntegerField(read_only=True)
    discount_percent = serializers.IntegerField(read_only=True)
    xp_to_next_level = serializers.IntegerField(read_only=True, allow_null=True)
    progress_percent = serializers.FloatField(read_only=True)
    level_table = LoyaltyLevelSerializer(many=True, read_only=True)


class XPPreviewSerializer(serializers.Serializer):
    """Input for previewing XP earned on a purchase; any precision, floored later"""
    amount = serializers.DecimalField(max_digits=None, decimal_places=None, min_value=Decimal('0'))
