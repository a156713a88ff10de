"""
Loyalty-related validators.
"""
from rest_framework import serializers


def validate_xp_value(value):
    """
    Validate an XP total entered by an administrator.

    Raises:
        serializers.ValidationError: If XP is negative

    Returns:
        int: Validated XP
    """
    if value < 0:
        raise serializers.ValidationError("XP must not be negative.")
    return value
