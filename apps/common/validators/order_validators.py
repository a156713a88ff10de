"""
Order and pricing validators.
"""
from rest_framework import serializers


def validate_price_per_gram(value):
    """
    Validate price per gram is not negative.

    Raises:
        serializers.ValidationError: If price is negative

    Returns:
        decimal.Decimal: Validated price
    """
    if value < 0:
        raise serializers.ValidationError("Price must not be negative.")
    return value


def validate_quantity(value, min_value=1):
    """
    Validate ordered quantity in grams.

    Args:
        value: Quantity integer
        min_value: Minimum allowed quantity (default: 1)

    Raises:
        serializers.ValidationError: If quantity is below the minimum

    Returns:
        int: Validated quantity
    """
    if value < min_value:
        raise serializers.ValidationError(f"Quantity must be at least {min_value}.")
    return value


def validate_percent(value):
    """Validate a discount percentage (0-100); None is accepted as 'not set'"""
    if value is None:
        return value
    if not 0 <= value <= 100:
        raise serializers.ValidationError("Percentage must be between 0 and 100.")
    return value
