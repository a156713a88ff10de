"""
User-related validators.
"""
import re
from rest_framework import serializers


PHONE_PATTERN = re.compile(r'^\+?\d{10,15}$')


def validate_phone(value):
    """
    Validate phone number format.

    Separators (spaces, dashes, parentheses) are removed before matching.

    Raises:
        serializers.ValidationError: If phone format is invalid

    Returns:
        str: Normalized phone number
    """
    if not value:
        return value

    normalized = re.sub(r'[\s\-()]', '', value)
    if not PHONE_PATTERN.match(normalized):
        raise serializers.ValidationError("Invalid phone number format. Expected 10-15 digits.")

    return normalized
