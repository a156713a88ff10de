"""
Site settings serializers.

Field names follow the settings store record (camelCase) consumed by the
storefront and by apps.loyalty.services.resolve_loyalty_config.
"""
import logging

from rest_framework import serializers

from apps.loyalty.exceptions import InvalidConfigurationError
from apps.loyalty.services import ensure_valid_loyalty_config, resolve_loyalty_config
from ..models import SiteSettings

logger = logging.getLogger(__name__)


class PerksField(serializers.ListField):
    """List of perk strings; blank entries are dropped like the admin editor does"""

    def __init__(self, **kwargs):
        kwargs.setdefault('child', serializers.CharField(allow_blank=True, max_length=200))
        kwargs.setdefault('required', False)
        kwargs.setdefault('allow_null', True)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        perks = super().to_internal_value(data)
        return [perk.strip() for perk in perks if perk.strip()]


class SiteSettingsSerializer(serializers.ModelSerializer):
    """
    Serializer for site settings.
    Used for: GET /api/site-settings/ and PUT /api/site-settings/
    """
    designMode = serializers.ChoiceField(
        source='design_mode', choices=SiteSettings.DESIGN_MODE_CHOICES, required=False
    )
    firstOrderDiscount = serializers.IntegerField(
        source='first_order_discount', required=False, allow_null=True
    )
    loyaltyLevel2MinXP = serializers.IntegerField(
        source='loyalty_level2_min_xp', required=False, allow_null=True
    )
    loyaltyLevel2Discount = serializers.IntegerField(
        source='loyalty_level2_discount', required=False, allow_null=True
    )
    loyaltyLevel3MinXP = serializers.IntegerField(
        source='loyalty_level3_min_xp', required=False, allow_null=True
    )
    loyaltyLevel3Discount = serializers.IntegerField(
        source='loyalty_level3_discount', required=False, allow_null=True
    )
    loyaltyLevel4MinXP = serializers.IntegerField(
        source='loyalty_level4_min_xp', required=False, allow_null=True
    )
    loyaltyLevel4Discount = serializers.IntegerField(
        source='loyalty_level4_discount', required=False, allow_null=True
    )
    xpMultiplier = serializers.IntegerField(
        source='xp_multiplier', required=False, allow_null=True
    )
    loyaltyLevel1Perks = PerksField(source='loyalty_level1_perks')
    loyaltyLevel2Perks = PerksField(source='loyalty_level2_perks')
    loyaltyLevel3Perks = PerksField(source='loyalty_level3_perks')
    loyaltyLevel4Perks = PerksField(source='loyalty_level4_perks')
    updatedAt = serializers.DateTimeField(source='updated_at', read_only=True)

    class Meta:
        model = SiteSettings
        fields = [
            'designMode', 'firstOrderDiscount',
            'loyaltyLevel2MinXP', 'loyaltyLevel2Discount',
            'loyaltyLevel3MinXP', 'loyaltyLevel3Discount',
            'loyaltyLevel4MinXP', 'loyaltyLevel4Discount',
            'xpMultiplier',
            'loyaltyLevel1Perks', 'loyaltyLevel2Perks',
            'loyaltyLevel3Perks', 'loyaltyLevel4Perks',
            'updatedAt',
        ]

    def validate(self, attrs):
        """Reject loyalty settings the level calculator would treat as misconfigured"""
        record = self.instance.as_record() if self.instance else {}
        for key, field in SiteSettings.RECORD_FIELDS.items():
            if field in attrs:
                record[key] = attrs[field]

        try:
            ensure_valid_loyalty_config(resolve_loyalty_config(record))
        except InvalidConfigurationError as e:
            logger.warning(f"Rejected site settings update: {e.problems}")
            raise serializers.ValidationError({'loyalty': e.problems})

        return attrs
