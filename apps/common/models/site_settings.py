from django.db import models
from django.conf import settings


def _perks_field(level):
    return models.JSONField(
        null=True,
        blank=True,
        help_text=f"Free-text perks for loyalty level {level}; empty means default perks",
    )


class SiteSettings(models.Model):
    """
    Storefront settings edited from the admin back-office.

    Loyalty fields are nullable: a null value means "use the default", which
    is applied in one place by apps.loyalty.services.resolve_loyalty_config.
    """
    DESIGN_MODE_CHOICES = [
        ('classic', 'Classic'),
        ('minimalist', 'Minimalist'),
    ]

    # camelCase record key -> model field
    RECORD_FIELDS = {
        'firstOrderDiscount': 'first_order_discount',
        'loyaltyLevel2MinXP': 'loyalty_level2_min_xp',
        'loyaltyLevel2Discount': 'loyalty_level2_discount',
        'loyaltyLevel3MinXP': 'loyalty_level3_min_xp',
        'loyaltyLevel3Discount': 'loyalty_level3_discount',
        'loyaltyLevel4MinXP': 'loyalty_level4_min_xp',
        'loyaltyLevel4Discount': 'loyalty_level4_discount',
        'xpMultiplier': 'xp_multiplier',
        'loyaltyLevel1Perks': 'loyalty_level1_perks',
        'loyaltyLevel2Perks': 'loyalty_level2_perks',
        'loyaltyLevel3Perks': 'loyalty_level3_perks',
        'loyaltyLevel4Perks': 'loyalty_level4_perks',
    }

    design_mode = models.CharField(max_length=20, choices=DESIGN_MODE_CHOICES, default='classic')

    first_order_discount = models.PositiveSmallIntegerField(null=True, blank=True)
    loyalty_level2_min_xp = models.PositiveIntegerField(null=True, blank=True)
    loyalty_level2_discount = models.PositiveSmallIntegerField(null=True, blank=True)
    loyalty_level3_min_xp = models.PositiveIntegerField(null=True, blank=True)
    loyalty_level3_discount = models.PositiveSmallIntegerField(null=True, blank=True)
    loyalty_level4_min_xp = models.PositiveIntegerField(null=True, blank=True)
    loyalty_level4_discount = models.PositiveSmallIntegerField(null=True, blank=True)
    xp_multiplier = models.PositiveIntegerField(null=True, blank=True)

    loyalty_level1_perks = _perks_field(1)
    loyalty_level2_perks = _perks_field(2)
    loyalty_level3_perks = _perks_field(3)
    loyalty_level4_perks = _perks_field(4)

    updated_at = models.DateTimeField(auto_now=True)
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )

    class Meta:
        db_table = 'site_settings'
        verbose_name = 'Site Settings'
        verbose_name_plural = 'Site Settings'

    def __str__(self):
        return f"Site settings ({self.design_mode})"

    def save(self, *args, **kwargs):
        # Single row table
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Get the settings row, creating an empty one on first access"""
        instance, _ = cls.objects.get_or_create(pk=1)
        return instance

    def as_record(self):
        """Flat loyalty record in the settings store format"""
        return {key: getattr(self, field) for key, field in self.RECORD_FIELDS.items()}
