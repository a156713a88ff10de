"""
Tests for loyalty configuration resolution and validation
"""
from django.test import SimpleTestCase

from apps.loyalty.exceptions import InvalidConfigurationError
from apps.loyalty.services import (
    DEFAULT_LOYALTY_CONFIG, ensure_valid_loyalty_config, resolve_loyalty_config,
    validate_loyalty_config
)


class ResolveLoyaltyConfigTest(SimpleTestCase):
    """Defaults are filled in one place"""

    def test_empty_record_gives_defaults(self):
        config = resolve_loyalty_config({})
        self.assertEqual(config, DEFAULT_LOYALTY_CONFIG)
        self.assertEqual(config, resolve_loyalty_config(None))

    def test_default_values(self):
        config = DEFAULT_LOYALTY_CONFIG
        self.assertEqual(config.xp_multiplier, 1)
        self.assertEqual(config.first_order_discount, 20)
        self.assertEqual(
            [(tier.level, tier.min_xp, tier.discount_percent) for tier in config.tiers],
            [(1, 0, 0), (2, 3000, 5), (3, 7000, 10), (4, 15000, 15)]
        )

    def test_none_values_take_defaults(self):
        config = resolve_loyalty_config({
            'loyaltyLevel2MinXP': None,
            'xpMultiplier': None,
            'loyaltyLevel3Perks': None,
        })
        self.assertEqual(config, DEFAULT_LOYALTY_CONFIG)

    def test_record_overrides(self):
        config = resolve_loyalty_config({
            'firstOrderDiscount': 10,
            'loyaltyLevel3Discount': 12,
            'xpMultiplier': 3,
        })
        self.assertEqual(config.first_order_discount, 10)
        self.assertEqual(config.tier(3).discount_percent, 12)
        self.assertEqual(config.tier(3).min_xp, 7000)
        self.assertEqual(config.xp_multiplier, 3)

    def test_blank_perks_dropped(self):
        config = resolve_loyalty_config({'loyaltyLevel4Perks': ['Подарок', '  ', '', ' Скидка на посуду ']})
        self.assertEqual(config.tier(4).perks, ('Подарок', 'Скидка на посуду'))

    def test_plain_string_perk_is_one_item(self):
        config = resolve_loyalty_config({'loyaltyLevel2Perks': ' Бесплатная доставка '})
        self.assertEqual(config.tier(2).perks, ('Бесплатная доставка',))

    def test_empty_perk_list_is_kept_empty(self):
        config = resolve_loyalty_config({'loyaltyLevel1Perks': []})
        self.assertEqual(config.tier(1).perks, ())

    def test_level_one_always_starts_at_zero(self):
        self.assertEqual(DEFAULT_LOYALTY_CONFIG.tier(1).min_xp, 0)
        self.assertEqual(DEFAULT_LOYALTY_CONFIG.tier(1).discount_percent, 0)


class ValidateLoyaltyConfigTest(SimpleTestCase):
    """Write-time checks of loyalty settings"""

    def test_defaults_are_valid(self):
        self.assertEqual(validate_loyalty_config(DEFAULT_LOYALTY_CONFIG), [])

    def test_out_of_order_thresholds(self):
        config = resolve_loyalty_config({'loyaltyLevel2MinXP': 9000, 'loyaltyLevel3MinXP': 5000})
        problems = validate_loyalty_config(config)
        self.assertEqual(len(problems), 1)
        self.assertIn('Level 3 threshold', problems[0])

    def test_equal_thresholds(self):
        config = resolve_loyalty_config({'loyaltyLevel3MinXP': 15000})
        self.assertEqual(len(validate_loyalty_config(config)), 1)

    def test_discount_out_of_range(self):
        config = resolve_loyalty_config({'loyaltyLevel4Discount': 150})
        self.assertIn('Level 4 discount must be between 0 and 100', validate_loyalty_config(config))

    def test_zero_multiplier(self):
        config = resolve_loyalty_config({'xpMultiplier': 0})
        self.assertIn('XP multiplier must be a positive integer', validate_loyalty_config(config))

    def test_first_order_discount_out_of_range(self):
        config = resolve_loyalty_config({'firstOrderDiscount': 101})
        self.assertIn('First order discount must be between 0 and 100', validate_loyalty_config(config))

    def test_ensure_valid_raises_with_problems(self):
        config = resolve_loyalty_config({'loyaltyLevel4MinXP': 1000, 'xpMultiplier': 0})
        with self.assertRaises(InvalidConfigurationError) as ctx:
            ensure_valid_loyalty_config(config)
        self.assertEqual(len(ctx.exception.problems), 2)

    def test_ensure_valid_returns_config(self):
        self.assertIs(ensure_valid_loyalty_config(DEFAULT_LOYALTY_CONFIG), DEFAULT_LOYALTY_CONFIG)
