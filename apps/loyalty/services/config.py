"""
Loyalty program configuration.

The site settings store hands over a flat record (``loyaltyLevel2MinXP``,
``loyaltyLevel2Discount`` ...). ``resolve_loyalty_config`` is the only place
where missing fields are replaced with their defaults; everything downstream
works with a fully populated, immutable ``LoyaltyConfig``.
"""
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Tuple

from ..exceptions import InvalidConfigurationError


DEFAULT_FIRST_ORDER_DISCOUNT = 20
DEFAULT_XP_MULTIPLIER = 1

DEFAULT_TIER_THRESHOLDS = {
    2: (3000, 5),
    3: (7000, 10),
    4: (15000, 15),
}

DEFAULT_TIER_PERKS = {
    1: ('Доступ к базовому каталогу',),
    2: ('Доступ к базовому каталогу',),
    3: (
        'Персональный чат с консультациями',
        'Приглашения на закрытые чайные вечеринки',
        'Возможность запросить любой чай',
    ),
    4: (
        'Все привилегии уровня 3',
        'Приоритетное обслуживание',
        'Эксклюзивные предложения',
    ),
}

TIER_LEVELS = (1, 2, 3, 4)


@dataclass(frozen=True)
class LoyaltyTier:
    """One loyalty tier: entry threshold, discount and admin-authored perks"""
    level: int
    min_xp: int
    discount_percent: int
    perks: Tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class LoyaltyConfig:
    """Resolved loyalty settings, tiers ordered L1..L4"""
    xp_multiplier: int
    tiers: Tuple[LoyaltyTier, ...]
    first_order_discount: int = DEFAULT_FIRST_ORDER_DISCOUNT

    def tier(self, level: int) -> LoyaltyTier:
        return self.tiers[level - 1]


def _pick(record: Mapping[str, Any], key: str, default):
    value = record.get(key)
    return default if value is None else value


def _clean_perks(perks) -> Tuple[str, ...]:
    # A single perk entered as plain text
    if isinstance(perks, str):
        perks = (perks,)
    return tuple(str(perk).strip() for perk in perks if str(perk).strip())


def resolve_loyalty_config(record: Optional[Mapping[str, Any]] = None) -> LoyaltyConfig:
    """
    Build a LoyaltyConfig from a flat settings record.

    Args:
        record: Mapping with the settings store field names, or None.
            Absent keys and None values take the documented defaults.

    Returns:
        LoyaltyConfig: Immutable configuration with four tiers.
    """
    record = record or {}

    tiers: List[LoyaltyTier] = [
        LoyaltyTier(
            level=1,
            min_xp=0,
            discount_percent=0,
            perks=_clean_perks(_pick(record, 'loyaltyLevel1Perks', DEFAULT_TIER_PERKS[1])),
        )
    ]
    for level in TIER_LEVELS[1:]:
        default_min_xp, default_discount = DEFAULT_TIER_THRESHOLDS[level]
        tiers.append(LoyaltyTier(
            level=level,
            min_xp=int(_pick(record, f'loyaltyLevel{level}MinXP', default_min_xp)),
            discount_percent=int(_pick(record, f'loyaltyLevel{level}Discount', default_discount)),
            perks=_clean_perks(_pick(record, f'loyaltyLevel{level}Perks', DEFAULT_TIER_PERKS[level])),
        ))

    return LoyaltyConfig(
        xp_multiplier=int(_pick(record, 'xpMultiplier', DEFAULT_XP_MULTIPLIER)),
        tiers=tuple(tiers),
        first_order_discount=int(_pick(record, 'firstOrderDiscount', DEFAULT_FIRST_ORDER_DISCOUNT)),
    )


DEFAULT_LOYALTY_CONFIG = resolve_loyalty_config()


def validate_loyalty_config(config: LoyaltyConfig) -> List[str]:
    """
    Check a configuration for authoring mistakes.

    The level calculator tolerates every problem reported here, so this is
    meant for the write path of the settings store.

    Returns:
        list: Human readable problems, empty when the configuration is valid.
    """
    problems = []

    for lower, upper in zip(config.tiers, config.tiers[1:]):
        if upper.min_xp <= lower.min_xp:
            problems.append(
                f'Level {upper.level} threshold ({upper.min_xp} XP) must be greater than '
                f'level {lower.level} threshold ({lower.min_xp} XP)'
            )

    for tier in config.tiers:
        if tier.min_xp < 0:
            problems.append(f'Level {tier.level} threshold must not be negative')
        if not 0 <= tier.discount_percent <= 100:
            problems.append(f'Level {tier.level} discount must be between 0 and 100')

    if config.xp_multiplier < 1:
        problems.append('XP multiplier must be a positive integer')

    if not 0 <= config.first_order_discount <= 100:
        problems.append('First order discount must be between 0 and 100')

    return problems


def ensure_valid_loyalty_config(config: LoyaltyConfig) -> LoyaltyConfig:
    """
    Raises:
        InvalidConfigurationError: If validate_loyalty_config reports problems.
    """
    problems = validate_loyalty_config(config)
    if problems:
        raise InvalidConfigurationError(problems)
    return config
