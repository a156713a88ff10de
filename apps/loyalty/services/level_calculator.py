"""
Loyalty level calculator.

Pure functions over a LoyaltyConfig: no database access, no shared state.
"""
from dataclasses import asdict, dataclass
from decimal import Decimal, InvalidOperation, ROUND_FLOOR
from typing import List, Optional, Tuple

from ..exceptions import InvalidInputError
from .config import LoyaltyConfig


LEVEL_NAMES = {
    1: 'Новичок',
    2: 'Ценитель',
    3: 'Чайный мастер',
    4: 'Чайный Гуру',
}

DISCOUNT_PERK_TEMPLATE = 'Скидка {percent}% на все покупки'


@dataclass(frozen=True)
class LoyaltyLevel:
    """A row of the level table shown to customers"""
    level: int
    name: str
    min_xp: int
    max_xp: Optional[int]
    discount_percent: int
    perks: Tuple[str, ...]


@dataclass(frozen=True)
class UserLoyaltyStatus:
    """Loyalty status derived from a user's XP, never persisted"""
    current_level: int
    current_xp: int
    discount_percent: int
    xp_to_next_level: Optional[int]
    progress_percent: float
    level_table: Tuple[LoyaltyLevel, ...]

    @property
    def current(self) -> LoyaltyLevel:
        return self.level_table[self.current_level - 1]

    def to_dict(self):
        data = asdict(self)
        data['level_name'] = self.current.name
        return data


def validate_xp(xp) -> int:
    if isinstance(xp, bool) or not isinstance(xp, int):
        raise InvalidInputError(f'XP must be an integer, got {xp!r}')
    if xp < 0:
        raise InvalidInputError(f'XP must not be negative, got {xp}')
    return xp


def validate_amount(amount) -> Decimal:
    if isinstance(amount, bool):
        raise InvalidInputError(f'Amount must be a number, got {amount!r}')
    try:
        value = Decimal(str(amount))
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidInputError(f'Amount must be a number, got {amount!r}')
    if not value.is_finite():
        raise InvalidInputError(f'Amount must be finite, got {amount!r}')
    if value < 0:
        raise InvalidInputError(f'Amount must not be negative, got {amount}')
    return value


def _tier_perks(tier) -> Tuple[str, ...]:
    if tier.level > 1 and tier.discount_percent > 0:
        return (DISCOUNT_PERK_TEMPLATE.format(percent=tier.discount_percent),) + tuple(tier.perks)
    return tuple(tier.perks)


def get_level_table(config: LoyaltyConfig) -> Tuple[LoyaltyLevel, ...]:
    """Resolve all tiers with their XP bounds and display perks"""
    table: List[LoyaltyLevel] = []
    for index, tier in enumerate(config.tiers):
        next_tier = config.tiers[index + 1] if index + 1 < len(config.tiers) else None
        table.append(LoyaltyLevel(
            level=tier.level,
            name=LEVEL_NAMES[tier.level],
            min_xp=tier.min_xp,
            max_xp=next_tier.min_xp - 1 if next_tier else None,
            discount_percent=tier.discount_percent,
            perks=_tier_perks(tier),
        ))
    return tuple(table)


def find_tier(xp: int, config: LoyaltyConfig):
    """Highest tier whose threshold is reached, scanning from the top"""
    for tier in reversed(config.tiers):
        if xp >= tier.min_xp:
            return tier
    # Only reachable when a misconfigured L1 threshold is above xp
    return config.tiers[0]


def resolve_level(xp: int, config: LoyaltyConfig) -> UserLoyaltyStatus:
    """
    Compute a user's loyalty status.

    Args:
        xp: Accumulated experience points, non-negative integer.
        config: Resolved loyalty configuration.

    Returns:
        UserLoyaltyStatus: Current level, discount, XP left to the next
        level (None at the top level) and the full level table.

    Raises:
        InvalidInputError: If xp is negative or not an integer.
    """
    xp = validate_xp(xp)
    tier = find_tier(xp, config)
    next_tier = config.tiers[tier.level] if tier.level < len(config.tiers) else None

    if next_tier is None:
        xp_to_next_level = None
        progress_percent = 100.0
    else:
        # Disordered thresholds can put the next tier below xp
        xp_to_next_level = max(next_tier.min_xp - xp, 0)
        span = next_tier.min_xp - tier.min_xp
        if span > 0:
            progress_percent = min(max((xp - tier.min_xp) / span * 100, 0.0), 100.0)
        else:
            progress_percent = 100.0

    return UserLoyaltyStatus(
        current_level=tier.level,
        current_xp=xp,
        discount_percent=tier.discount_percent,
        xp_to_next_level=xp_to_next_level,
        progress_percent=round(progress_percent, 2),
        level_table=get_level_table(config),
    )


def get_loyalty_discount(xp: int, config: LoyaltyConfig) -> int:
    """Discount percent for the level reached with the given XP"""
    return find_tier(validate_xp(xp), config).discount_percent


def xp_earned_for_purchase(amount_spent, config: LoyaltyConfig) -> int:
    """
    XP earned for spending ``amount_spent``.

    The product is floored after multiplication, so 1500.5 with a multiplier
    of 2 earns 3001 XP.

    Raises:
        InvalidInputError: If the amount is negative or not a number.
    """
    amount = validate_amount(amount_spent)
    earned = amount * Decimal(config.xp_multiplier)
    return int(earned.to_integral_value(rounding=ROUND_FLOOR))
