"""
Order discount stack.

Discounts are applied one after another, each on the total left by the
previous one: first order, loyalty level, then the personal discount.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ..exceptions import InvalidInputError
from .config import LoyaltyConfig
from .level_calculator import validate_amount, get_loyalty_discount


CENTS = Decimal('0.01')


@dataclass(frozen=True)
class OrderPricing:
    subtotal: Decimal
    first_order_discount_percent: int
    first_order_discount_amount: Decimal
    loyalty_discount_percent: int
    loyalty_discount_amount: Decimal
    custom_discount_percent: int
    custom_discount_amount: Decimal
    total: Decimal

    @property
    def total_discount(self) -> Decimal:
        return (
            self.first_order_discount_amount
            + self.loyalty_discount_amount
            + self.custom_discount_amount
        )

    @property
    def first_order_discount_applied(self) -> bool:
        return self.first_order_discount_amount > 0


def _percent_of(amount: Decimal, percent: int) -> Decimal:
    return (amount * Decimal(percent) / Decimal(100)).quantize(CENTS, rounding=ROUND_HALF_UP)


def calculate_order_pricing(
    subtotal,
    config: LoyaltyConfig,
    xp: Optional[int] = None,
    first_order: bool = False,
    phone_verified: bool = False,
    custom_discount: Optional[int] = None,
) -> OrderPricing:
    """
    Apply the discount stack to an order subtotal.

    Args:
        subtotal: Order amount before discounts.
        config: Resolved loyalty configuration.
        xp: Customer XP, None for guest checkout (no discounts at all).
        first_order: Customer has not used the first order discount yet.
        phone_verified: Loyalty discount only applies to verified phones.
        custom_discount: Personal discount percent set by an administrator.

    Returns:
        OrderPricing: Amounts quantized to 0.01.
    """
    subtotal = validate_amount(subtotal).quantize(CENTS, rounding=ROUND_HALF_UP)
    if custom_discount is not None and not 0 <= custom_discount <= 100:
        raise InvalidInputError(f'Custom discount must be between 0 and 100, got {custom_discount}')

    running_total = subtotal
    first_percent = loyalty_percent = custom_percent = 0
    first_amount = loyalty_amount = custom_amount = Decimal('0.00')

    if xp is not None:
        if first_order:
            first_percent = config.first_order_discount
            first_amount = _percent_of(running_total, first_percent)
            running_total -= first_amount

        if phone_verified:
            loyalty_percent = get_loyalty_discount(xp, config)
            loyalty_amount = _percent_of(running_total, loyalty_percent)
            running_total -= loyalty_amount

        if custom_discount:
            custom_percent = custom_discount
            custom_amount = _percent_of(running_total, custom_percent)
            running_total -= custom_amount

    return OrderPricing(
        subtotal=subtotal,
        first_order_discount_percent=first_percent,
        first_order_discount_amount=first_amount,
        loyalty_discount_percent=loyalty_percent,
        loyalty_discount_amount=loyalty_amount,
        custom_discount_percent=custom_percent,
        custom_discount_amount=custom_amount,
        total=max(running_total, Decimal('0.00')),
    )
