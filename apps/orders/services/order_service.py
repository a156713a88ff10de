"""
Core order service: order creation with the loyalty discount stack and
status changes that award XP.
"""
import logging
import uuid
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db import transaction

from apps.loyalty.services import LoyaltyService, calculate_order_pricing
from ..models import Order, OrderItem

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')


class OrderService:
    """Service class for core order business logic"""

    @staticmethod
    def generate_order_number() -> str:
        return f"T{uuid.uuid4().hex[:12].upper()}"

    @staticmethod
    def calculate_subtotal(items: List[Dict]) -> Decimal:
        """Sum of price per gram times grams"""
        subtotal = Decimal('0.00')
        for item in items:
            subtotal += Decimal(str(item['price_per_gram'])) * Decimal(str(item['quantity']))
        return subtotal.quantize(CENTS, rounding=ROUND_HALF_UP)

    @staticmethod
    def price_order(user, items: List[Dict], config=None):
        """Price items for a customer (or guest when user is None)"""
        config = config or LoyaltyService.get_config()
        subtotal = OrderService.calculate_subtotal(items)

        if user is None or not user.is_authenticated:
            return calculate_order_pricing(subtotal, config)

        return calculate_order_pricing(
            subtotal,
            config,
            xp=user.xp,
            first_order=not user.first_order_discount_used,
            phone_verified=user.phone_verified,
            custom_discount=user.custom_discount,
        )

    @staticmethod
    @transaction.atomic
    def create_order(user, order_data: Dict) -> Order:
        """
        Create an order from validated checkout data.

        The first order discount is marked as used in the same transaction.
        """
        if user is not None and not user.is_authenticated:
            user = None

        if user is not None:
            # Lock the account row so two checkouts cannot both use the first order discount
            user = get_user_model().objects.select_for_update().get(pk=user.pk)

        pricing = OrderService.price_order(user, order_data['items'])

        order = Order.objects.create(
            order_number=OrderService.generate_order_number(),
            user=user,
            name=order_data['name'],
            email=order_data['email'],
            phone=order_data['phone'],
            address=order_data['address'],
            comment=order_data.get('comment', ''),
            subtotal=pricing.subtotal,
            first_order_discount=pricing.first_order_discount_amount,
            loyalty_discount=pricing.loyalty_discount_amount,
            custom_discount=pricing.custom_discount_amount,
            discount_details={
                'first_order_percent': pricing.first_order_discount_percent,
                'loyalty_percent': pricing.loyalty_discount_percent,
                'custom_percent': pricing.custom_discount_percent,
            },
            total=pricing.total,
        )

        OrderItem.objects.bulk_create([
            OrderItem(
                order=order,
                product_id=item['id'],
                name=item['name'],
                price_per_gram=item['price_per_gram'],
                quantity=item['quantity'],
                amount=(Decimal(str(item['price_per_gram'])) * item['quantity']).quantize(CENTS),
            )
            for item in order_data['items']
        ])

        if user is not None and pricing.first_order_discount_applied:
            user.first_order_discount_used = True
            user.save(update_fields=['first_order_discount_used'])

        logger.info(
            f"Order {order.order_number} created for {user.pk if user else 'guest'}: "
            f"subtotal {pricing.subtotal}, discounts {pricing.total_discount}, total {pricing.total}"
        )
        return order

    @staticmethod
    def update_status(order_id, new_status) -> Optional[Order]:
        """
        Change an order's status, awarding XP when it becomes completed.

        The status is updated only if it still holds the value read before,
        so two administrators completing the same order award XP once. An
        order that already earned XP never earns it again, even after being
        moved out of completed and back.

        Returns:
            Order: The updated order, or None if the order does not exist or
            its status changed concurrently.
        """
        order = Order.objects.filter(pk=order_id).first()
        if order is None:
            return None

        previous_status = order.status
        should_award_xp = (
            new_status == Order.STATUS_COMPLETED
            and previous_status != Order.STATUS_COMPLETED
            and order.user_id is not None
            and order.xp_awarded == 0
        )

        with transaction.atomic():
            guard = {'pk': order_id, 'status': previous_status}
            if should_award_xp:
                guard['xp_awarded'] = 0
            updated = Order.objects.filter(**guard).update(status=new_status)
            if not updated:
                logger.warning(
                    f"Order {order.order_number}: status changed concurrently, "
                    f"{previous_status} -> {new_status} not applied"
                )
                return None

            if should_award_xp:
                xp = LoyaltyService.award_purchase_xp(order.user_id, order.total)
                Order.objects.filter(pk=order_id).update(xp_awarded=xp)
                logger.info(f"Order {order.order_number} completed: awarded {xp} XP to user {order.user_id}")

        order.refresh_from_db()
        return order

    @staticmethod
    def get_user_orders(user):
        return Order.objects.filter(user=user).prefetch_related('items')
