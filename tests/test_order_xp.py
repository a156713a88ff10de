"""
Tests for checkout discounts and XP awarded on completed orders
"""
from decimal import Decimal

import pytest
from django.contrib.auth.models import AnonymousUser

from apps.loyalty.services import LoyaltyService
from apps.orders.models import Order
from apps.orders.services import OrderService
from tests.factories import OrderFactory, UserFactory, create_user_with_xp


def checkout_data(**overrides):
    data = {
        'name': 'Анна Петрова',
        'email': 'anna@example.com',
        'phone': '+79001234567',
        'address': 'Москва, ул. Чайная, д. 1, кв. 2',
        'comment': '',
        'items': [
            {'id': 1, 'name': 'Шу Пуэр', 'price_per_gram': Decimal('10.00'), 'quantity': 100},
        ],
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestCreateOrder:

    def test_guest_order_has_no_discounts(self):
        order = OrderService.create_order(AnonymousUser(), checkout_data())

        assert order.user is None
        assert order.subtotal == Decimal('1000.00')
        assert order.total == Decimal('1000.00')
        assert order.items.count() == 1
        assert order.order_number.startswith('T')

    def test_first_order_discount_used_once(self):
        user = UserFactory()

        first = OrderService.create_order(user, checkout_data())
        second = OrderService.create_order(user, checkout_data())

        assert first.first_order_discount == Decimal('200.00')
        assert first.total == Decimal('800.00')
        assert second.first_order_discount == Decimal('0.00')
        assert second.total == Decimal('1000.00')
        user.refresh_from_db()
        assert user.first_order_discount_used is True

    def test_loyalty_discount_for_verified_phone(self):
        user = create_user_with_xp(7000, phone_verified=True, first_order_discount_used=True)

        order = OrderService.create_order(user, checkout_data())

        assert order.loyalty_discount == Decimal('100.00')
        assert order.discount_details['loyalty_percent'] == 10
        assert order.total == Decimal('900.00')

    def test_no_loyalty_discount_without_verified_phone(self):
        user = create_user_with_xp(7000, first_order_discount_used=True)

        order = OrderService.create_order(user, checkout_data())

        assert order.loyalty_discount == Decimal('0.00')
        assert order.total == Decimal('1000.00')

    def test_full_discount_stack(self):
        user = create_user_with_xp(15000, phone_verified=True, custom_discount=10)

        order = OrderService.create_order(user, checkout_data())

        assert order.total == Decimal('612.00')
        assert order.total_discount == Decimal('388.00')

    def test_subtotal_from_several_items(self):
        items = [
            {'id': 1, 'name': 'Габа', 'price_per_gram': Decimal('12.50'), 'quantity': 50},
            {'id': 2, 'name': 'Шен Пуэр', 'price_per_gram': Decimal('8.00'), 'quantity': 25},
        ]
        order = OrderService.create_order(None, checkout_data(items=items))

        assert order.subtotal == Decimal('825.00')
        assert sorted(item.amount for item in order.items.all()) == [Decimal('200.00'), Decimal('625.00')]


@pytest.mark.django_db
class TestCompleteOrderAwardsXP:

    def test_completing_awards_xp(self):
        user = UserFactory()
        order = OrderFactory(user=user, total=Decimal('1499.99'))

        updated = OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        assert updated.status == Order.STATUS_COMPLETED
        assert updated.xp_awarded == 1499
        user.refresh_from_db()
        assert user.xp == 1499

    def test_multiplier_applied(self, site_settings):
        site_settings.xp_multiplier = 2
        site_settings.save()
        user = create_user_with_xp(100)
        order = OrderFactory(user=user, total=Decimal('1500.50'))

        OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        user.refresh_from_db()
        assert user.xp == 100 + 3001

    def test_completing_twice_awards_once(self):
        user = UserFactory()
        order = OrderFactory(user=user, total=Decimal('1000.00'))

        OrderService.update_status(order.pk, Order.STATUS_COMPLETED)
        OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        user.refresh_from_db()
        assert user.xp == 1000

    def test_recompleting_after_status_change_awards_once(self):
        user = UserFactory()
        order = OrderFactory(user=user, total=Decimal('1000.00'))

        OrderService.update_status(order.pk, Order.STATUS_COMPLETED)
        OrderService.update_status(order.pk, Order.STATUS_SHIPPED)
        updated = OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        assert updated.status == Order.STATUS_COMPLETED
        assert updated.xp_awarded == 1000
        user.refresh_from_db()
        assert user.xp == 1000

    def test_other_statuses_award_nothing(self):
        user = UserFactory()
        order = OrderFactory(user=user)

        OrderService.update_status(order.pk, Order.STATUS_PAID)
        OrderService.update_status(order.pk, Order.STATUS_SHIPPED)

        user.refresh_from_db()
        assert user.xp == 0

    def test_guest_order_completion(self):
        order = OrderFactory(user=None)

        updated = OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        assert updated.status == Order.STATUS_COMPLETED
        assert updated.xp_awarded == 0

    def test_level_up_after_completion(self):
        user = create_user_with_xp(2500)
        order = OrderFactory(user=user, total=Decimal('600.00'))

        OrderService.update_status(order.pk, Order.STATUS_COMPLETED)

        user.refresh_from_db()
        assert LoyaltyService.get_user_status(user).current_level == 2

    def test_missing_order(self):
        assert OrderService.update_status(999999, Order.STATUS_COMPLETED) is None


@pytest.mark.django_db
class TestOrderAPI:

    def test_guest_checkout(self, api_client):
        payload = checkout_data()
        payload['items'][0]['price_per_gram'] = '10.00'

        response = api_client.post('/api/orders/', payload, format='json')

        assert response.status_code == 201
        assert response.data['data']['total'] == '1000.00'

    def test_checkout_with_first_order_discount(self, customer_client, customer):
        payload = checkout_data()
        payload['items'][0]['price_per_gram'] = '10.00'

        response = customer_client.post('/api/orders/', payload, format='json')

        assert response.status_code == 201
        assert response.data['data']['first_order_discount'] == '200.00'
        assert response.data['data']['total'] == '800.00'

    def test_empty_cart_rejected(self, api_client):
        response = api_client.post('/api/orders/', checkout_data(items=[]), format='json')
        assert response.status_code == 400

    def test_my_orders(self, customer_client, customer):
        OrderFactory(user=customer)
        OrderFactory(user=UserFactory())

        response = customer_client.get('/api/orders/mine/')

        assert response.status_code == 200
        assert len(response.data['data']) == 1

    def test_admin_completes_order(self, admin_client, customer):
        order = OrderFactory(user=customer, total=Decimal('2000.00'))

        response = admin_client.patch(
            f'/api/orders/admin/{order.pk}/status/', {'status': 'completed'}, format='json'
        )

        assert response.status_code == 200
        assert response.data['data']['xp_awarded'] == 2000
        customer.refresh_from_db()
        assert customer.xp == 2000

    def test_admin_status_unknown_order(self, admin_client):
        response = admin_client.patch('/api/orders/admin/999999/status/', {'status': 'paid'}, format='json')
        assert response.status_code == 404

    def test_admin_status_invalid_value(self, admin_client):
        order = OrderFactory()
        response = admin_client.patch(
            f'/api/orders/admin/{order.pk}/status/', {'status': 'lost'}, format='json'
        )
        assert response.status_code == 400

    def test_admin_list_filtered_by_status(self, admin_client):
        OrderFactory(status='paid')
        OrderFactory(status='pending')

        response = admin_client.get('/api/orders/admin/?status=paid')

        assert response.status_code == 200
        assert [order['status'] for order in response.data['data']] == ['paid']

    def test_customer_cannot_change_status(self, customer_client):
        order = OrderFactory()
        response = customer_client.patch(
            f'/api/orders/admin/{order.pk}/status/', {'status': 'completed'}, format='json'
        )
        assert response.status_code == 403
