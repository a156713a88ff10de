"""
Test configuration for the tea server.
"""
import pytest
from rest_framework.test import APIClient


@pytest.fixture
def api_client():
    """Unauthenticated API client."""
    return APIClient()


@pytest.fixture
def customer():
    """Customer with a verified phone and no XP."""
    from tests.factories import UserFactory
    return UserFactory(phone_verified=True)


@pytest.fixture
def admin_user():
    """Staff user allowed to use the back-office endpoints."""
    from tests.factories import AdminUserFactory
    return AdminUserFactory()


@pytest.fixture
def customer_client(customer):
    """API client authenticated as the customer."""
    client = APIClient()
    client.force_authenticate(user=customer)
    return client


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as an administrator."""
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def default_loyalty_config():
    from apps.loyalty.services import DEFAULT_LOYALTY_CONFIG
    return DEFAULT_LOYALTY_CONFIG


@pytest.fixture
def site_settings():
    """Stored site settings row (all loyalty fields at defaults)."""
    from apps.common.models import SiteSettings
    return SiteSettings.load()
