"""
API tests for the site settings store
"""
import pytest

from apps.common.models import AdminAuditLog, SiteSettings
from apps.loyalty.services import LoyaltyService


@pytest.mark.django_db
class TestSiteSettingsAPI:

    url = '/api/site-settings/'

    def test_get_is_public(self, api_client):
        response = api_client.get(self.url)

        assert response.status_code == 200
        data = response.data['data']
        assert data['designMode'] == 'classic'
        assert data['loyaltyLevel2MinXP'] is None

    def test_unset_fields_resolve_to_defaults(self, site_settings):
        config = LoyaltyService.get_config()
        assert config.tier(2).min_xp == 3000
        assert config.first_order_discount == 20

    def test_admin_update(self, admin_client, admin_user):
        response = admin_client.put(self.url, {
            'loyaltyLevel2MinXP': 2000,
            'loyaltyLevel2Discount': 6,
            'loyaltyLevel3Perks': ['Дегустации', '   '],
        }, format='json')

        assert response.status_code == 200
        settings_row = SiteSettings.load()
        assert settings_row.loyalty_level2_min_xp == 2000
        assert settings_row.loyalty_level3_perks == ['Дегустации']
        assert settings_row.updated_by == admin_user

        config = LoyaltyService.get_config()
        assert config.tier(2).min_xp == 2000
        assert config.tier(3).perks == ('Дегустации',)

        assert AdminAuditLog.objects.filter(model_name='sitesettings').count() == 1

    def test_partial_update_keeps_other_fields(self, admin_client, site_settings):
        site_settings.xp_multiplier = 2
        site_settings.save()

        admin_client.patch(self.url, {'firstOrderDiscount': 15}, format='json')

        settings_row = SiteSettings.load()
        assert settings_row.xp_multiplier == 2
        assert settings_row.first_order_discount == 15

    def test_out_of_order_thresholds_rejected(self, admin_client):
        response = admin_client.put(self.url, {
            'loyaltyLevel2MinXP': 9000,
            'loyaltyLevel3MinXP': 5000,
        }, format='json')

        assert response.status_code == 400
        assert response.data['msg'] == 'Invalid settings data'
        assert 'loyalty' in response.data['errors']
        assert SiteSettings.load().loyalty_level2_min_xp is None

    def test_threshold_checked_against_stored_values(self, admin_client, site_settings):
        site_settings.loyalty_level3_min_xp = 4000
        site_settings.save()

        response = admin_client.put(self.url, {'loyaltyLevel2MinXP': 5000}, format='json')

        assert response.status_code == 400

    def test_customer_cannot_update(self, customer_client):
        response = customer_client.put(self.url, {'firstOrderDiscount': 90}, format='json')
        assert response.status_code == 403

    def test_anonymous_cannot_update(self, api_client):
        response = api_client.put(self.url, {'firstOrderDiscount': 90}, format='json')
        assert response.status_code == 401

    def test_single_row(self, site_settings):
        SiteSettings(design_mode='minimalist').save()
        assert SiteSettings.objects.count() == 1
        assert SiteSettings.load().design_mode == 'minimalist'


@pytest.mark.django_db
def test_health_check(api_client):
    response = api_client.get('/api/health/')
    assert response.status_code == 200
