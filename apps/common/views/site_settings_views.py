"""
Site settings views.
"""
import logging

from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.views import APIView

from ..models import AdminAuditLog, SiteSettings
from ..serializers import SiteSettingsSerializer
from ..utils import success_response, error_response

logger = logging.getLogger(__name__)


class SiteSettingsView(APIView):
    """Read site settings (public) or update them (admin)"""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    def get(self, request):
        serializer = SiteSettingsSerializer(SiteSettings.load())
        return success_response(serializer.data)

    def put(self, request):
        site_settings = SiteSettings.load()
        serializer = SiteSettingsSerializer(site_settings, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid settings data', errors=serializer.errors)

        site_settings = serializer.save(updated_by=request.user)
        AdminAuditLog.record(
            request, site_settings, 'Site settings updated',
            changes=dict(request.data)
        )
        logger.info(f"Site settings updated by {request.user.username}: {sorted(request.data)}")

        return success_response(serializer.data, 'Settings updated')

    patch = put
