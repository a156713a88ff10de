"""
Admin user management views.
"""
import logging

from django.shortcuts import get_object_or_404
from rest_framework.views import APIView
from rest_framework.permissions import IsAdminUser

from apps.common.models import AdminAuditLog
from apps.common.utils import success_response, error_response
from apps.loyalty.serializers import LoyaltyStatusSerializer
from apps.loyalty.services import LoyaltyService
from ..models import User
from ..serializers import AdminUserDiscountSerializer, AdminUserXPSerializer, UserDetailSerializer

logger = logging.getLogger(__name__)


class AdminUserXPView(APIView):
    """Set a user's XP total"""
    permission_classes = [IsAdminUser]

    def patch(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)

        serializer = AdminUserXPSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid XP value', errors=serializer.errors)

        old_xp = user.xp
        LoyaltyService.set_user_xp(user, serializer.validated_data['xp'])
        AdminAuditLog.record(
            request, user, f'XP changed from {old_xp} to {user.xp}',
            changes={'xp': [old_xp, user.xp]}
        )

        data = UserDetailSerializer(user).data
        data['loyalty'] = LoyaltyStatusSerializer(LoyaltyService.get_user_status(user)).data
        return success_response(data, 'XP updated')


class AdminUserDiscountView(APIView):
    """Set a user's personal discount and phone verification flag"""
    permission_classes = [IsAdminUser]

    def patch(self, request, user_id):
        user = get_object_or_404(User, pk=user_id)

        serializer = AdminUserDiscountSerializer(user, data=request.data, partial=True)
        if not serializer.is_valid():
            return error_response('Invalid discount data', errors=serializer.errors)

        serializer.save()
        AdminAuditLog.record(request, user, 'Discount settings changed', changes=dict(serializer.validated_data))
        logger.info(f"Discount settings for user {user.pk} changed: {dict(serializer.validated_data)}")

        return success_response(UserDetailSerializer(user).data, 'Discount updated')
