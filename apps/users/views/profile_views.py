"""
User profile views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAuthenticated

from apps.common.utils import success_response, error_response
from apps.loyalty.serializers import LoyaltyStatusSerializer
from apps.loyalty.services import LoyaltyService
from ..serializers import UserDetailSerializer, UserUpdateSerializer


class UserProfileView(APIView):
    """Current user's profile with loyalty status"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        data = UserDetailSerializer(request.user).data
        data['loyalty'] = LoyaltyStatusSerializer(LoyaltyService.get_user_status(request.user)).data
        return success_response(data, 'User info retrieved successfully')

    def patch(self, request):
        serializer = UserUpdateSerializer(request.user, data=request.data, partial=True)
        if serializer.is_valid():
            serializer.save()
            return success_response(UserDetailSerializer(request.user).data, 'Profile updated successfully')
        return error_response('Profile update failed', serializer.errors)
