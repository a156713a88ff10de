"""
Loyalty level views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated

from apps.common.utils import success_response, error_response
from ..exceptions import InvalidInputError
from ..serializers import LoyaltyLevelSerializer, LoyaltyStatusSerializer, XPPreviewSerializer
from ..services import LoyaltyService, get_level_table, xp_earned_for_purchase


class LoyaltyLevelsView(APIView):
    """Public loyalty level table"""
    permission_classes = [AllowAny]

    def get(self, request):
        config = LoyaltyService.get_config()
        return success_response({
            'levels': LoyaltyLevelSerializer(get_level_table(config), many=True).data,
            'xp_multiplier': config.xp_multiplier,
            'first_order_discount': config.first_order_discount,
        })


class LoyaltyStatusView(APIView):
    """Get current user's loyalty status"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        status = LoyaltyService.get_user_status(request.user)
        return success_response(LoyaltyStatusSerializer(status).data)


class XPPreviewView(APIView):
    """Preview XP earned for a purchase amount"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = XPPreviewSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid amount', errors=serializer.errors)

        try:
            xp = xp_earned_for_purchase(serializer.validated_data['amount'], LoyaltyService.get_config())
        except InvalidInputError as e:
            return error_response(str(e))

        return success_response({'xp': xp})
