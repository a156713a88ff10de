"""
Customer order views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework import status

from apps.common.utils import success_response, error_response
from ..serializers import OrderCreateSerializer, OrderSerializer
from ..services import OrderService


class CreateOrderView(APIView):
    """Checkout; guests may order without an account"""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = OrderCreateSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid order data', errors=serializer.errors)

        order = OrderService.create_order(request.user, serializer.validated_data)
        return success_response(
            OrderSerializer(order).data, 'Order created', status_code=status.HTTP_201_CREATED
        )


class MyOrdersView(APIView):
    """Orders of the current user"""
    permission_classes = [IsAuthenticated]

    def get(self, request):
        orders = OrderService.get_user_orders(request.user)
        return success_response(OrderSerializer(orders, many=True).data)
