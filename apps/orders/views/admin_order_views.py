"""
Admin order management views.
"""
from rest_framework.views import APIView
from rest_framework.permissions import IsAdminUser
from rest_framework import status

from apps.common.models import AdminAuditLog
from apps.common.utils import success_response, error_response
from ..models import Order
from ..serializers import OrderSerializer, OrderStatusSerializer
from ..services import OrderService


class AdminOrderListView(APIView):
    """All orders, optionally filtered by ?status="""
    permission_classes = [IsAdminUser]

    def get(self, request):
        orders = Order.objects.select_related('user').prefetch_related('items')
        status_filter = request.GET.get('status')
        if status_filter:
            orders = orders.filter(status=status_filter)
        return success_response(OrderSerializer(orders, many=True).data)


class AdminOrderStatusView(APIView):
    """Change order status; completing an order awards XP"""
    permission_classes = [IsAdminUser]

    def patch(self, request, order_id):
        serializer = OrderStatusSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid status value', errors=serializer.errors)

        new_status = serializer.validated_data['status']
        order = OrderService.update_status(order_id, new_status)
        if order is None:
            return error_response(
                'Order not found or status has already been changed',
                status_code=status.HTTP_404_NOT_FOUND
            )

        AdminAuditLog.record(
            request, order, f'Status set to {new_status}',
            changes={'status': new_status, 'xp_awarded': order.xp_awarded}
        )
        return success_response(OrderSerializer(order).data, 'Order status updated')
