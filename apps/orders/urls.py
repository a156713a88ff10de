from django.urls import path
from . import views

urlpatterns = [
    path('', views.CreateOrderView.as_view(), name='order-create'),
    path('mine/', views.MyOrdersView.as_view(), name='order-mine'),
    path('admin/', views.AdminOrderListView.as_view(), name='admin-order-list'),
    path('admin/<int:order_id>/status/', views.AdminOrderStatusView.as_view(), name='admin-order-status'),
]
