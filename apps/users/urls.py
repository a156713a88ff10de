from django.urls import path
from rest_framework_simplejwt.views import TokenObtainPairView, TokenRefreshView

from . import views

urlpatterns = [
    path('token/', TokenObtainPairView.as_view(), name='token-obtain'),
    path('token/refresh/', TokenRefreshView.as_view(), name='token-refresh'),
    path('profile/', views.UserProfileView.as_view(), name='user-profile'),
    path('admin/<int:user_id>/xp/', views.AdminUserXPView.as_view(), name='admin-user-xp'),
    path('admin/<int:user_id>/discount/', views.AdminUserDiscountView.as_view(), name='admin-user-discount'),
]
