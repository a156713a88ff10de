from django.urls import path
from . import views

urlpatterns = [
    path('levels/', views.LoyaltyLevelsView.as_view(), name='loyalty-levels'),
    path('status/', views.LoyaltyStatusView.as_view(), name='loyalty-status'),
    path('xp-preview/', views.XPPreviewView.as_view(), name='loyalty-xp-preview'),
]
