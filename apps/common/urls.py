from django.urls import path

from .health_views import HealthCheckView
from .views import SiteSettingsView

app_name = 'common'

urlpatterns = [
    path('site-settings/', SiteSettingsView.as_view(), name='site-settings'),
    path('health/', HealthCheckView.as_view(), name='health'),
]
