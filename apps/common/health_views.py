"""
Health check view for load balancers and uptime monitoring.
"""
import logging
import time

from django.db import connection
from django.http import JsonResponse
from django.utils import timezone
from django.views import View

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """Liveness probe with a database round trip; no authentication"""

    def get(self, request):
        started = time.time()
        database = self._check_database()

        healthy = database['status'] == 'healthy'
        payload = {
            'status': 'healthy' if healthy else 'unhealthy',
            'timestamp': timezone.now().isoformat(),
            'database': database,
            'response_time_ms': round((time.time() - started) * 1000, 2),
        }
        return JsonResponse(payload, status=200 if healthy else 503)

    def _check_database(self):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                cursor.fetchone()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return {'status': 'unhealthy', 'message': 'Database connection failed'}
        return {'status': 'healthy', 'message': 'Database connection successful'}
