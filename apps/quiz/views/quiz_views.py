"""
Tea quiz views.
"""
from rest_framework.permissions import AllowAny, IsAdminUser
from rest_framework.views import APIView

from apps.common.models import AdminAuditLog
from apps.common.utils import success_response, error_response
from ..serializers import QuizAnswersSerializer, QuizConfigSerializer
from ..services import QuizService
from ..models import QuizConfiguration


class QuizConfigView(APIView):
    """Read quiz configuration (public) or replace it (admin)"""

    def get_permissions(self):
        if self.request.method == 'GET':
            return [AllowAny()]
        return [IsAdminUser()]

    def get(self, request):
        return success_response(QuizConfiguration.load().as_dict())

    def put(self, request):
        serializer = QuizConfigSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid quiz config', errors=serializer.errors)

        quiz = QuizService.update_config(serializer.validated_data, user=request.user)
        AdminAuditLog.record(
            request, quiz, 'Quiz configuration replaced',
            changes={'questions': len(quiz.questions), 'rules': len(quiz.rules)}
        )
        return success_response(quiz.as_dict(), 'Quiz config updated')


class QuizRecommendationView(APIView):
    """Recommend a tea type for the customer's quiz answers"""
    permission_classes = [AllowAny]

    def post(self, request):
        config = QuizService.get_config()
        serializer = QuizAnswersSerializer(data=request.data, context={'config': config})
        if not serializer.is_valid():
            return error_response('Invalid quiz answers', errors=serializer.errors)

        recommendation = QuizService.recommend(serializer.validated_data['answers'], config)
        return success_response({
            'teaType': recommendation.tea_type,
            'matched': recommendation.matched,
        })
