"""
Quiz serializers module.
"""
from .config_serializers import (
    QuizOptionSerializer, QuizQuestionSerializer, QuizRuleSerializer,
    QuizConfigSerializer, QuizAnswersSerializer
)

__all__ = [
    'QuizOptionSerializer',
    'QuizQuestionSerializer',
    'QuizRuleSerializer',
    'QuizConfigSerializer',
    'QuizAnswersSerializer',
]
