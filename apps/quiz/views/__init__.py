"""
Quiz views module.
"""
from .quiz_views import QuizConfigView, QuizRecommendationView

__all__ = [
    'QuizConfigView',
    'QuizRecommendationView',
]
