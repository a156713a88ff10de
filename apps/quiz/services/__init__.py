"""
Quiz services module.

All services are exported from this module to maintain backward compatibility.
"""
from .recommendation_engine import (
    QuizConfig, QuizOption, QuizQuestion, QuizRule,
    find_shared_option_values, match_rule, order_rules
)
from .quiz_service import QuizRecommendation, QuizService

__all__ = [
    'QuizConfig',
    'QuizOption',
    'QuizQuestion',
    'QuizRule',
    'find_shared_option_values',
    'match_rule',
    'order_rules',
    'QuizRecommendation',
    'QuizService',
]
