"""
Quiz models module.
"""
from .quiz_config import QuizConfiguration

__all__ = [
    'QuizConfiguration',
]
