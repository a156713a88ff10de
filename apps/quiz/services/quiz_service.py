"""
Quiz service: loads the stored quiz configuration and runs the
recommendation engine on customer answers.
"""
import logging
from dataclasses import dataclass

from django.conf import settings
from django.db import transaction

from ..models import QuizConfiguration
from .recommendation_engine import QuizConfig, find_shared_option_values, match_rule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QuizRecommendation:
    tea_type: str
    matched: bool


class QuizService:
    """Service class for quiz operations"""

    @staticmethod
    def get_config() -> QuizConfig:
        return QuizConfig.from_dict(QuizConfiguration.load().as_dict())

    @staticmethod
    def update_config(data, user=None) -> QuizConfiguration:
        """
        Replace questions and rules.

        ``data`` must already be validated by QuizConfigSerializer.
        """
        config = QuizConfig.from_dict(data)
        shared = find_shared_option_values(config.questions)
        if shared:
            logger.warning(
                f"Quiz options shared by several questions, rules on them match any of those questions: {shared}"
            )

        with transaction.atomic():
            quiz = QuizConfiguration.load()
            quiz.questions = data['questions']
            quiz.rules = data['rules']
            quiz.updated_by = user
            quiz.save()

        logger.info(f"Quiz config updated: {len(config.questions)} questions, {len(config.rules)} rules")
        return quiz

    @staticmethod
    def recommend(answers, config=None) -> QuizRecommendation:
        """
        Recommend a tea type for the answers, falling back to
        settings.QUIZ_DEFAULT_TEA_TYPE when no rule matches.
        """
        config = config or QuizService.get_config()
        tea_type = match_rule(answers, config.rules)
        if tea_type is None:
            logger.info(f"No quiz rule matched answers {sorted(answers.values())}, using default")
            return QuizRecommendation(tea_type=settings.QUIZ_DEFAULT_TEA_TYPE, matched=False)
        return QuizRecommendation(tea_type=tea_type, matched=True)
