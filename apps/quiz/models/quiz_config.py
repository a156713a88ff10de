import copy

from django.db import models
from django.conf import settings


def _default_questions():
    from ..defaults import DEFAULT_QUIZ_CONFIG
    return copy.deepcopy(DEFAULT_QUIZ_CONFIG['questions'])


def _default_rules():
    from ..defaults import DEFAULT_QUIZ_CONFIG
    return copy.deepcopy(DEFAULT_QUIZ_CONFIG['rules'])


class QuizConfiguration(models.Model):
    """Tea quiz questions and recommendation rules (single row)"""
    questions = models.JSONField(default=_default_questions)
    rules = models.JSONField(default=_default_rules)
    updated_at = models.DateTimeField(auto_now=True)
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )

    class Meta:
        db_table = 'quiz_configuration'
        verbose_name = 'Quiz Configuration'
        verbose_name_plural = 'Quiz Configuration'

    def __str__(self):
        return f"Quiz: {len(self.questions)} questions, {len(self.rules)} rules"

    def save(self, *args, **kwargs):
        self.pk = 1
        super().save(*args, **kwargs)

    @classmethod
    def load(cls):
        """Get the quiz row, creating it from the defaults on first access"""
        instance, _ = cls.objects.get_or_create(pk=1)
        return instance

    def as_dict(self):
        return {'questions': self.questions, 'rules': self.rules}
