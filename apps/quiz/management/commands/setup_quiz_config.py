import copy

from django.core.management.base import BaseCommand

from apps.quiz.defaults import DEFAULT_QUIZ_CONFIG
from apps.quiz.models import QuizConfiguration


class Command(BaseCommand):
    help = 'Create the tea quiz configuration, or reset it to the defaults with --reset'

    def add_arguments(self, parser):
        parser.add_argument(
            '--reset',
            action='store_true',
            help='Overwrite existing questions and rules with the defaults',
        )

    def handle(self, *args, **options):
        quiz = QuizConfiguration.objects.filter(pk=1).first()

        if quiz is None:
            quiz = QuizConfiguration.load()
            self.stdout.write(self.style.SUCCESS(f'Created {quiz}'))
            return

        if not options['reset']:
            self.stdout.write(self.style.WARNING(f'Quiz already configured ({quiz}); use --reset to overwrite'))
            return

        quiz.questions = copy.deepcopy(DEFAULT_QUIZ_CONFIG['questions'])
        quiz.rules = copy.deepcopy(DEFAULT_QUIZ_CONFIG['rules'])
        quiz.save()
        self.stdout.write(self.style.SUCCESS(f'Reset {quiz}'))
