"""
Tests for the tea quiz recommendation engine
"""
from django.test import SimpleTestCase

from apps.quiz.defaults import DEFAULT_QUIZ_CONFIG
from apps.quiz.services import (
    QuizConfig, QuizOption, QuizQuestion, QuizRule,
    find_shared_option_values, match_rule, order_rules
)


class MatchRuleTest(SimpleTestCase):

    def setUp(self):
        self.rules = QuizConfig.from_dict(DEFAULT_QUIZ_CONFIG).rules

    def test_two_condition_rule(self):
        answers = {'q1': 'energize', 'q2': 'earthy', 'q3': 'morning'}
        self.assertEqual(match_rule(answers, self.rules), 'Шу Пуэр')

    def test_fresh_energy(self):
        answers = {'q1': 'energize', 'q2': 'fresh', 'q3': 'day'}
        self.assertEqual(match_rule(answers, self.rules), 'Шен Пуэр')

    def test_single_condition_rule(self):
        answers = {'q1': 'calm', 'q2': 'aged', 'q3': 'evening'}
        self.assertEqual(match_rule(answers, self.rules), 'Габа')

    def test_specific_rule_beats_general_one(self):
        answers = {'q1': 'calm', 'q2': 'fresh', 'q3': 'evening'}
        self.assertEqual(match_rule(answers, self.rules), 'Шен Пуэр')

    def test_catch_all(self):
        answers = {'q1': 'focus', 'q2': 'aged', 'q3': 'evening'}
        self.assertEqual(match_rule(answers, self.rules), 'Шу Пуэр')

    def test_first_rule_by_priority(self):
        rules = [
            QuizRule(conditions=('energize',), tea_type='Шу Пуэр', priority=1),
            QuizRule(conditions=('earthy',), tea_type='Шен Пуэр', priority=2),
        ]
        self.assertEqual(match_rule({'q1': 'energize'}, rules), 'Шу Пуэр')

    def test_no_rules_means_no_match(self):
        self.assertIsNone(match_rule({'q1': 'calm'}, []))

    def test_no_matching_rule(self):
        rules = [QuizRule(conditions=('calm', 'earthy'), tea_type='Габа', priority=1)]
        self.assertIsNone(match_rule({'q1': 'energize', 'q2': 'earthy'}, rules))

    def test_lower_priority_number_wins(self):
        rules = [
            QuizRule(conditions=('calm',), tea_type='Габа', priority=5),
            QuizRule(conditions=('calm',), tea_type='Белый', priority=2),
        ]
        self.assertEqual(match_rule({'q1': 'calm'}, rules), 'Белый')

    def test_equal_priority_keeps_stored_order(self):
        rules = [
            QuizRule(conditions=('calm',), tea_type='Габа', priority=1),
            QuizRule(conditions=(), tea_type='Белый', priority=1),
        ]
        self.assertEqual(match_rule({'q1': 'calm'}, rules), 'Габа')
        self.assertEqual(match_rule({'q1': 'focus'}, rules), 'Белый')

    def test_values_match_regardless_of_question(self):
        # A value shared by two questions satisfies the condition from either
        rules = [QuizRule(conditions=('green',), tea_type='Зелёный', priority=1)]
        self.assertEqual(match_rule({'q1': 'green'}, rules), 'Зелёный')
        self.assertEqual(match_rule({'q2': 'green'}, rules), 'Зелёный')

    def test_empty_answers_only_match_catch_all(self):
        self.assertEqual(match_rule({}, self.rules), 'Шу Пуэр')

    def test_order_rules_is_stable(self):
        rules = [
            QuizRule(conditions=('a',), tea_type='first', priority=2),
            QuizRule(conditions=('b',), tea_type='second', priority=1),
            QuizRule(conditions=('c',), tea_type='third', priority=2),
        ]
        self.assertEqual([rule.tea_type for rule in order_rules(rules)], ['second', 'first', 'third'])


class QuizConfigTest(SimpleTestCase):

    def test_round_trip_default_config(self):
        self.assertEqual(QuizConfig.from_dict(DEFAULT_QUIZ_CONFIG).to_dict(), DEFAULT_QUIZ_CONFIG)

    def test_question_values(self):
        config = QuizConfig.from_dict(DEFAULT_QUIZ_CONFIG)
        self.assertEqual(config.questions[0].values, ('energize', 'calm', 'focus'))

    def test_shared_option_values(self):
        questions = [
            QuizQuestion(id='q1', text='?', options=(QuizOption('Да', 'yes'), QuizOption('Нет', 'no'))),
            QuizQuestion(id='q2', text='?', options=(QuizOption('Да', 'yes'), QuizOption('Может', 'maybe'))),
        ]
        self.assertEqual(find_shared_option_values(questions), ['yes'])

    def test_default_config_has_no_shared_values(self):
        config = QuizConfig.from_dict(DEFAULT_QUIZ_CONFIG)
        self.assertEqual(find_shared_option_values(config.questions), [])
