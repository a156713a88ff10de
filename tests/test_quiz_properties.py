"""
Property-based tests for quiz rule matching
"""
from hypothesis import given, settings, strategies as st

from apps.quiz.services import QuizRule, match_rule, order_rules

answer_values = st.sampled_from(['energize', 'calm', 'focus', 'earthy', 'fresh', 'aged', 'morning', 'evening'])

rules_strategy = st.lists(
    st.builds(
        QuizRule,
        conditions=st.lists(answer_values, max_size=3, unique=True).map(tuple),
        tea_type=st.sampled_from(['Шу Пуэр', 'Шен Пуэр', 'Габа', 'Красный', 'Белый']),
        priority=st.integers(min_value=0, max_value=10),
    ),
    max_size=10,
)

answers_strategy = st.dictionaries(
    keys=st.sampled_from(['q1', 'q2', 'q3']), values=answer_values, max_size=3
)


class TestQuizMatchingProperties:

    @given(answers=answers_strategy, rules=rules_strategy)
    @settings(max_examples=200, deadline=None)
    def test_result_is_first_satisfied_rule(self, answers, rules):
        """The recommendation comes from the first satisfied rule in priority order"""
        result = match_rule(answers, rules)
        satisfied = [rule for rule in order_rules(rules) if rule.matches(set(answers.values()))]
        if satisfied:
            assert result == satisfied[0].tea_type
        else:
            assert result is None

    @given(answers=answers_strategy, rules=rules_strategy)
    @settings(max_examples=100, deadline=None)
    def test_catch_all_rule_always_yields_a_match(self, answers, rules):
        rules = rules + [QuizRule(conditions=(), tea_type='Шу Пуэр', priority=11)]
        assert match_rule(answers, rules) is not None

    @given(answers=answers_strategy, rules=rules_strategy)
    @settings(max_examples=100, deadline=None)
    def test_deterministic(self, answers, rules):
        assert match_rule(answers, rules) == match_rule(answers, list(rules))
