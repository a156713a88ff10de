"""
Tea quiz recommendation engine.

Rules are matched against the set of answer values the customer picked.
Conditions refer to option values only, not to question ids, so the same
value chosen in any question satisfies a condition on it.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class QuizOption:
    label: str
    value: str


@dataclass(frozen=True)
class QuizQuestion:
    id: str
    text: str
    options: Tuple[QuizOption, ...] = field(default_factory=tuple)

    @property
    def values(self) -> Tuple[str, ...]:
        return tuple(option.value for option in self.options)


@dataclass(frozen=True)
class QuizRule:
    """
    Recommendation rule.

    A lower ``priority`` number takes precedence. Empty ``conditions`` make
    the rule match any answers.
    """
    conditions: Tuple[str, ...]
    tea_type: str
    priority: float = 0

    def matches(self, answer_values) -> bool:
        return set(self.conditions).issubset(answer_values)


@dataclass(frozen=True)
class QuizConfig:
    questions: Tuple[QuizQuestion, ...] = field(default_factory=tuple)
    rules: Tuple[QuizRule, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'QuizConfig':
        """Build from the stored/wire format (``teaType`` keys)"""
        questions = tuple(
            QuizQuestion(
                id=str(question['id']),
                text=question['text'],
                options=tuple(
                    QuizOption(label=option['label'], value=option['value'])
                    for option in question.get('options', [])
                ),
            )
            for question in data.get('questions', [])
        )
        rules = tuple(
            QuizRule(
                conditions=tuple(rule.get('conditions', [])),
                tea_type=rule['teaType'],
                priority=rule.get('priority', 0),
            )
            for rule in data.get('rules', [])
        )
        return cls(questions=questions, rules=rules)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'questions': [
                {
                    'id': question.id,
                    'text': question.text,
                    'options': [
                        {'label': option.label, 'value': option.value}
                        for option in question.options
                    ],
                }
                for question in self.questions
            ],
            'rules': [
                {
                    'conditions': list(rule.conditions),
                    'teaType': rule.tea_type,
                    'priority': rule.priority,
                }
                for rule in self.rules
            ],
        }


def order_rules(rules: Iterable[QuizRule]) -> List[QuizRule]:
    """Evaluation order: ascending priority, stored order within a priority"""
    # sorted() is stable, so equal priorities keep list order
    return sorted(rules, key=lambda rule: rule.priority)


def match_rule(answers: Mapping[str, str], rules: Iterable[QuizRule]) -> Optional[str]:
    """
    Pick the recommended tea type for a set of quiz answers.

    Args:
        answers: Question id -> selected option value.
        rules: Recommendation rules in stored order.

    Returns:
        str: ``tea_type`` of the first matching rule, or None when no rule
        matches (the caller decides on a fallback).
    """
    answer_values = set(answers.values())
    for rule in order_rules(rules):
        if rule.matches(answer_values):
            return rule.tea_type
    return None


def find_shared_option_values(questions: Iterable[QuizQuestion]) -> List[str]:
    """Option values offered by more than one question"""
    counts = Counter()
    for question in questions:
        counts.update(set(question.values))
    return sorted(value for value, count in counts.items() if count > 1)
