"""
Quiz configuration serializers.

The wire format keeps the storefront's keys (``teaType``); the stored JSON
is exactly the validated payload.
"""
from rest_framework import serializers


class QuizOptionSerializer(serializers.Serializer):
    label = serializers.CharField(max_length=200)
    value = serializers.CharField(max_length=100)


class QuizQuestionSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=50)
    text = serializers.CharField(max_length=500)
    options = QuizOptionSerializer(many=True)

    def validate_options(self, value):
        if len(value) < 2:
            raise serializers.ValidationError("A question needs at least 2 options.")
        values = [option['value'] for option in value]
        if len(values) != len(set(values)):
            raise serializers.ValidationError("Option values must be unique within a question.")
        return value


class QuizRuleSerializer(serializers.Serializer):
    conditions = serializers.ListField(
        child=serializers.CharField(max_length=100), allow_empty=True
    )
    teaType = serializers.CharField(max_length=100)
    priority = serializers.FloatField()

    def validate_priority(self, value):
        # Keep whole numbers as ints in the stored JSON
        return int(value) if float(value).is_integer() else value


class QuizConfigSerializer(serializers.Serializer):
    """
    Serializer for the full quiz configuration.
    Used for: GET /api/quiz/config/ and PUT /api/quiz/config/
    """
    questions = QuizQuestionSerializer(many=True)
    rules = QuizRuleSerializer(many=True)

    def validate(self, attrs):
        question_ids = [question['id'] for question in attrs['questions']]
        duplicates = sorted({qid for qid in question_ids if question_ids.count(qid) > 1})
        if duplicates:
            raise serializers.ValidationError({'questions': f"Duplicate question ids: {duplicates}"})

        known_values = {
            option['value']
            for question in attrs['questions']
            for option in question['options']
        }
        rule_errors = {}
        for index, rule in enumerate(attrs['rules']):
            unknown = [value for value in rule['conditions'] if value not in known_values]
            if unknown:
                rule_errors[index] = f"Unknown answer values: {unknown}"
        if rule_errors:
            raise serializers.ValidationError({'rules': rule_errors})

        return attrs


class QuizAnswersSerializer(serializers.Serializer):
    """
    Customer answers: question id -> chosen option value.
    Expects ``config`` (QuizConfig) in the serializer context.
    """
    answers = serializers.DictField(child=serializers.CharField(max_length=100))

    def validate_answers(self, value):
        config = self.context['config']
        options_by_question = {question.id: set(question.values) for question in config.questions}

        errors = {}
        for question_id, answer in value.items():
            if question_id not in options_by_question:
                errors[question_id] = "Unknown question."
            elif answer not in options_by_question[question_id]:
                errors[question_id] = f"Unknown option value '{answer}'."
        if errors:
            raise serializers.ValidationError(errors)

        return value
