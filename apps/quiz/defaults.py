"""
Quiz configuration installed on first use and by ``setup_quiz_config``.

Lower priority numbers win; the empty-condition rule is the catch-all and
therefore carries the largest number.
"""

DEFAULT_QUIZ_CONFIG = {
    'questions': [
        {
            'id': 'q1',
            'text': 'КАКОЙ ЭФФЕКТ ВЫ ХОТИТЕ ПОЛУЧИТЬ?',
            'options': [
                {'label': 'Бодрость и энергию', 'value': 'energize'},
                {'label': 'Спокойствие', 'value': 'calm'},
                {'label': 'Концентрацию', 'value': 'focus'},
            ],
        },
        {
            'id': 'q2',
            'text': 'КАКОЙ ВКУС ВАМ БЛИЖЕ?',
            'options': [
                {'label': 'Землистый и глубокий', 'value': 'earthy'},
                {'label': 'Свежий и цветочный', 'value': 'fresh'},
                {'label': 'Насыщенный выдержанный', 'value': 'aged'},
            ],
        },
        {
            'id': 'q3',
            'text': 'КОГДА ПЛАНИРУЕТЕ ПИТЬ ЧАЙ?',
            'options': [
                {'label': 'Утром', 'value': 'morning'},
                {'label': 'Днём', 'value': 'day'},
                {'label': 'Вечером', 'value': 'evening'},
            ],
        },
    ],
    'rules': [
        {'conditions': ['energize', 'earthy'], 'teaType': 'Шу Пуэр', 'priority': 1},
        {'conditions': ['energize', 'fresh'], 'teaType': 'Шен Пуэр', 'priority': 1},
        {'conditions': ['focus', 'earthy'], 'teaType': 'Шу Пуэр', 'priority': 2},
        {'conditions': ['focus', 'fresh'], 'teaType': 'Шен Пуэр', 'priority': 2},
        {'conditions': ['calm', 'fresh'], 'teaType': 'Шен Пуэр', 'priority': 3},
        {'conditions': ['calm'], 'teaType': 'Габа', 'priority': 4},
        {'conditions': ['energize'], 'teaType': 'Красный', 'priority': 6},
        {'conditions': [], 'teaType': 'Шу Пуэр', 'priority': 100},
    ],
}
