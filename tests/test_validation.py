from answer_eval.validation import validate_exercises

GENERATED = [
    {
        "type": "word-bubbles",
        "question": "Jak se máš?",
        "correctAnswer": "How are you doing",
        "words": ["How", "are", "you", "doing", "is", "am"],
    },
    {
        "type": "translate-typing",
        "question": "Jsem studentka.",
        "correctAnswer": "I am a student",
        "hint": "Nezapomeň na člen",
    },
    {
        "type": "multiple-choice",
        "question": "I ___ eating dinner right now.",
        "correctAnswer": "am",
        "options": ["am", "is", "are", "be"],
    },
    {
        "type": "listening",
        "audioText": "How are you doing today?",
        "correctAnswer": "How are you doing today",
    },
]


def test_generated_exercises_are_valid():
    assert validate_exercises(GENERATED) == []
    assert validate_exercises({"exercises": GENERATED}) == []


def test_word_bubbles_must_be_assemblable():
    payload = [{"type": "word-bubbles", "correctAnswer": "How are you doing", "words": ["How", "are", "you"]}]
    issues = validate_exercises(payload)
    assert [i.severity for i in issues] == ["error"]
    assert issues[0].exercise_index == 1


def test_word_bubbles_without_distractors_is_a_warning():
    payload = [{"type": "word-bubbles", "correctAnswer": "I go", "words": ["go", "I"]}]
    issues = validate_exercises(payload)
    assert [i.severity for i in issues] == ["warning"]


def test_missing_fields_are_errors():
    payload = [
        {"type": "listening", "correctAnswer": "Hello"},
        {"type": "translate-typing", "question": "Ahoj", "correctAnswer": "  "},
        {"type": "dictation", "correctAnswer": "Hi"},
        "not an exercise",
    ]
    issues = validate_exercises(payload)
    assert [i.exercise_index for i in issues] == [1, 2, 3, 4]
    assert all(i.severity == "error" for i in issues)


def test_question_equal_to_answer_is_a_warning():
    payload = [{"type": "translate-typing", "question": "Hello!", "correctAnswer": "hello"}]
    issues = validate_exercises(payload)
    assert [i.severity for i in issues] == ["warning"]
