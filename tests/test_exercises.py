import asyncio
import random

import pytest

from answer_eval.exercises import (
    COMMON_DISTRACTORS,
    ListeningItem,
    TypingItem,
    WordBubblesItem,
    assemblable_from,
    build_word_bank,
    check_answer,
    check_dictation,
    check_translation,
    check_word_bubbles,
    item_from_payload,
)
from answer_eval.grader import DECISION_ACCEPTED, DECISION_JUDGED, DECISION_REJECTED
from answer_eval.types import JudgeResponse


class FakeJudge:
    def __init__(self, is_correct=True, error=None):
        self.is_correct = is_correct
        self.error = error
        self.requests = []

    async def judge(self, request):
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return JudgeResponse(isCorrect=self.is_correct)


BUBBLES = WordBubblesItem(question="Chodím do školy.", correct_answer="I go to school")


def test_translation_accepts_contraction():
    item = TypingItem(question="Jdu do obchodu.", correct_answer="I am going to the store")
    verdict = asyncio.run(check_translation("I'm going to the store.", item))
    assert verdict.is_correct is True
    assert verdict.lane == "full"


def test_translation_failed_judge_marks_wrong_and_retryable():
    item = TypingItem(question="Šel jsem do školy včera.", correct_answer="I went to school yesterday")
    judge = FakeJudge(error=TimeoutError("slow"))
    verdict = asyncio.run(check_translation("I go to school yesterday", item, judge=judge))
    assert verdict.is_correct is False
    assert verdict.retryable is True
    assert judge.requests[0].exercise_type == "translate-typing"
    assert judge.requests[0].context == "Šel jsem do školy včera."


def test_dictation_ignores_punctuation_and_case():
    item = ListeningItem(audio_text="How are you doing today?", correct_answer="How are you doing today?")
    verdict = asyncio.run(check_dictation("how are you doing today", item))
    assert verdict.is_correct is True
    assert verdict.lane == "fold"


def test_dictation_sends_listening_context_to_judge():
    item = ListeningItem(audio_text="She went home early", correct_answer="She went home early")
    judge = FakeJudge(is_correct=False)
    verdict = asyncio.run(check_dictation("she want home erly", item, judge=judge, lesson_kind="vocabulary"))
    assert verdict.decision == DECISION_JUDGED
    assert verdict.is_correct is False
    request = judge.requests[0]
    assert request.exercise_type == "listening"
    assert request.context == "She went home early"
    assert request.lesson_kind == "vocabulary"


def test_word_bubbles_right_order_is_accepted():
    verdict = asyncio.run(check_word_bubbles(["I", "go", "to", "school"], BUBBLES))
    assert verdict.is_correct is True
    assert verdict.user_answer == "I go to school"


def test_word_bubbles_wrong_order_always_goes_to_judge():
    judge = FakeJudge(is_correct=False)
    verdict = asyncio.run(check_word_bubbles(["school", "to", "I", "go"], BUBBLES, judge=judge))
    assert verdict.lane == "word_order"
    assert verdict.decision == DECISION_JUDGED
    assert verdict.is_correct is False
    assert judge.requests[0].user_answer == "school to I go"
    assert judge.requests[0].exercise_type == "word-bubbles"


def test_word_bubbles_wrong_order_without_judge_is_not_accepted():
    verdict = asyncio.run(check_word_bubbles(["school", "to", "I", "go"], BUBBLES))
    assert verdict.is_correct is False
    assert verdict.decision == DECISION_REJECTED
    assert verdict.lane == "word_order"


def test_word_bubbles_missing_word_uses_lanes():
    judge = FakeJudge(is_correct=False)
    verdict = asyncio.run(check_word_bubbles(["I", "go", "school"], BUBBLES, judge=judge))
    assert verdict.lane == "uncertain"
    assert len(judge.requests) == 1


@pytest.mark.parametrize("selected", [[], ["", " "]])
def test_word_bubbles_empty_selection_is_a_programmer_error(selected):
    with pytest.raises(ValueError):
        asyncio.run(check_word_bubbles(selected, BUBBLES))


def test_build_word_bank_adds_distractors():
    bank = build_word_bank("How are you doing", random.Random(7))
    assert len(bank) == 6
    extra = list(bank)
    for word in ["How", "are", "you", "doing"]:
        extra.remove(word)
    assert all(w in COMMON_DISTRACTORS for w in extra)
    assert "are" not in extra
    assert len(set(extra)) == 2


def test_build_word_bank_caps_distractors():
    bank = build_word_bank("I would like to order a large coffee please", random.Random(1))
    assert len(bank) == 9 + 3


def test_item_from_payload():
    item = item_from_payload(
        {
            "type": "word-bubbles",
            "question": "Jak se máš?",
            "correctAnswer": "How are you doing",
            "words": ["How", "are", "you", "doing", "is", "am"],
        }
    )
    assert isinstance(item, WordBubblesItem)
    assert item.words == ("How", "are", "you", "doing", "is", "am")

    listening = item_from_payload({"type": "listening", "correctAnswer": "Good morning"})
    assert isinstance(listening, ListeningItem)
    assert listening.audio_text == "Good morning"


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "translate-typing", "question": "Ahoj"},
        {"type": "multiple-choice", "correctAnswer": "am", "options": ["am", "is"]},
    ],
)
def test_item_from_payload_rejects_bad_items(payload):
    with pytest.raises(ValueError):
        item_from_payload(payload)


def test_check_answer_dispatches_on_type():
    typing = {"type": "translate-typing", "question": "Jsem studentka.", "correctAnswer": "I am a student"}
    assert asyncio.run(check_answer(typing, "I'm a student")).is_correct is True

    bubbles = {"type": "word-bubbles", "question": "Jak se máš?", "correctAnswer": "How are you doing"}
    verdict = asyncio.run(check_answer(bubbles, ["How", "are", "you", "doing"]))
    assert verdict.decision == DECISION_ACCEPTED


def test_assemblable_from_counts_repeats():
    assert assemblable_from("I go to school", ["school", "I", "to", "go", "the"])
    assert not assemblable_from("that that is", ["that", "is"])
