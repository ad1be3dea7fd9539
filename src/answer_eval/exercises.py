from __future__ import annotations
import math
import random
from dataclasses import dataclass, field
from typing import Any, Sequence, TYPE_CHECKING

from .config import Thresholds
from .grader import DEFAULT_THRESHOLDS, Verdict, decide, decide_word_order, evaluate, resolve
from .normalize import fold_text
from .types import (
    EXERCISE_LISTENING,
    EXERCISE_TRANSLATE_TYPING,
    EXERCISE_WORD_BUBBLES,
    ExerciseContext,
)

if TYPE_CHECKING:
    from .judge import Judge

COMMON_DISTRACTORS = (
    "the", "a", "is", "are", "was", "were", "have", "has", "do", "does",
    "will", "would", "can", "could", "not", "very", "much", "more", "less",
    "than", "then", "now", "here", "there",
)
MAX_DISTRACTORS = 3


@dataclass(frozen=True)
class TypingItem:
    question: str           # Czech sentence shown to the learner
    correct_answer: str
    hint: str = ""
    explanation: str = ""


@dataclass(frozen=True)
class ListeningItem:
    audio_text: str         # sentence played to the learner
    correct_answer: str
    hint: str = ""
    explanation: str = ""


@dataclass(frozen=True)
class WordBubblesItem:
    question: str
    correct_answer: str
    words: tuple[str, ...] = field(default_factory=tuple)
    explanation: str = ""


async def check_translation(
    user_input: str,
    item: TypingItem,
    *,
    judge: "Judge | None" = None,
    lesson_kind: str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    ctx = ExerciseContext(EXERCISE_TRANSLATE_TYPING, item.question, lesson_kind)
    return await evaluate(user_input, item.correct_answer, ctx, judge=judge, thresholds=thresholds)


async def check_dictation(
    user_input: str,
    item: ListeningItem,
    *,
    judge: "Judge | None" = None,
    lesson_kind: str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    # Learners never see the punctuation of what they hear; the fold lane drops it.
    ctx = ExerciseContext(EXERCISE_LISTENING, item.audio_text, lesson_kind)
    return await evaluate(user_input, item.correct_answer, ctx, judge=judge, thresholds=thresholds)


async def check_word_bubbles(
    selected_words: Sequence[str],
    item: WordBubblesItem,
    *,
    judge: "Judge | None" = None,
    lesson_kind: str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    user_answer = " ".join(w.strip() for w in selected_words if w.strip())
    if not user_answer:
        raise ValueError("check_word_bubbles needs at least one selected word")
    ctx = ExerciseContext(EXERCISE_WORD_BUBBLES, item.question, lesson_kind)
    result = decide_word_order(selected_words, item.correct_answer)
    if result is None:
        result = decide(user_answer, item.correct_answer, thresholds)
    return await resolve(result, user_answer=user_answer, expected=item.correct_answer, ctx=ctx, judge=judge)


def build_word_bank(
    correct_answer: str,
    rng: random.Random,
    distractors: Sequence[str] = COMMON_DISTRACTORS,
) -> list[str]:
    """Words of the answer plus a few distractors, shuffled."""
    words = correct_answer.split()
    taken = {w.lower() for w in words}
    wanted = min(MAX_DISTRACTORS, math.ceil(len(words) * 0.5))
    pool = [d for d in distractors if d.lower() not in taken]
    extra = rng.sample(pool, min(wanted, len(pool)))
    bank = words + extra
    rng.shuffle(bank)
    return bank


def _text(payload: dict[str, Any], key: str) -> str:
    value = payload.get(key)
    return value.strip() if isinstance(value, str) else ""


def item_from_payload(payload: dict[str, Any]) -> TypingItem | ListeningItem | WordBubblesItem:
    kind = payload.get("type")
    correct = _text(payload, "correctAnswer")
    if not correct:
        raise ValueError(f"{kind} exercise has no correctAnswer")
    if kind == EXERCISE_TRANSLATE_TYPING:
        return TypingItem(
            question=_text(payload, "question"),
            correct_answer=correct,
            hint=_text(payload, "hint"),
            explanation=_text(payload, "explanation"),
        )
    if kind == EXERCISE_LISTENING:
        return ListeningItem(
            audio_text=_text(payload, "audioText") or correct,
            correct_answer=correct,
            hint=_text(payload, "hint"),
            explanation=_text(payload, "explanation"),
        )
    if kind == EXERCISE_WORD_BUBBLES:
        words = payload.get("words") or []
        return WordBubblesItem(
            question=_text(payload, "question"),
            correct_answer=correct,
            words=tuple(str(w) for w in words),
            explanation=_text(payload, "explanation"),
        )
    raise ValueError(f"not a typed exercise: {kind!r}")


async def check_answer(
    payload: dict[str, Any],
    answer: str | Sequence[str],
    *,
    judge: "Judge | None" = None,
    lesson_kind: str | None = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    item = item_from_payload(payload)
    if isinstance(item, WordBubblesItem):
        tokens = answer.split() if isinstance(answer, str) else list(answer)
        return await check_word_bubbles(tokens, item, judge=judge, lesson_kind=lesson_kind, thresholds=thresholds)
    if not isinstance(answer, str):
        answer = " ".join(answer)
    if isinstance(item, ListeningItem):
        return await check_dictation(answer, item, judge=judge, lesson_kind=lesson_kind, thresholds=thresholds)
    return await check_translation(answer, item, judge=judge, lesson_kind=lesson_kind, thresholds=thresholds)


def assemblable_from(correct_answer: str, words: Sequence[str]) -> bool:
    available: dict[str, int] = {}
    for w in words:
        for token in fold_text(w).split():
            available[token] = available.get(token, 0) + 1
    for token in fold_text(correct_answer).split():
        if available.get(token, 0) <= 0:
            return False
        available[token] -= 1
    return True
