from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .exercises import assemblable_from
from .normalize import fold_text
from .types import (
    EXERCISE_LISTENING,
    EXERCISE_TRANSLATE_TYPING,
    EXERCISE_TYPES,
    EXERCISE_WORD_BUBBLES,
)

# generated alongside the typed exercises but graded elsewhere
UNTYPED_EXERCISE_TYPES = ("multiple-choice", "matching-pairs")


@dataclass(frozen=True)
class ValidationIssue:
    severity: str  # "error" | "warning"
    message: str
    exercise_index: int | None = None
    exercise_type: str | None = None


def _iter_exercises(payload) -> Iterable[dict]:
    if isinstance(payload, dict):
        exercises = payload.get("exercises")
        if isinstance(exercises, list):
            return exercises
    if isinstance(payload, list):
        return payload
    return []


def validate_exercises(payload) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    for idx, ex in enumerate(_iter_exercises(payload), start=1):
        if not isinstance(ex, dict):
            issues.append(ValidationIssue("error", "exercise is not an object", idx))
            continue
        kind = ex.get("type")
        if kind in UNTYPED_EXERCISE_TYPES:
            continue
        if kind not in EXERCISE_TYPES:
            issues.append(ValidationIssue("error", f"unknown exercise type {kind!r}", idx, kind))
            continue
        correct = ex.get("correctAnswer")
        if not isinstance(correct, str) or not fold_text(correct):
            issues.append(ValidationIssue("error", "correctAnswer must be a non-empty string", idx, kind))
            continue

        if kind == EXERCISE_LISTENING:
            audio_text = ex.get("audioText")
            if not isinstance(audio_text, str) or not audio_text.strip():
                issues.append(ValidationIssue("error", "listening exercise requires audioText", idx, kind))

        if kind == EXERCISE_TRANSLATE_TYPING:
            question = ex.get("question")
            if not isinstance(question, str) or not question.strip():
                issues.append(ValidationIssue("error", "translate-typing exercise requires question", idx, kind))
            elif fold_text(question) == fold_text(correct):
                issues.append(ValidationIssue("warning", "question is identical to correctAnswer", idx, kind))

        if kind == EXERCISE_WORD_BUBBLES:
            words = ex.get("words")
            if not isinstance(words, list) or not words:
                issues.append(ValidationIssue("error", "word-bubbles exercise requires words", idx, kind))
                continue
            words = [str(w) for w in words]
            if not assemblable_from(correct, words):
                issues.append(
                    ValidationIssue("error", "correctAnswer cannot be assembled from words", idx, kind)
                )
            elif len(fold_text(" ".join(words)).split()) <= len(fold_text(correct).split()):
                issues.append(ValidationIssue("warning", "word-bubbles exercise has no distractors", idx, kind))
    return issues
