from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool

EXERCISE_TRANSLATE_TYPING = "translate-typing"
EXERCISE_LISTENING = "listening"
EXERCISE_WORD_BUBBLES = "word-bubbles"

EXERCISE_TYPES = (
    EXERCISE_TRANSLATE_TYPING,
    EXERCISE_LISTENING,
    EXERCISE_WORD_BUBBLES,
)

LESSON_KIND_IDIOMS = "idioms"


@dataclass(frozen=True)
class ExerciseContext:
    exercise_type: str
    prompt: str = ""
    lesson_kind: str | None = None

    def __post_init__(self) -> None:
        if self.exercise_type not in EXERCISE_TYPES:
            raise ValueError(f"unknown exercise_type: {self.exercise_type!r}")


@dataclass(frozen=True)
class JudgeRequest:
    user_answer: str
    correct_answer: str
    exercise_type: str
    context: str
    lesson_kind: str | None = None

    @classmethod
    def build(cls, user_answer: str, correct_answer: str, ctx: ExerciseContext) -> "JudgeRequest":
        return cls(
            user_answer=user_answer,
            correct_answer=correct_answer,
            exercise_type=ctx.exercise_type,
            context=ctx.prompt,
            lesson_kind=ctx.lesson_kind,
        )

    @property
    def is_idiom(self) -> bool:
        return (self.lesson_kind or "").strip().lower() == LESSON_KIND_IDIOMS

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "userAnswer": self.user_answer,
            "correctAnswer": self.correct_answer,
            "exerciseType": self.exercise_type,
            "context": self.context,
        }
        if self.lesson_kind:
            payload["lessonKind"] = self.lesson_kind
        return payload


class JudgeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    is_correct: StrictBool = Field(alias="isCorrect")
    confidence: str | None = None  # high | medium | low
    reason: str | None = None
