from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, Sequence, TYPE_CHECKING

from .config import Thresholds
from .normalize import (
    fold_text,
    fold_tokens,
    full_form,
    neutralize_gender,
    reorder_adverbs,
    reorder_time_expressions,
)
from .similarity import similarity
from .types import ExerciseContext, JudgeRequest, JudgeResponse

if TYPE_CHECKING:
    from .judge import Judge

logger = logging.getLogger(__name__)

DECISION_ACCEPTED = "accepted"
DECISION_REJECTED = "rejected"
DECISION_DEFER = "defer"
DECISION_JUDGED = "judged"

LANE_WORD_ORDER = "word_order"
LANE_FOLD = "fold"
LANE_FULL = "full"
LANE_TIME = "time"
LANE_ADVERB = "adverb"
LANE_GENDER = "gender"
LANE_COMBINED = "combined"
LANE_SIMILARITY = "similarity"
LANE_UNCERTAIN = "uncertain"
LANE_LENGTH = "length"
LANE_NONE = "none"

JUDGE_UNAVAILABLE = "judge_unavailable"

DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class LaneResult:
    decision: str           # accepted | rejected | defer
    lane: str
    user_form: str = ""
    expected_form: str = ""
    scores: dict[str, float] = field(default_factory=dict)


@dataclass(frozen=True)
class Verdict:
    is_correct: bool
    user_answer: str
    decision: str           # accepted | rejected | judged
    lane: str
    user_form: str = ""
    expected_form: str = ""
    similarity: float | None = None
    judge_reason: str | None = None
    judge_error: str | None = None
    retryable: bool = False


def _both(fn: Callable[[str], str], user: str, expected: str) -> tuple[str, str]:
    return fn(user), fn(expected)


def decide(user: str, expected: str, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> LaneResult:
    """Run the deterministic lanes; the first lane that matches wins."""
    folded = _both(fold_text, user, expected)
    if folded[0] == folded[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_FOLD, *folded)

    full = _both(full_form, user, expected)
    if full[0] == full[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_FULL, *full)

    timed = _both(reorder_time_expressions, *full)
    if timed[0] == timed[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_TIME, *timed)

    adverbs = _both(reorder_adverbs, *timed)
    if adverbs[0] == adverbs[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_ADVERB, *adverbs)

    neutral = _both(neutralize_gender, *full)
    if neutral[0] == neutral[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_GENDER, *neutral)

    combined = _both(neutralize_gender, *adverbs)
    if combined[0] == combined[1]:
        return LaneResult(DECISION_ACCEPTED, LANE_COMBINED, *combined)

    scores = {
        LANE_FULL: similarity(*full),
        LANE_COMBINED: similarity(*combined),
    }
    best = max(scores.values())
    if best >= thresholds.accept:
        form = full if scores[LANE_FULL] >= thresholds.accept else combined
        return LaneResult(DECISION_ACCEPTED, LANE_SIMILARITY, *form, scores=scores)
    if best >= thresholds.judge:
        return LaneResult(DECISION_DEFER, LANE_UNCERTAIN, *full, scores=scores)
    if len(user.split()) >= thresholds.judge_min_tokens:
        return LaneResult(DECISION_DEFER, LANE_LENGTH, *full, scores=scores)
    return LaneResult(DECISION_REJECTED, LANE_NONE, *full, scores=scores)


def decide_word_order(user_tokens: Sequence[str], expected: str) -> LaneResult | None:
    """Right words in the wrong order go to the judge, never straight to accepted."""
    user_words = fold_tokens(user_tokens)
    expected_words = fold_text(expected).split()
    if user_words != expected_words and sorted(user_words) == sorted(expected_words):
        return LaneResult(
            DECISION_DEFER,
            LANE_WORD_ORDER,
            " ".join(user_words),
            " ".join(expected_words),
        )
    return None


def _verdict(result: LaneResult, user_answer: str, **extra) -> Verdict:
    score = max(result.scores.values()) if result.scores else None
    fields = dict(
        is_correct=result.decision == DECISION_ACCEPTED,
        user_answer=user_answer,
        decision=result.decision,
        lane=result.lane,
        user_form=result.user_form,
        expected_form=result.expected_form,
        similarity=score,
    )
    fields.update(extra)
    return Verdict(**fields)


async def resolve(
    result: LaneResult,
    *,
    user_answer: str,
    expected: str,
    ctx: ExerciseContext,
    judge: "Judge | None",
) -> Verdict:
    """Turn a lane result into a verdict, asking the judge for deferred answers.

    The judge sees the raw strings. Judge failures resolve to a rejected,
    retryable verdict; they are never raised to the caller.
    """
    if result.decision != DECISION_DEFER:
        return _verdict(result, user_answer)
    if judge is None:
        logger.warning("judge_skipped lane=%s reason=%s", result.lane, JUDGE_UNAVAILABLE)
        return _verdict(result, user_answer, decision=DECISION_REJECTED, judge_error=JUDGE_UNAVAILABLE)

    request = JudgeRequest.build(user_answer, expected, ctx)
    try:
        response = await judge.judge(request)
        if not isinstance(response, JudgeResponse):
            response = JudgeResponse.model_validate(response)
    except Exception as exc:
        logger.warning(
            "judge_call_failed lane=%s exercise_type=%s error=%s: %s",
            result.lane,
            ctx.exercise_type,
            type(exc).__name__,
            exc,
        )
        return _verdict(
            result,
            user_answer,
            decision=DECISION_REJECTED,
            judge_error=str(exc) or type(exc).__name__,
            retryable=True,
        )
    logger.info(
        "judge_verdict lane=%s exercise_type=%s is_correct=%s confidence=%s",
        result.lane,
        ctx.exercise_type,
        response.is_correct,
        response.confidence,
    )
    return _verdict(
        result,
        user_answer,
        is_correct=response.is_correct,
        decision=DECISION_JUDGED,
        judge_reason=response.reason,
    )


async def evaluate(
    user_answer: str,
    expected: str,
    ctx: ExerciseContext,
    *,
    judge: "Judge | None" = None,
    thresholds: Thresholds = DEFAULT_THRESHOLDS,
) -> Verdict:
    result = decide(user_answer, expected, thresholds)
    return await resolve(result, user_answer=user_answer, expected=expected, ctx=ctx, judge=judge)
