from __future__ import annotations
import asyncio
import json
import logging
import re
from dataclasses import dataclass
from typing import Protocol, TYPE_CHECKING

from google import genai
from google.genai import types as genai_types
from pydantic import ValidationError

from .types import JudgeRequest, JudgeResponse

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class JudgeError(Exception):
    """The semantic judge could not produce a usable verdict."""


class Judge(Protocol):
    async def judge(self, request: JudgeRequest) -> JudgeResponse: ...


_IDIOM_RULES = """
IDIOM LESSON (critical): this exercise tests one specific idiom and the
student must produce the exact phrase.
- "go bananas" is not "get crazy"; "piece of cake" is not "very easy";
  "spill the beans" is not "tell the secret"; "break a leg" is not "good luck".
- Do NOT accept paraphrases, explanations of the meaning, or synonyms that
  replace words of the idiom.
- Do accept small grammar changes (they will / they'll, is going to / will),
  letter case, missing punctuation, and 1-2 letter typos in ordinary words.
"""


def build_judge_prompt(request: JudgeRequest) -> str:
    idiom_rules = _IDIOM_RULES if request.is_idiom else ""
    kind = request.exercise_type + (" (IDIOM - exact phrase required)" if request.is_idiom else "")
    context_line = f"Context / question: {request.context}\n" if request.context else ""
    return f"""You are a strict but fair English teacher for Czech-speaking learners.
Decide whether the student's answer is correct.
{idiom_rules}
Mark CORRECT if:
- it has the SAME MEANING as the expected answer
- it uses synonyms ("phone" vs "call", "kid" vs "child"){" - not for the words of the idiom" if request.is_idiom else ""}
- the word order differs but the meaning stays the same
- it uses British or American spelling (colour / color)
- it has small typos (1-2 letters) in COMMON words ("becuase" -> "because")
- punctuation or capital letters are missing or added
- it uses contractions (I'm = I am, don't = do not)

Mark WRONG if:
- the meaning is different, or the sentence is a different sentence
- words that change the meaning are missing
- a grammar error changes the tense or the person
- a KEY word is wrong (abbreviations, names, technical terms: "iw" for "IQ", "cat" for "car")
- a typo produces another real word ("form" instead of "from")

Exercise type: {kind}
{context_line}Expected answer: "{request.correct_answer}"
Student answer: "{request.user_answer}"

Reply ONLY with a JSON object:
{{"isCorrect": true or false, "confidence": "high" | "medium" | "low", "reason": "short explanation in Czech"}}
"""


def parse_judge_text(text: str) -> JudgeResponse:
    match = _JSON_OBJECT.search(text or "")
    if not match:
        raise JudgeError("judge reply contains no JSON object")
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError as exc:
        raise JudgeError(f"judge reply is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise JudgeError("judge reply is not a JSON object")
    try:
        return JudgeResponse.model_validate(data)
    except ValidationError as exc:
        raise JudgeError(f"judge reply has unexpected shape: {exc.error_count()} error(s)") from exc


@dataclass
class GeminiJudge:
    api_key: str
    model: str
    timeout_sec: float = 15.0
    temperature: float = 0.1

    def _client(self) -> genai.Client:
        return genai.Client(api_key=self.api_key)

    def _generate(self, prompt: str) -> str:
        config = genai_types.GenerateContentConfig(
            temperature=self.temperature,
            response_mime_type="application/json",
            response_schema=JudgeResponse,
        )
        client = self._client()
        resp = client.models.generate_content(model=self.model, contents=prompt, config=config)
        return (resp.text or "").strip()

    async def judge(self, request: JudgeRequest) -> JudgeResponse:
        prompt = build_judge_prompt(request)
        logger.info(
            "llm_usage: judge model=%s exercise_type=%s lesson_kind=%s user_answer_len=%s correct_answer_len=%s",
            self.model,
            request.exercise_type,
            request.lesson_kind,
            len(request.user_answer),
            len(request.correct_answer),
        )
        try:
            raw = await asyncio.wait_for(asyncio.to_thread(self._generate, prompt), timeout=self.timeout_sec)
        except asyncio.TimeoutError as exc:
            raise JudgeError(f"judge timed out after {self.timeout_sec}s") from exc
        except JudgeError:
            raise
        except Exception as exc:
            raise JudgeError(f"judge call failed: {type(exc).__name__}: {exc}") from exc
        if not raw:
            raise JudgeError("judge returned an empty reply")
        return parse_judge_text(raw)


def build_judge(settings: "Settings") -> GeminiJudge | None:
    if not settings.gemini_api_key:
        logger.warning("judge_disabled reason=no_api_key")
        return None
    return GeminiJudge(
        api_key=settings.gemini_api_key,
        model=settings.llm_model,
        timeout_sec=settings.judge_timeout_sec,
    )
