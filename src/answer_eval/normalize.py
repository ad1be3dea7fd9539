from __future__ import annotations
import re
import unicodedata
from typing import Iterable, Mapping

from .lexicon import (
    BRITISH_TO_AMERICAN,
    COMPOUND_NUMBERS,
    CONTRACTIONS,
    GENDERED_SUBJECT_VERBS,
    MOVABLE_ADVERBS,
    NUMBER_WORDS,
    PERSON_TOKEN,
    POSSESSIVE_TOKEN,
    REFLEXIVE_TOKEN,
    TIME_EXPRESSIONS,
)

# typographic quotes and apostrophes as typed on phone keyboards
_STRAIGHT_QUOTES = str.maketrans({
    "’": "'",
    "‘": "'",
    "ʼ": "'",
    "“": "\"",
    "”": "\"",
})

_FOLD_STRIP = re.compile(r"[.,!?;:'\"]")
_SPACES = re.compile(r"\s+")


def _unfold(s: str) -> str:
    """NFKC, straight quotes, lower case; apostrophes are still present."""
    return unicodedata.normalize("NFKC", s or "").translate(_STRAIGHT_QUOTES).lower()


def _collapse(s: str) -> str:
    return _SPACES.sub(" ", s).strip()


def _word_pattern(words: Iterable[str]) -> re.Pattern[str]:
    # longest first so "twenty four" wins over "twenty"
    ordered = sorted(words, key=len, reverse=True)
    alternation = "|".join(re.escape(w) for w in ordered)
    return re.compile(rf"(?<![\w'])(?:{alternation})(?![\w'])", re.IGNORECASE)


def _replace_words(text: str, pattern: re.Pattern[str], table: Mapping[str, str]) -> str:
    return pattern.sub(lambda m: table[m.group(0).lower()], text)


_CONTRACTION_RE = _word_pattern(CONTRACTIONS)
_COMPOUND_RE = _word_pattern(COMPOUND_NUMBERS)
_NUMBER_RE = _word_pattern(NUMBER_WORDS)
_SPELLING_RE = _word_pattern(BRITISH_TO_AMERICAN)

_TIME_ALTERNATION = "|".join(
    re.escape(expr) for expr in sorted(TIME_EXPRESSIONS, key=len, reverse=True)
)
_TIME_AT_START = re.compile(rf"^({_TIME_ALTERNATION})\b[\s,]*", re.IGNORECASE)
_TIME_AT_END = re.compile(rf"(?:^|[\s,]+)({_TIME_ALTERNATION})$", re.IGNORECASE)

_ADVERB_RE = re.compile(
    r"\b(?:%s)\b" % "|".join(sorted(MOVABLE_ADVERBS)),
    re.IGNORECASE,
)
_ADVERB_SUFFIX = re.compile(r"\s*\[([a-z,]+)\]$")

_PERSON_VERB_RE = re.compile(
    r"\b(?:he|she)\s+(%s)\b" % "|".join(GENDERED_SUBJECT_VERBS),
    re.IGNORECASE,
)
_REFLEXIVE_RE = re.compile(r"\b(?:himself|herself)\b", re.IGNORECASE)
_POSSESSIVE_RE = re.compile(r"\b(?:his|her)\b", re.IGNORECASE)


def fold_text(s: str) -> str:
    return _collapse(_FOLD_STRIP.sub("", _unfold(s)))


def expand_contractions(s: str) -> str:
    return _replace_words(s or "", _CONTRACTION_RE, CONTRACTIONS)


def normalize_numbers(s: str) -> str:
    s = _replace_words(s or "", _COMPOUND_RE, COMPOUND_NUMBERS)
    return _replace_words(s, _NUMBER_RE, NUMBER_WORDS)


def americanize(s: str) -> str:
    return _replace_words(s or "", _SPELLING_RE, BRITISH_TO_AMERICAN)


def reorder_time_expressions(s: str) -> str:
    """Move leading/trailing time expressions to the end, sorted.

    "this week she is working" and "she is working this week" both become
    "she is working this week".
    """
    result = (s or "").strip()
    found: set[str] = set()
    while True:
        m = _TIME_AT_START.match(result)
        if not m:
            break
        found.add(m.group(1).lower())
        result = result[m.end():]
    while True:
        m = _TIME_AT_END.search(result)
        if not m:
            break
        found.add(m.group(1).lower())
        result = result[: m.start()]
    result = _collapse(result)
    parts = [result] if result else []
    return " ".join(parts + sorted(found))


def reorder_adverbs(s: str) -> str:
    """Pull movable adverbs out of the sentence into a sorted "[a,b]" suffix."""
    text = s or ""
    found: set[str] = set()
    suffix = _ADVERB_SUFFIX.search(text)
    if suffix:
        found.update(p for p in suffix.group(1).split(",") if p)
        text = text[: suffix.start()]
    found.update(m.group(0).lower() for m in _ADVERB_RE.finditer(text))
    result = _collapse(_ADVERB_RE.sub(" ", text))
    if not found:
        return result
    return f"{result} [{','.join(sorted(found))}]".strip()


def neutralize_gender(s: str) -> str:
    # Czech does not mark gender here, so he/she must not decide correctness.
    # Third person singular only.
    s = _PERSON_VERB_RE.sub(lambda m: f"{PERSON_TOKEN} {m.group(1).lower()}", s or "")
    s = _REFLEXIVE_RE.sub(REFLEXIVE_TOKEN, s)
    return _POSSESSIVE_RE.sub(POSSESSIVE_TOKEN, s)


def base_form(s: str) -> str:
    # "i'll" must expand before folding turns it into "ill"
    s = fold_text(expand_contractions(_unfold(s)))
    return _collapse(normalize_numbers(expand_contractions(s)))


def full_form(s: str) -> str:
    return americanize(base_form(s))


def normalize(s: str) -> str:
    """Every pass in order; the form compared by the combined lane."""
    return neutralize_gender(reorder_adverbs(reorder_time_expressions(full_form(s))))


def fold_tokens(tokens: Iterable[str]) -> list[str]:
    out: list[str] = []
    for token in tokens:
        out.extend(fold_text(token).split())
    return out
