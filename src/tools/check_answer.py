import argparse
import asyncio
import dataclasses
import json
import logging
import sys

from dotenv import load_dotenv

from answer_eval.config import load_settings
from answer_eval.exercises import (
    ListeningItem,
    TypingItem,
    WordBubblesItem,
    check_dictation,
    check_translation,
    check_word_bubbles,
)
from answer_eval.judge import build_judge
from answer_eval.types import EXERCISE_LISTENING, EXERCISE_TYPES, EXERCISE_WORD_BUBBLES


def _selected_words(args) -> list[str]:
    return list(args.words) if args.words else args.answer.split()


async def _check(args, settings) -> dict:
    judge = None if args.no_judge else build_judge(settings)
    kwargs = dict(judge=judge, lesson_kind=args.lesson_kind, thresholds=settings.thresholds)
    if args.type == EXERCISE_WORD_BUBBLES:
        item = WordBubblesItem(question=args.prompt, correct_answer=args.expected)
        verdict = await check_word_bubbles(_selected_words(args), item, **kwargs)
    elif args.type == EXERCISE_LISTENING:
        item = ListeningItem(audio_text=args.prompt or args.expected, correct_answer=args.expected)
        verdict = await check_dictation(args.answer, item, **kwargs)
    else:
        item = TypingItem(question=args.prompt, correct_answer=args.expected)
        verdict = await check_translation(args.answer, item, **kwargs)
    return dataclasses.asdict(verdict)


def main(argv: list[str]) -> int:
    load_dotenv()
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = argparse.ArgumentParser(description="Evaluate one learner answer.")
    parser.add_argument("answer", nargs="?", default="", help="learner answer")
    parser.add_argument("--expected", required=True)
    parser.add_argument("--type", choices=EXERCISE_TYPES, default="translate-typing")
    parser.add_argument("--prompt", default="", help="sentence shown or played to the learner")
    parser.add_argument("--lesson-kind")
    parser.add_argument("--words", nargs="+", help="word-bubbles: selected words in order")
    parser.add_argument("--no-judge", action="store_true", default=False)
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except RuntimeError as exc:
        print(f"ERROR: {exc}")
        return 1
    if args.type == EXERCISE_WORD_BUBBLES and not any(w.strip() for w in _selected_words(args)):
        print("ERROR: word-bubbles answer needs at least one word")
        return 1
    result = asyncio.run(_check(args, settings))
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
