import argparse
import json
import sys

from answer_eval.validation import validate_exercises


def _load_json(path: str):
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def validate(path: str) -> int:
    issues = validate_exercises(_load_json(path))
    errors = 0
    for issue in issues:
        label = "ERROR" if issue.severity == "error" else "WARNING"
        where = f"exercise {issue.exercise_index}"
        if issue.exercise_type:
            where += f" ({issue.exercise_type})"
        print(f"{label}: {where}: {issue.message}")
        if issue.severity == "error":
            errors += 1
    if errors:
        return 1
    print("OK")
    return 0


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("path", help="exercises JSON: a list or an object with an 'exercises' list")
    args = parser.parse_args(argv)
    return validate(args.path)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
