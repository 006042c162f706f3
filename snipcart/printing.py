import json
import sys


def json_print(obj) -> None:
    try:
        print(json.dumps(obj, ensure_ascii=False, indent=2))
    except (TypeError, ValueError):
        print(json.dumps(obj, ensure_ascii=True, indent=2, default=str))


def print_error(message: str) -> None:
    print(f" {message}", file=sys.stderr)
