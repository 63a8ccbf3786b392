"""Validate the content documents in the data directory.

Each document is checked against its JSON Schema, then against the models
for the rules a schema cannot express, such as unique location slugs.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from cafelatte.config import DOCUMENT_NAMES, Settings
from cafelatte.models import parse_document
from cafelatte.schemas import validation_errors


def document_problems(name: str, data: object) -> list[str]:
    problems = []
    for error in validation_errors(name, data):
        where = "/".join(str(part) for part in error.absolute_path) or "(root)"
        problems.append(f"{where}: {error.message}")
    if problems:
        return problems
    try:
        parse_document(name, data)
    except ValidationError as e:
        problems.extend(err["msg"].removeprefix("Value error, ") for err in e.errors())
    return problems


def check_document(data_dir: Path, name: str) -> bool:
    path = data_dir / f"{name}.json"
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        print(f"✗ {path} cannot be read:", e)
        return False

    problems = document_problems(name, data)
    if not problems:
        print(f"✓ {path} is valid.")
        return True
    print(f"✗ {path} failed validation:")
    for problem in problems:
        print("  →", problem)
    return False


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--data-dir", type=Path, default=Settings.from_env().data_dir)
    parser.add_argument("names", nargs="*", default=list(DOCUMENT_NAMES))
    args = parser.parse_args(argv)

    results = [check_document(args.data_dir, name) for name in args.names]
    return 0 if all(results) else 1


if __name__ == "__main__":
    sys.exit(main())
