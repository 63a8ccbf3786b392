"""Keep pyproject.toml, requirements.lock and the code's imports in step."""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Dict

import tomllib

ROOT = Path(__file__).resolve().parents[1]

_OPERATORS = ("==", ">=", "<=", "~=", "!=", ">", "<", "===")

# Import names that differ from their distribution names.
_DISTRIBUTION_FOR_IMPORT = {"bs4": "beautifulsoup4"}

_FIRST_PARTY = {"cafelatte", "scripts"}


def _split_spec(raw: str) -> str:
    entry = raw.strip().strip(",").strip('"')
    for operator in _OPERATORS:
        if operator in entry:
            name, _ = entry.split(operator, 1)
            return name.strip().split("[")[0]
    return entry.strip().split("[")[0]


def _load_lock_versions(path: Path) -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for line in path.read_text(encoding="utf-8").splitlines():
        stripped = line.strip()
        if not stripped or stripped.startswith(("#", "--")):
            continue
        if "==" not in stripped:
            continue
        name, version = stripped.split("==", 1)
        versions[name.lower()] = version
    return versions


def _declared(groups: bool = True) -> set[str]:
    pyproject = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))
    project = pyproject.get("project", {})
    declared = {_split_spec(entry).lower() for entry in project.get("dependencies", [])}
    if groups:
        for group in project.get("optional-dependencies", {}).values():
            declared.update(_split_spec(entry).lower() for entry in group)
    return declared


def _third_party_imports(*directories: Path) -> set[str]:
    found: set[str] = set()
    for directory in directories:
        for path in directory.rglob("*.py"):
            tree = ast.parse(path.read_text(encoding="utf-8"))
            for node in ast.walk(tree):
                if isinstance(node, ast.Import):
                    names = [alias.name for alias in node.names]
                elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
                    names = [node.module]
                else:
                    continue
                for name in names:
                    top = name.split(".")[0]
                    if top in sys.stdlib_module_names or top in _FIRST_PARTY:
                        continue
                    found.add(_DISTRIBUTION_FOR_IMPORT.get(top, top).lower())
    return found


def test_all_pyproject_dependencies_are_in_lock() -> None:
    lock_versions = _load_lock_versions(ROOT / "requirements.lock")

    missing = []
    for dependency in sorted(_declared()):
        normalised = dependency.replace("_", "-")
        if dependency not in lock_versions and normalised not in lock_versions:
            missing.append(dependency)

    assert (
        not missing
    ), "requirements.lock is missing pinned versions for: " + ", ".join(missing)


def test_runtime_imports_are_declared() -> None:
    imported = _third_party_imports(ROOT / "src", ROOT / "scripts")
    undeclared = sorted(imported - _declared(groups=False))
    assert not undeclared, "pyproject.toml does not declare: " + ", ".join(undeclared)
