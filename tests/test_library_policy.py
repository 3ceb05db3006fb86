from __future__ import annotations

import ast
from pathlib import Path

import pytest


def _repo_root() -> Path:
    return Path(__file__).resolve().parents[1]


def _library_modules() -> list[Path]:
    return sorted((_repo_root() / "src" / "dekit").rglob("*.py"))


def _call_name(node: ast.Call) -> str | None:
    func = node.func
    if isinstance(func, ast.Name):
        return func.id
    if isinstance(func, ast.Attribute):
        if isinstance(func.value, ast.Name):
            return f"{func.value.id}.{func.attr}"
        return func.attr
    return None


def _calls(path: Path) -> list[tuple[int, str]]:
    rel_path = path.relative_to(_repo_root()).as_posix()
    try:
        tree = ast.parse(path.read_text(encoding="utf-8-sig"))
    except SyntaxError as exc:  # pragma: no cover - should not happen
        raise AssertionError(f"Failed to parse {rel_path}: {exc}") from exc
    found = []
    for node in ast.walk(tree):
        if isinstance(node, ast.Call):
            name = _call_name(node)
            if name is not None:
                found.append((getattr(node, "lineno", 0), name))
    return found


def test_library_sources_exist() -> None:
    assert _library_modules(), "expected dekit sources under src/dekit"


@pytest.mark.parametrize(
    "forbidden, label",
    [
        ({"logging.basicConfig", "basicConfig"}, "logging.basicConfig"),
        ({"print", "pprint", "pprint.pprint"}, "print()"),
    ],
)
def test_library_policy(forbidden: set[str], label: str) -> None:
    violations: list[str] = []
    for path in _library_modules():
        rel_path = path.relative_to(_repo_root()).as_posix()
        for lineno, name in _calls(path):
            if name in forbidden:
                violations.append(f"{rel_path}:{lineno}: {name}")

    if violations:
        msg = [f"{label} is forbidden in library modules:"]
        msg.extend(f"- {item}" for item in sorted(violations))
        raise AssertionError("\n".join(msg))
