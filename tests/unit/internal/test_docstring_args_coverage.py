from __future__ import annotations

import ast
import re
from pathlib import Path

import pytest

import dideclare

PACKAGE_ROOT = Path(dideclare.__file__).resolve().parent
ARG_ENTRY_RE = re.compile(r"^\s*[*]{0,2}([A-Za-z_][A-Za-z0-9_]*)\s*:")
SECTION_RE = re.compile(r"^[A-Z][A-Za-z ]*:$")


def _documented_args(docstring: str) -> set[str]:
    lines = docstring.splitlines()
    if "Args:" not in (line.strip() for line in lines):
        return set()

    start = [line.strip() for line in lines].index("Args:") + 1
    names: set[str] = set()
    for line in lines[start:]:
        if SECTION_RE.match(line.strip()):
            break
        match = ARG_ENTRY_RE.match(line)
        if match is not None:
            names.add(match.group(1))
    return names


def _parameters(node: ast.FunctionDef) -> list[str]:
    arguments = node.args
    names = [arg.arg for arg in (*arguments.posonlyargs, *arguments.args, *arguments.kwonlyargs)]
    names.extend(arg.arg for arg in (arguments.vararg, arguments.kwarg) if arg is not None)
    return [name for name in names if name not in {"self", "cls"}]


@pytest.mark.parametrize(
    "path",
    sorted(PACKAGE_ROOT.rglob("*.py")),
    ids=lambda path: str(path.relative_to(PACKAGE_ROOT)),
)
def test_documented_callables_describe_every_parameter(path: Path) -> None:
    tree = ast.parse(path.read_text(encoding="utf-8"), filename=str(path))
    missing: list[str] = []

    for node in ast.walk(tree):
        if not isinstance(node, ast.FunctionDef) or node.name.startswith("_"):
            continue
        docstring = ast.get_docstring(node)
        parameters = _parameters(node)
        if docstring is None or not parameters:
            continue

        undocumented = set(parameters) - _documented_args(docstring)
        if undocumented:
            missing.append(f"{node.name}:{node.lineno} {', '.join(sorted(undocumented))}")

    assert missing == []
