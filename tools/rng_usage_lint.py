"""
simrand usage lint (static check).

Keeps game code on the shared, seeded stream and its scoped unbound windows, so a seed
replays a run.

Rules:
- bare_unbound: `.enter_unbound()` / `.exit_unbound()` called directly. An exception between
  the two leaves the shared Rng unbound for good; use `with rng.lock_and_seed():` or
  `rng.run_unbound_locked(...)`.
- private_rng: `simrand.Rng(...)` constructed outside simrand. A private instance forks the
  stream; use `simrand.get_rng()`.
- stdlib_random: any call into the `random` module (including names imported from it).
- shared_reset: `reset_rng()` outside tests; it drops the shared instance other systems hold.

simrand/**, tests/** and tools/** are not scanned by default.
"""

from __future__ import annotations

import argparse
import ast
import json
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable


PROJECT_ROOT = Path(__file__).resolve().parents[1]

DEFAULT_EXCLUDE_DIRS = [
    PROJECT_ROOT / "simrand",
    PROJECT_ROOT / "tests",
    PROJECT_ROOT / "tools",
    PROJECT_ROOT / ".venv",
    PROJECT_ROOT / "build",
]

_UNBOUND_METHODS = {"enter_unbound", "exit_unbound"}

_HINTS = {
    "bare_unbound": "use `with rng.lock_and_seed(seed):` or rng.run_unbound_locked(action) instead of {name}()",
    "private_rng": "use simrand.get_rng() instead of constructing a private Rng",
    "stdlib_random": "draw from simrand.get_rng() instead of random.{name}()",
    "shared_reset": "reset_rng() is for tests; re-seed with set_sim_seed() instead",
}


@dataclass(frozen=True, slots=True)
class Finding:
    kind: str
    file: str
    line: int
    col: int
    detail: str


def _display_path(file: Path) -> str:
    try:
        return str(file.resolve().relative_to(PROJECT_ROOT))
    except ValueError:
        return str(file)


def _is_under(path: Path, parent: Path) -> bool:
    try:
        path.resolve().relative_to(parent.resolve())
        return True
    except ValueError:
        return False


def _iter_py_files(roots: Iterable[Path], exclude_dirs: list[Path]) -> list[Path]:
    out: set[Path] = set()
    for root in roots:
        if root.is_file() and root.suffix == ".py":
            out.add(root)
        elif root.is_dir():
            out.update(p for p in root.rglob("*.py") if not any(_is_under(p, ex) for ex in exclude_dirs))
    return sorted(out)


class RngUsageVisitor(ast.NodeVisitor):
    """Tracks how `simrand` and `random` are bound in a module and flags misuse at call sites."""

    def __init__(self, display: str):
        self.display = display
        self.findings: list[Finding] = []
        self.simrand_modules: set[str] = set()
        self.rng_classes: set[str] = set()
        self.reset_funcs: set[str] = set()
        self.random_modules: set[str] = set()
        self.random_funcs: dict[str, str] = {}

    def _flag(self, kind: str, node: ast.AST, name: str = "") -> None:
        self.findings.append(
            Finding(kind, self.display, node.lineno, node.col_offset, _HINTS[kind].format(name=name))
        )

    def visit_Import(self, node: ast.Import) -> None:
        for alias in node.names:
            bound = alias.asname or alias.name.split(".")[0]
            if alias.name == "simrand":
                self.simrand_modules.add(bound)
            elif alias.name == "random":
                self.random_modules.add(bound)

    def visit_ImportFrom(self, node: ast.ImportFrom) -> None:
        module = node.module or ""
        for alias in node.names:
            bound = alias.asname or alias.name
            if module == "random":
                self.random_funcs[bound] = alias.name
            elif module.split(".")[0] == "simrand":
                if alias.name == "Rng":
                    self.rng_classes.add(bound)
                elif alias.name == "reset_rng":
                    self.reset_funcs.add(bound)

    def visit_Call(self, node: ast.Call) -> None:
        func = node.func
        if isinstance(func, ast.Name):
            if func.id in self.rng_classes:
                self._flag("private_rng", node)
            elif func.id in self.reset_funcs:
                self._flag("shared_reset", node)
            elif func.id in self.random_funcs:
                self._flag("stdlib_random", node, self.random_funcs[func.id])
        elif isinstance(func, ast.Attribute):
            owner = func.value.id if isinstance(func.value, ast.Name) else None
            if func.attr in _UNBOUND_METHODS:
                self._flag("bare_unbound", node, func.attr)
            elif owner in self.simrand_modules and func.attr == "Rng":
                self._flag("private_rng", node)
            elif owner in self.simrand_modules and func.attr == "reset_rng":
                self._flag("shared_reset", node)
            elif owner in self.random_modules:
                self._flag("stdlib_random", node, func.attr)
        self.generic_visit(node)


def scan_file(file_path: Path) -> list[Finding]:
    display = _display_path(file_path)
    src = file_path.read_text(encoding="utf-8", errors="replace")
    try:
        tree = ast.parse(src, filename=str(file_path))
    except SyntaxError as e:
        return [Finding("parse_error", display, e.lineno or 0, e.offset or 0, f"SyntaxError: {e.msg}")]

    # Imports are collected first so a use above a late import is still resolved.
    visitor = RngUsageVisitor(display)
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            visitor.visit_Import(node)
        elif isinstance(node, ast.ImportFrom):
            visitor.visit_ImportFrom(node)
    visitor.visit(tree)
    return sorted(visitor.findings, key=lambda f: (f.line, f.col))


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Lint game code for simrand misuse")
    ap.add_argument(
        "--paths",
        nargs="*",
        default=[],
        help="Files or dirs to scan. Default scans the project minus simrand/tests/tools.",
    )
    ap.add_argument("--json", action="store_true", help="Emit machine-readable JSON")
    ns = ap.parse_args(argv)

    roots = [Path(p) for p in ns.paths] if ns.paths else [PROJECT_ROOT]
    findings: list[Finding] = []
    for f in _iter_py_files(roots, DEFAULT_EXCLUDE_DIRS):
        findings.extend(scan_file(f))

    if ns.json:
        print(json.dumps({"findings": [asdict(f) for f in findings]}, indent=2))
    elif not findings:
        print("[rng_usage_lint] PASS: no violations found")
    else:
        print(f"[rng_usage_lint] FAIL: {len(findings)} violation(s)")
        for f in findings:
            print(f"- {f.file}:{f.line}:{f.col} [{f.kind}] {f.detail}")

    return 0 if not findings else 1


if __name__ == "__main__":
    raise SystemExit(main())
