"""Lightweight layering audit for voscope subpackage imports.

Scans Python files under src/voscope/ and reports subpackage-to-subpackage
import edges. Lower layers (utils, config, models, processing) must not import
higher ones (services, gui); --strict turns the report into a CI gate.
"""

from __future__ import annotations

import argparse
import ast
from collections import defaultdict
from pathlib import Path
from typing import DefaultDict, Iterable

PACKAGE_NAME = "voscope"
LAYERS = ("utils", "config", "models", "processing", "services", "gui")


def _default_disallow() -> set[tuple[str, str]]:
    disallowed: set[tuple[str, str]] = set()
    for index, src in enumerate(LAYERS):
        for dest in LAYERS[index + 1:]:
            disallowed.add((src, dest))
    return disallowed


DEFAULT_DISALLOW = _default_disallow()


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        return path.read_text(encoding="latin-1")


def _iter_imported_layers(tree: ast.AST) -> Iterable[str]:
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                parts = alias.name.split(".")
                if len(parts) > 1 and parts[0] == PACKAGE_NAME:
                    yield parts[1]
        elif isinstance(node, ast.ImportFrom):
            module = node.module or ""
            if node.level == 0:
                parts = module.split(".")
                if len(parts) > 1 and parts[0] == PACKAGE_NAME:
                    yield parts[1]
            elif node.level == 2 and module:
                yield module.split(".", 1)[0]


def _find_layer(path: Path, package_root: Path) -> str | None:
    try:
        rel = path.relative_to(package_root)
    except ValueError:
        return None
    if len(rel.parts) < 2:
        return None
    top = rel.parts[0]
    return top if top in LAYERS else None


def collect_edges(package_root: Path) -> DefaultDict[tuple[str, str], list[str]]:
    """Map (src layer, dest layer) to the files that create the edge."""
    edges: DefaultDict[tuple[str, str], list[str]] = defaultdict(list)
    for path in sorted(package_root.rglob("*.py")):
        layer = _find_layer(path, package_root)
        if not layer:
            continue
        tree = ast.parse(_read_text(path))
        for dest in _iter_imported_layers(tree):
            if dest in LAYERS and dest != layer:
                edges[(layer, dest)].append(str(path.relative_to(package_root)))
    return edges


def find_violations(edges, disallowed: set[tuple[str, str]] = DEFAULT_DISALLOW) -> list[str]:
    return [f"{src} -> {dest}" for src, dest in sorted(edges) if (src, dest) in disallowed]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Report voscope layer import edges")
    parser.add_argument("--show-files", action="store_true", help="Show example files per edge")
    parser.add_argument("--max-files", type=int, default=5, help="Max files per edge to show")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit 1 if a lower layer imports a higher one",
    )
    args = parser.parse_args(argv)

    root = Path(__file__).resolve().parents[1]
    package_root = root / "src" / PACKAGE_NAME
    if not package_root.exists():
        raise SystemExit(f"src/{PACKAGE_NAME}/ directory not found")

    edges = collect_edges(package_root)

    print("Layering audit")
    print(f"Layers (low to high): {', '.join(LAYERS)}")
    print("Edges:")
    for (src, dest), files in sorted(edges.items()):
        print(f"  {src} -> {dest} ({len(files)})")
        if args.show_files:
            for file_path in files[: args.max_files]:
                print(f"    - {file_path}")
            if len(files) > args.max_files:
                print(f"    ... {len(files) - args.max_files} more")

    violations = find_violations(edges)
    if violations:
        print("Disallowed edges:")
        for entry in violations:
            print(f"  {entry}")

    if args.strict and violations:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
