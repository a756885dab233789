from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int

def tcr_root() -> Path:
    return Path(__file__).resolve().parents[2]

def iter_source_files() -> list[Path]:
    """Package sources, tests excluded."""
    root = tcr_root()
    files: list[Path] = []
    for path in sorted(root.rglob("*.py")):
        rel = path.relative_to(root)
        if rel.parts[0] == "test" or "__pycache__" in rel.parts:
            continue
        files.append(path)
    return files

def rel_name(path: Path) -> str:
    return path.relative_to(tcr_root()).as_posix()

def read_tree(path: Path) -> ast.AST:
    return ast.parse(path.read_text(encoding="utf-8"), filename=str(path))

def parse_imports(path: Path) -> list[ImportRef]:
    imports: list[ImportRef] = []
    for node in ast.walk(read_tree(path)):
        if isinstance(node, ast.Import):
            imports.extend(ImportRef(module=alias.name, line=node.lineno) for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            if node.level or node.module is None:
                continue
            imports.append(ImportRef(module=node.module, line=node.lineno))
    return imports

def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")

# Lower layers never import higher ones; same-rank packages stay independent
_RANKS = {
    "core": 0,
    "platform": 1,
    "output": 1,
    "toolchain": 2,
    "sdk": 2,
    "checks": 3,
    "cli": 4,
}

def _package(parts: list[str]) -> str | None:
    if len(parts) < 2 or parts[0] != "tcr":
        return None
    return parts[1] if parts[1] in _RANKS else None

def test_packages_only_import_lower_layers() -> None:
    offenders: list[str] = []

    for file_path in iter_source_files():
        rel = rel_name(file_path)
        own = _package(["tcr", *rel.split("/")])
        if own is None:
            continue

        for item in parse_imports(file_path):
            target = _package(item.module.split("."))
            if target is None or target == own:
                continue
            if _RANKS[target] >= _RANKS[own]:
                offenders.append(f"{rel}:{item.line}: {own} -> '{item.module}'")

    assert not offenders, "layer violations:\n" + "\n".join(offenders)

def test_rich_is_only_used_by_the_console() -> None:
    offenders: list[str] = []
    for file_path in iter_source_files():
        rel = rel_name(file_path)
        if rel == "output/console.py":
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)

def _direct_subprocess_calls(tree: ast.AST) -> list[int]:
    lines: list[int] = []
    for node in ast.walk(tree):
        if not isinstance(node, ast.Call) or not isinstance(node.func, ast.Attribute):
            continue
        func = node.func
        if func.attr in {"run", "check_output", "Popen", "call"} and (
            isinstance(func.value, ast.Name) and func.value.id == "subprocess"
        ):
            lines.append(node.lineno)
    return lines

def test_subprocess_goes_through_platform_process() -> None:
    offenders: list[str] = []
    for file_path in iter_source_files():
        rel = rel_name(file_path)
        if rel == "platform/process.py":
            continue
        for line in _direct_subprocess_calls(read_tree(file_path)):
            offenders.append(f"{rel}:{line}: direct subprocess call")

    assert not offenders, "Subprocess policy violations:\n" + "\n".join(offenders)
