import ast
import logging
import os
from pathlib import Path
from typing import Iterator

from visitorgen.errors import (
    DeclarationParseError,
    GenerationErrorDetails,
    input_root_error,
)
from visitorgen.hierarchy.models import TypeDeclaration

logger = logging.getLogger(__name__)

# ==================================================
# Declaration Extraction
# ==================================================

def _base_name(node: ast.expr) -> str | None:
    if isinstance(node, ast.Name):
        return node.id
    if isinstance(node, ast.Attribute):
        return node.attr
    if isinstance(node, ast.Subscript):
        # Generic bases such as Node[T] name their origin.
        return _base_name(node.value)
    return None


def _module_level_classes(statements: list[ast.stmt]) -> Iterator[ast.ClassDef]:
    for node in statements:
        if isinstance(node, ast.ClassDef):
            yield node
        elif isinstance(node, ast.If):
            yield from _module_level_classes(node.body)
            yield from _module_level_classes(node.orelse)
        elif isinstance(node, ast.Try):
            yield from _module_level_classes(node.body)
            for handler in node.handlers:
                yield from _module_level_classes(handler.body)
            yield from _module_level_classes(node.orelse)
            yield from _module_level_classes(node.finalbody)


def extract_declarations(source: str | bytes, package: str | None, *, prefix: str = "", filename: str = "<source>") -> list[TypeDeclaration]:
    """
    Reads `class Child(Parent)` facts from Python source.

    `source` may be raw bytes, in which case a PEP 263 coding cookie decides
    the encoding. Only module-level classes whose name starts with `prefix`
    are considered, including those under module-level `if` and `try`
    blocks; classes nested in other classes or functions are not.

    The parent is the first base whose name also starts with `prefix`,
    falling back to the first base at all (`object` for a class without
    bases), so a root class that extends something outside the hierarchy
    still reports where it lives.
    """
    try:
        tree = ast.parse(source, filename=filename)
    except (SyntaxError, ValueError) as exc:
        raise DeclarationParseError(
            GenerationErrorDetails(stage="parse", path=filename, original_message=str(exc)),
            exc,
        ) from exc

    declarations: list[TypeDeclaration] = []
    for node in _module_level_classes(tree.body):
        if not node.name.startswith(prefix):
            continue
        bases = [name for name in map(_base_name, node.bases) if name]
        parent = next((name for name in bases if name.startswith(prefix)), bases[0] if bases else "object")
        declarations.append(TypeDeclaration(name=node.name, parent=parent, package=package))
    return declarations


def module_name_for(path: Path, root: Path) -> str:
    """
    Dotted module path of `path` relative to `root`; `pkg/__init__.py` is `pkg`.
    """
    relative = path.relative_to(root).with_suffix("")
    parts = list(relative.parts)
    if parts and parts[-1] == "__init__":
        parts.pop()
    return ".".join(parts)

# ==================================================
# Source Tree Discovery
# ==================================================

def _source_files(input_root: Path, pattern: str) -> Iterator[Path]:
    for path in sorted(input_root.rglob(pattern)):
        relative = path.relative_to(input_root).parts
        if any(part == "__pycache__" or part.startswith(".") for part in relative[:-1]):
            continue
        if path.is_file():
            yield path


def discover_declarations(input_root: Path, *, prefix: str = "", pattern: str = "*.py") -> Iterator[TypeDeclaration]:
    """
    Walks `input_root` in sorted order and yields the declarations of every
    matching file. Files that cannot be decoded or parsed are logged and
    skipped; a file that cannot be read at all aborts the walk.
    """
    root = Path(input_root)
    if not root.exists():
        raise input_root_error(str(root), "input root does not exist")
    if not root.is_dir():
        raise input_root_error(str(root), "input root is not a directory")
    if not os.access(root, os.R_OK | os.X_OK):
        raise input_root_error(str(root), "input root is not readable")

    for path in _source_files(root, pattern):
        try:
            source = path.read_bytes()
        except OSError as exc:
            raise input_root_error(str(path), f"cannot read source file: {exc}", exc) from exc
        try:
            declarations = extract_declarations(
                source,
                module_name_for(path, root) or None,
                prefix=prefix,
                filename=str(path),
            )
        except DeclarationParseError as exc:
            logger.warning("Skipping %s: %s", path, exc.details.original_message)
            continue
        logger.debug("Read %d declaration(s) from %s", len(declarations), path)
        yield from declarations
