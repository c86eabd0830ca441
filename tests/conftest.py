import importlib
import sys
from pathlib import Path
from textwrap import dedent

import pytest

from visitorgen.settings import GeneratorSettings

SHAPE_SOURCES = {
    "shapes/__init__.py": "",
    "shapes/base.py": """
        from abc import ABC


        class Shape(ABC):
            pass
    """,
    "shapes/polygons.py": """
        from shapes.base import Shape


        class Polygon(Shape):
            pass


        class Triangle(Polygon):
            pass


        class Square(Polygon):
            pass
    """,
    "shapes/round.py": """
        from shapes.base import Shape


        class Circle(Shape):
            pass
    """,
}


# Top-level packages the integration tests import from temporary directories.
GENERATED_ROOTS = {"shapes", "generated_visitors"}


@pytest.fixture
def shape_settings() -> GeneratorSettings:
    return GeneratorSettings(
        root_type="Shape",
        simple_visitor_name="ShapeVisitor",
        unit_visitor_name="ShapeVisitorVoid",
        output_package="generated_visitors",
    )


@pytest.fixture
def shape_sources(tmp_path: Path) -> Path:
    """
    Writes a small `shapes` package and returns its source root.
    """
    root = tmp_path / "src"
    for relative, text in SHAPE_SOURCES.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip())
    return root


@pytest.fixture
def import_generated(monkeypatch):
    """
    Puts source and output roots on sys.path and imports generated modules,
    dropping every imported module again after the test.
    """
    before = set(sys.modules)

    def _import(module: str, *roots: Path):
        for root in roots:
            monkeypatch.syspath_prepend(str(root))
        importlib.invalidate_caches()
        return importlib.import_module(module)

    yield _import

    for name in set(sys.modules) - before:
        if name.split(".")[0] in GENERATED_ROOTS:
            del sys.modules[name]
