from pathlib import Path

import pytest

from visitorgen.cli import main
from visitorgen.observability import GenerationEvent
from visitorgen.pipeline import run


def test_generated_files_land_in_output_package(shape_sources: Path, shape_settings, tmp_path: Path):
    written = run(shape_sources, tmp_path / "out", shape_settings)
    assert [path.name for path in written] == [
        "shape_visitor_generated.py",
        "shape_visitor_void_generated.py",
    ]
    simple = written[0].read_text()
    assert "from shapes.base import Shape\n" in simple
    assert "from shapes.polygons import Polygon, Triangle, Square\n" in simple
    assert "from shapes.round import Circle\n" in simple


def test_simple_visitor_delegates_one_level_at_a_time(shape_sources, shape_settings, tmp_path, import_generated):
    out = tmp_path / "out"
    run(shape_sources, out, shape_settings)
    generated = import_generated("generated_visitors.shape_visitor_generated", shape_sources, out)
    polygons = import_generated("shapes.polygons")
    round_shapes = import_generated("shapes.round")

    class Describer(generated.ShapeVisitor):
        def visit_Shape(self, shape, data):
            return f"shape:{data}"

        def visit_Polygon(self, polygon, data):
            return f"polygon:{data}"

    describer = Describer()
    assert describer.visit_Triangle(polygons.Triangle(), 3) == "polygon:3"
    assert describer.visit_Square(polygons.Square(), 4) == "polygon:4"
    assert describer.visit_Circle(round_shapes.Circle(), 0) == "shape:0"


def test_simple_visitor_requires_root_override(shape_sources, shape_settings, tmp_path, import_generated):
    out = tmp_path / "out"
    run(shape_sources, out, shape_settings)
    generated = import_generated("generated_visitors.shape_visitor_generated", shape_sources, out)

    with pytest.raises(TypeError):
        generated.ShapeVisitor()


def test_unit_visitor_trampolines_into_one_parameter_methods(shape_sources, shape_settings, tmp_path, import_generated):
    out = tmp_path / "out"
    run(shape_sources, out, shape_settings)
    generated = import_generated("generated_visitors.shape_visitor_void_generated", shape_sources, out)
    polygons = import_generated("shapes.polygons")
    round_shapes = import_generated("shapes.round")

    seen: list[str] = []

    class Recorder(generated.ShapeVisitorVoid):
        def on_Shape(self, shape):
            seen.append(f"shape:{type(shape).__name__}")

        def on_Polygon(self, polygon):
            seen.append(f"polygon:{type(polygon).__name__}")

        def on_Circle(self, circle):
            seen.append("circle")

    recorder = Recorder()
    assert recorder.visit_Polygon(polygons.Polygon(), "ignored") is None
    recorder.on_Triangle(polygons.Triangle())
    # A leaf has no trampoline, so its two-parameter method skips on_Circle.
    recorder.visit_Circle(round_shapes.Circle(), None)
    assert seen == ["polygon:Polygon", "polygon:Triangle", "shape:Circle"]

    # Trampolines exist only where there are children.
    assert getattr(generated.ShapeVisitorVoid.visit_Shape, "__final__", False)
    assert getattr(generated.ShapeVisitorVoid.visit_Polygon, "__final__", False)
    assert "visit_Triangle" not in vars(generated.ShapeVisitorVoid)
    assert "visit_Circle" not in vars(generated.ShapeVisitorVoid)


def test_unit_visitor_requires_one_parameter_root_override(shape_sources, shape_settings, tmp_path, import_generated):
    out = tmp_path / "out"
    run(shape_sources, out, shape_settings)
    generated = import_generated("generated_visitors.shape_visitor_void_generated", shape_sources, out)

    with pytest.raises(TypeError):
        generated.ShapeVisitorVoid()

    class Minimal(generated.ShapeVisitorVoid):
        def on_Shape(self, shape):
            return None

    Minimal()


def test_rerun_overwrites_with_identical_output(shape_sources, shape_settings, tmp_path):
    out = tmp_path / "out"
    first = [path.read_text() for path in run(shape_sources, out, shape_settings)]
    second = [path.read_text() for path in run(shape_sources, out, shape_settings)]
    assert first == second


def test_unreachable_classes_are_not_generated(shape_sources, shape_settings, tmp_path):
    (shape_sources / "shapes" / "stray.py").write_text("class Stray(Unknown):\n    pass\n")
    events: list[GenerationEvent] = []
    written = run(shape_sources, tmp_path / "out", shape_settings, observer=events.append)
    assert all("Stray" not in path.read_text() for path in written)
    assert events[0].declaration_count == 6
    assert events[0].type_count == 5


def test_cli_round_trip(shape_sources, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    code = main([
        str(shape_sources),
        str(tmp_path / "out"),
        "--root-type", "Shape",
        "--simple-visitor-name", "ShapeVisitor",
        "--unit-visitor-name", "ShapeVisitorVoid",
        "--env-file", str(tmp_path / "missing.env"),
    ])
    assert code == 0
    assert (tmp_path / "out" / "visitors" / "shape_visitor_void_generated.py").exists()
    assert capsys.readouterr().err == ""
