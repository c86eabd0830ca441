import logging
from pathlib import Path
import time
from typing import Iterable

from visitorgen.discovery.python_source import discover_declarations
from visitorgen.errors import GenerationError
from visitorgen.generator.generated_source import GeneratedSource
from visitorgen.generator.simple_visitor import SimpleVisitorGenerator
from visitorgen.generator.unit_visitor import UnitVisitorGenerator
from visitorgen.hierarchy.collector import HierarchyCollector
from visitorgen.hierarchy.models import HierarchySnapshot, TypeDeclaration
from visitorgen.observability import EventObserveHook, make_event
from visitorgen.output.writer import package_directory, write_atomically
from visitorgen.settings import GeneratorSettings
from visitorgen.traversal.hierarchy_walk import reachable_types

logger = logging.getLogger(__name__)

# ==================================================
# Generation Pipeline
# ==================================================

def collect_hierarchy(declarations: Iterable[TypeDeclaration], settings: GeneratorSettings) -> HierarchySnapshot:
    return HierarchyCollector(settings.root_type).record_all(declarations).snapshot()


def generate_from_snapshot(snapshot: HierarchySnapshot, settings: GeneratorSettings) -> list[GeneratedSource]:
    """
    Renders both visitors; the simple visitor comes first since the unit
    visitor extends it.
    """
    return [
        SimpleVisitorGenerator(snapshot, settings).generate(),
        UnitVisitorGenerator(snapshot, settings).generate(),
    ]


def generate_sources(
    declarations: Iterable[TypeDeclaration],
    settings: GeneratorSettings | None = None,
) -> list[GeneratedSource]:
    """
    Collects `declarations` and renders both visitors in memory.
    """
    settings = settings or GeneratorSettings()
    return generate_from_snapshot(collect_hierarchy(declarations, settings), settings)


def run(
    input_root: Path | str,
    output_root: Path | str,
    settings: GeneratorSettings | None = None,
    *,
    observer: EventObserveHook | None = None,
) -> list[Path]:
    """
    Discovers declarations under `input_root` and writes both visitor modules
    into the output package below `output_root`, replacing existing files.
    """
    settings = settings or GeneratorSettings()
    started = time.perf_counter()

    def _emit(event: str, *, success: bool = True, **kwargs) -> None:
        if observer is not None:
            observer(make_event(event, success=success, **kwargs))

    try:
        declarations = list(
            discover_declarations(
                Path(input_root),
                prefix=settings.type_prefix,
                pattern=settings.source_pattern,
            )
        )
        snapshot = collect_hierarchy(declarations, settings)
        type_count = len(reachable_types(snapshot))
        logger.info(
            "Collected %d declaration(s); %d type(s) reachable from %s",
            len(declarations),
            type_count,
            snapshot.root,
        )
        _emit(
            "declarations.collected",
            path=str(input_root),
            declaration_count=len(declarations),
            type_count=type_count,
        )

        sources = generate_from_snapshot(snapshot, settings)
        for source in sources:
            _emit("visitor.generated", visitor=source.class_name, method_count=source.method_count)

        directory = package_directory(Path(output_root), settings.output_package)
        written: list[Path] = []
        for source in sources:
            path = write_atomically(directory / source.filename, source.text)
            written.append(path)
            _emit("file.written", visitor=source.class_name, path=str(path))
    except GenerationError as exc:
        _emit(
            "run.failed",
            success=False,
            path=exc.details.path,
            duration_ms=(time.perf_counter() - started) * 1000,
            error_type=type(exc).__name__,
            error_message=exc.details.original_message,
        )
        raise

    logger.info("Generated %d visitor module(s) in %s", len(written), directory)
    return written
