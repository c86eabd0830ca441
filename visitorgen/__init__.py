__version__ = "0.1.0"

from visitorgen.hierarchy import HierarchyCollector, HierarchySnapshot, TypeDeclaration
from visitorgen.traversal import reachable_types, walk
from visitorgen.generator import (
    AbstractVisitorGenerator,
    CodeWriter,
    GeneratedSource,
    SimpleVisitorGenerator,
    UnitVisitorGenerator,
)
from visitorgen.discovery import discover_declarations, extract_declarations
from visitorgen.settings import GeneratorSettings
from visitorgen.errors import (
    GenerationError,
    InputRootError,
    OutputRootError,
    DeclarationParseError,
)
from visitorgen.observability import (
    GenerationEvent,
    compose_event_observers,
    generation_event_to_dict,
    make_json_event_logger,
)
from visitorgen.pipeline import generate_sources, run

__all__ = [
    "__version__",
    "HierarchyCollector",
    "HierarchySnapshot",
    "TypeDeclaration",
    "reachable_types",
    "walk",
    "AbstractVisitorGenerator",
    "CodeWriter",
    "GeneratedSource",
    "SimpleVisitorGenerator",
    "UnitVisitorGenerator",
    "discover_declarations",
    "extract_declarations",
    "GeneratorSettings",
    "GenerationError",
    "InputRootError",
    "OutputRootError",
    "DeclarationParseError",
    "GenerationEvent",
    "compose_event_observers",
    "generation_event_to_dict",
    "make_json_event_logger",
    "generate_sources",
    "run",
]
