from visitorgen.discovery.python_source import (
    discover_declarations,
    extract_declarations,
    module_name_for,
)

__all__ = [
    "discover_declarations",
    "extract_declarations",
    "module_name_for",
]
