from visitorgen.hierarchy.models import HierarchySnapshot, TypeDeclaration
from visitorgen.hierarchy.collector import HierarchyCollector

__all__ = [
    "HierarchyCollector",
    "HierarchySnapshot",
    "TypeDeclaration",
]
