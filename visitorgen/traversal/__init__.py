from visitorgen.traversal.hierarchy_walk import EdgeCallback, reachable_types, walk

__all__ = [
    "EdgeCallback",
    "reachable_types",
    "walk",
]
