from typing import Callable

from visitorgen.hierarchy.models import HierarchySnapshot

EdgeCallback = Callable[[str, str], None]

# ==================================================
# Preorder Hierarchy Walk
# ==================================================

def walk(snapshot: HierarchySnapshot, start: str, visit_edge: EdgeCallback) -> None:
    """
    Walks the hierarchy below `start` depth-first in preorder.

    `visit_edge(parent, child)` is called for each child, in recorded order,
    before any edge of the child's own subtree.
    """
    for child in snapshot.children_of(start):
        visit_edge(start, child)
        walk(snapshot, child, visit_edge)


def reachable_types(snapshot: HierarchySnapshot, start: str | None = None) -> list[str]:
    """
    Returns `start` (the root by default) followed by every type below it, in preorder.
    """
    origin = snapshot.root if start is None else start
    found = [origin]
    walk(snapshot, origin, lambda _parent, child: found.append(child))
    return found
