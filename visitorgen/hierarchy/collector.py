import logging
from typing import Iterable

from visitorgen.hierarchy.models import HierarchySnapshot, TypeDeclaration

logger = logging.getLogger(__name__)

# ==================================================
# Hierarchy Collector
# ==================================================

class HierarchyCollector:
    """
    Builds the parent -> children adjacency of a type hierarchy from scattered
    declarations.

    Declarations may arrive in any order; a parent is created the first time a
    child names it. When a type is declared twice under different parents the
    last declaration wins.
    """

    def __init__(self, root: str) -> None:
        if not root:
            raise ValueError("root must be a non-empty type name")
        self.root = root
        self._children: dict[str, list[str]] = {}
        self._parents: dict[str, str] = {}
        self._packages: dict[str, None] = {}
        self._origins: dict[str, str] = {}

    def record(self, declaration: TypeDeclaration) -> None:
        """
        Records one declaration.
        """
        if declaration.package:
            self._packages.setdefault(declaration.package, None)
            self._origins[declaration.name] = declaration.package

        if declaration.name == self.root:
            # The root has no parent; only its origin matters.
            return
        if declaration.name == declaration.parent:
            logger.warning("Ignoring %s: a type cannot extend itself", declaration.name)
            return

        previous = self._parents.get(declaration.name)
        if previous is not None and previous != declaration.parent:
            logger.debug(
                "%s re-declared under %s, dropping it from %s",
                declaration.name,
                declaration.parent,
                previous,
            )
            self._detach(declaration.name, previous)

        self._parents[declaration.name] = declaration.parent
        siblings = self._children.setdefault(declaration.parent, [])
        if declaration.name not in siblings:
            siblings.append(declaration.name)

    def record_all(self, declarations: Iterable[TypeDeclaration]) -> "HierarchyCollector":
        for declaration in declarations:
            self.record(declaration)
        return self

    def snapshot(self) -> HierarchySnapshot:
        """
        Returns an immutable copy of everything recorded so far.
        """
        snapshot = HierarchySnapshot(
            root=self.root,
            children={parent: tuple(children) for parent, children in self._children.items()},
            used_packages=tuple(self._packages),
            origins=dict(self._origins),
        )
        if logger.isEnabledFor(logging.DEBUG):
            unreachable = self._unreachable()
            if unreachable:
                logger.debug(
                    "%d declared type(s) are not reachable from %s and will not be generated: %s",
                    len(unreachable),
                    self.root,
                    ", ".join(sorted(unreachable)),
                )
        return snapshot

    def _detach(self, name: str, parent: str) -> None:
        siblings = self._children[parent]
        siblings.remove(name)
        if not siblings:
            del self._children[parent]

    def _unreachable(self) -> set[str]:
        seen: set[str] = set()
        pending = [self.root]
        while pending:
            current = pending.pop()
            for child in self._children.get(current, ()):
                if child not in seen:
                    seen.add(child)
                    pending.append(child)
        return set(self._parents) - seen
