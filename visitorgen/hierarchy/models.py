from dataclasses import dataclass, field

# ==================================================
# Declarations
# ==================================================

@dataclass(frozen=True)
class TypeDeclaration:
    """
    A single "type extends parent" fact read from a source file.
    """
    name: str
    parent: str
    package: str | None = None

# ==================================================
# Hierarchy Snapshot
# ==================================================

@dataclass(frozen=True)
class HierarchySnapshot:
    """
    The read-only result of collecting declarations.

    `children` maps every type that has at least one child to its children in
    declaration order. The root has no parent and need not be declared.
    """
    root: str
    children: dict[str, tuple[str, ...]] = field(default_factory=dict)
    used_packages: tuple[str, ...] = ()
    origins: dict[str, str] = field(default_factory=dict)

    def children_of(self, name: str) -> tuple[str, ...]:
        return self.children.get(name, ())

    def has_children(self, name: str) -> bool:
        return bool(self.children.get(name))

    def parent_of(self, name: str) -> str | None:
        for parent, children in self.children.items():
            if name in children:
                return parent
        return None

    def package_of(self, name: str) -> str | None:
        return self.origins.get(name)
