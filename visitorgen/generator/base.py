from abc import ABC, abstractmethod
from typing import Callable, Iterable, Mapping

from visitorgen.generator.code_writer import CodeWriter
from visitorgen.generator.generated_source import GeneratedSource
from visitorgen.hierarchy.models import HierarchySnapshot
from visitorgen import naming
from visitorgen.settings import GeneratorSettings
from visitorgen.traversal.hierarchy_walk import reachable_types

GENERATED_HEADER = "# Generated by visitorgen. Do not edit by hand."

# Longest single-line import before it is wrapped in parentheses.
_MAX_IMPORT_WIDTH = 88

BodyWriter = Callable[[CodeWriter], None]

# Names generated modules bind for their own use, kept apart from hierarchy types.
HELPER_IMPORTS = ("import abc as _abc", "import typing as _typing")
RESULT_TYPE = "_R"
CONTEXT_TYPE = "_D"
BASE_MODULE_ALIAS = "_base"

# ==================================================
# Base Visitor Generator
# ==================================================

class AbstractVisitorGenerator(ABC):
    """
    Shared machinery for emitting one visitor module from a hierarchy snapshot.
    """

    def __init__(self, snapshot: HierarchySnapshot, settings: GeneratorSettings | None = None) -> None:
        self.snapshot = snapshot
        self.settings = settings or GeneratorSettings(root_type=snapshot.root)
        if self.settings.root_type != snapshot.root:
            raise ValueError(
                f"Snapshot is rooted at {snapshot.root!r} but settings expect {self.settings.root_type!r}"
            )
        self._reachable = reachable_types(snapshot)
        if self.class_name in self._reachable:
            raise ValueError(f"Visitor class name {self.class_name!r} collides with a hierarchy type")
        self._methods_written = 0

    @property
    @abstractmethod
    def class_name(self) -> str:
        pass

    @property
    @abstractmethod
    def module_name(self) -> str:
        pass

    @abstractmethod
    def _generate_content(self, writer: CodeWriter) -> None:
        """
        Writes everything after the `__future__` import.
        """
        pass

    def generate(self) -> GeneratedSource:
        """
        Renders the visitor module into a complete in-memory buffer.
        """
        writer = CodeWriter(self.settings.indent)
        self._methods_written = 0
        writer.line(GENERATED_HEADER)
        writer.line("from __future__ import annotations")
        writer.blank()
        self._generate_content(writer)
        return GeneratedSource(
            class_name=self.class_name,
            module_name=self.module_name,
            text=writer.getvalue(),
            method_count=self._methods_written,
        )

    # --------------------------------------------------
    # Naming
    # --------------------------------------------------

    def _method_name(self, type_name: str, verb: str | None = None) -> str:
        return naming.method_name(type_name, self.settings.type_prefix, verb or self.settings.visit_verb)

    def _parameter_name(self, type_name: str) -> str:
        if type_name == self.snapshot.root and self.settings.root_parameter:
            return self.settings.root_parameter
        return naming.parameter_name(
            type_name,
            self.settings.type_prefix,
            reserved=frozenset({self.settings.context_parameter}),
        )

    # --------------------------------------------------
    # Emission helpers
    # --------------------------------------------------

    def _generate_function(
        self,
        writer: CodeWriter,
        name: str,
        parameters: Mapping[str, str],
        return_type: str,
        *,
        final: bool = False,
        body: BodyWriter | None = None,
    ) -> None:
        """
        Writes one method. A method without a body is abstract.
        """
        if self._methods_written:
            writer.blank()
        self._methods_written += 1

        if body is None:
            writer.line("@_abc.abstractmethod")
        elif final:
            writer.line("@_typing.final")
        signature = ", ".join(["self", *(f"{param}: {annotation}" for param, annotation in parameters.items())])
        writer.line(f"def {name}({signature}) -> {return_type}:")
        with writer.indented():
            if body is None:
                writer.line("...")
            else:
                body(writer)

    @staticmethod
    def _generate_call(name: str, args: Iterable[str]) -> str:
        return f"self.{name}({', '.join(args)})"

    def _generate_helper_imports(self, writer: CodeWriter) -> None:
        for line in HELPER_IMPORTS:
            writer.line(line)

    def _generate_default_imports(self, writer: CodeWriter, extra: Iterable[str] = ()) -> None:
        """
        Imports every reachable hierarchy type from the package that declared it.
        """
        reachable = set(self._reachable)
        by_package: dict[str, list[str]] = {package: [] for package in self.snapshot.used_packages}
        for type_name, package in self.snapshot.origins.items():
            if type_name in reachable and package in by_package:
                by_package[package].append(type_name)

        lines: list[str] = []
        for package, names in by_package.items():
            if names:
                lines.extend(self._import_lines(package, names))
        lines.extend(extra)
        if not lines:
            return
        writer.blank()
        for line in lines:
            writer.line(line)

    def _import_lines(self, package: str, names: list[str]) -> list[str]:
        single = f"from {package} import {', '.join(names)}"
        if len(single) <= _MAX_IMPORT_WIDTH:
            return [single]
        return [
            f"from {package} import (",
            *(f"{self.settings.indent}{name}," for name in names),
            ")",
        ]
