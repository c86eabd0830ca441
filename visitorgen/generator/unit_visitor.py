from visitorgen.generator.base import BASE_MODULE_ALIAS, AbstractVisitorGenerator
from visitorgen.generator.code_writer import CodeWriter
from visitorgen.traversal.hierarchy_walk import walk

# ==================================================
# Unit Visitor Generator
# ==================================================

class UnitVisitorGenerator(AbstractVisitorGenerator):
    """
    Emits the void visitor: a subclass of the simple visitor fixed to `None`
    results and `None` context.

    Every type gets a one-parameter method named with the unit verb. Every type
    that has children also gets a final two-parameter override of the
    inherited visit method that forwards to its one-parameter method.
    """

    @property
    def class_name(self) -> str:
        return self.settings.unit_visitor_name

    @property
    def module_name(self) -> str:
        return self.settings.unit_module_name

    def _generate_content(self, writer: CodeWriter) -> None:
        self._generate_helper_imports(writer)
        base_import = (
            f"from {self.settings.output_package} "
            f"import {self.settings.simple_module_name} as {BASE_MODULE_ALIAS}"
        )
        self._generate_default_imports(writer, extra=[base_import])
        writer.blank(2)
        base_class = f"{BASE_MODULE_ALIAS}.{self.settings.simple_visitor_name}"
        writer.line(f"class {self.class_name}({base_class}[None, None]):")
        with writer.indented():
            root = self.snapshot.root
            self._generate_function(
                writer,
                self._unit_method_name(root),
                parameters={self._parameter_name(root): root},
                return_type="None",
            )
            walk(self.snapshot, root, lambda parent, element: self._generate_visit(writer, element, parent))

            # Trampolines follow the order parents were recorded in, not hierarchy order.
            reachable = set(self._reachable)
            for type_name in self.snapshot.children:
                if type_name in reachable and self.snapshot.has_children(type_name):
                    self._generate_trampoline_visit(writer, type_name)

    def _unit_method_name(self, type_name: str) -> str:
        return self._method_name(type_name, self.settings.unit_verb)

    def _generate_visit(self, writer: CodeWriter, type_name: str, parent: str) -> None:
        parameter = self._parameter_name(type_name)
        call = self._generate_call(self._unit_method_name(parent), [parameter])
        self._generate_function(
            writer,
            self._unit_method_name(type_name),
            parameters={parameter: type_name},
            return_type="None",
            body=lambda w: w.line(call),
        )

    def _generate_trampoline_visit(self, writer: CodeWriter, type_name: str) -> None:
        parameter = self._parameter_name(type_name)
        call = self._generate_call(self._unit_method_name(type_name), [parameter])
        self._generate_function(
            writer,
            self._method_name(type_name),
            parameters={parameter: type_name, self.settings.context_parameter: "None"},
            return_type="None",
            final=True,
            body=lambda w: w.line(call),
        )
