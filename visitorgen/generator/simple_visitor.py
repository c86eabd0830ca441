from visitorgen.generator.base import CONTEXT_TYPE, RESULT_TYPE, AbstractVisitorGenerator
from visitorgen.generator.code_writer import CodeWriter
from visitorgen.traversal.hierarchy_walk import walk

# ==================================================
# Simple Visitor Generator
# ==================================================

class SimpleVisitorGenerator(AbstractVisitorGenerator):
    """
    Emits the generic visitor: one `visit` method per type taking the node and
    a context value, each defaulting to its parent's method.
    """

    @property
    def class_name(self) -> str:
        return self.settings.simple_visitor_name

    @property
    def module_name(self) -> str:
        return self.settings.simple_module_name

    def _generate_content(self, writer: CodeWriter) -> None:
        self._generate_helper_imports(writer)
        self._generate_default_imports(writer)
        writer.blank(2)
        writer.line(f'{RESULT_TYPE} = _typing.TypeVar("{RESULT_TYPE}")')
        writer.line(f'{CONTEXT_TYPE} = _typing.TypeVar("{CONTEXT_TYPE}")')
        writer.blank(2)
        writer.line(f"class {self.class_name}(_abc.ABC, _typing.Generic[{RESULT_TYPE}, {CONTEXT_TYPE}]):")
        with writer.indented():
            root = self.snapshot.root
            self._generate_function(
                writer,
                self._method_name(root),
                parameters={
                    self._parameter_name(root): root,
                    self.settings.context_parameter: CONTEXT_TYPE,
                },
                return_type=RESULT_TYPE,
            )
            walk(self.snapshot, root, lambda parent, element: self._generate_visit(writer, element, parent))

    def _generate_visit(self, writer: CodeWriter, type_name: str, parent: str) -> None:
        parameter = self._parameter_name(type_name)
        context = self.settings.context_parameter
        call = self._generate_call(self._method_name(parent), [parameter, context])
        self._generate_function(
            writer,
            self._method_name(type_name),
            parameters={parameter: type_name, context: CONTEXT_TYPE},
            return_type=RESULT_TYPE,
            body=lambda w: w.line(f"return {call}"),
        )
