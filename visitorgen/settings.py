from dataclasses import dataclass
import keyword
import os

from dotenv import load_dotenv

from visitorgen.naming import snake_case

# ==================================================
# Generator Settings
# ==================================================

ENV_PREFIX = "VISITORGEN_"


@dataclass(frozen=True)
class GeneratorSettings:
    """
    Everything that shapes the generated visitors apart from the hierarchy itself.
    """

    root_type: str = "Node"
    type_prefix: str = ""
    visit_verb: str = "visit_"
    unit_verb: str = "on_"
    simple_visitor_name: str = "NodeVisitor"
    unit_visitor_name: str = "NodeVisitorVoid"
    output_package: str = "visitors"
    context_parameter: str = "data"
    root_parameter: str | None = None
    indent: str = "    "
    source_pattern: str = "*.py"

    def __post_init__(self) -> None:
        if not self.root_type.isidentifier():
            raise ValueError("root_type must be a valid identifier")
        if self.type_prefix and not self.type_prefix.isidentifier():
            raise ValueError("type_prefix must be empty or a valid identifier")
        for label, verb in (("visit_verb", self.visit_verb), ("unit_verb", self.unit_verb)):
            if not verb.isidentifier():
                raise ValueError(f"{label} must be a valid identifier prefix")
        if self.visit_verb == self.unit_verb:
            raise ValueError("visit_verb and unit_verb must differ")
        for label, name in (
            ("simple_visitor_name", self.simple_visitor_name),
            ("unit_visitor_name", self.unit_visitor_name),
        ):
            if not name.isidentifier() or keyword.iskeyword(name):
                raise ValueError(f"{label} must be a valid class name")
        if self.simple_visitor_name == self.unit_visitor_name:
            raise ValueError("simple_visitor_name and unit_visitor_name must differ")
        if not all(part.isidentifier() for part in self.output_package.split(".")):
            raise ValueError("output_package must be a dotted module path")
        if not self.context_parameter.isidentifier() or keyword.iskeyword(self.context_parameter):
            raise ValueError("context_parameter must be a valid parameter name")
        if self.root_parameter is not None and (
            not self.root_parameter.isidentifier() or keyword.iskeyword(self.root_parameter)
        ):
            raise ValueError("root_parameter must be a valid parameter name")
        if not self.indent or self.indent.strip():
            raise ValueError("indent must be non-empty whitespace")

    @property
    def simple_module_name(self) -> str:
        return f"{snake_case(self.simple_visitor_name)}_generated"

    @property
    def unit_module_name(self) -> str:
        return f"{snake_case(self.unit_visitor_name)}_generated"

    @classmethod
    def from_env(cls, env_file: str | None = None) -> "GeneratorSettings":
        """
        Builds settings from VISITORGEN_* environment variables, loading a .env
        file first. Unset variables keep their defaults.
        """
        load_dotenv(env_file)
        defaults = cls()
        return cls(
            root_type=os.getenv(f"{ENV_PREFIX}ROOT_TYPE", defaults.root_type),
            type_prefix=os.getenv(f"{ENV_PREFIX}TYPE_PREFIX", defaults.type_prefix),
            visit_verb=os.getenv(f"{ENV_PREFIX}VISIT_VERB", defaults.visit_verb),
            unit_verb=os.getenv(f"{ENV_PREFIX}UNIT_VERB", defaults.unit_verb),
            simple_visitor_name=os.getenv(f"{ENV_PREFIX}SIMPLE_VISITOR_NAME", defaults.simple_visitor_name),
            unit_visitor_name=os.getenv(f"{ENV_PREFIX}UNIT_VISITOR_NAME", defaults.unit_visitor_name),
            output_package=os.getenv(f"{ENV_PREFIX}OUTPUT_PACKAGE", defaults.output_package),
            context_parameter=os.getenv(f"{ENV_PREFIX}CONTEXT_PARAMETER", defaults.context_parameter),
            root_parameter=os.getenv(f"{ENV_PREFIX}ROOT_PARAMETER") or defaults.root_parameter,
            source_pattern=os.getenv(f"{ENV_PREFIX}SOURCE_PATTERN", defaults.source_pattern),
        )
