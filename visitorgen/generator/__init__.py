from visitorgen.generator.code_writer import CodeWriter
from visitorgen.generator.generated_source import GeneratedSource
from visitorgen.generator.base import AbstractVisitorGenerator
from visitorgen.generator.simple_visitor import SimpleVisitorGenerator
from visitorgen.generator.unit_visitor import UnitVisitorGenerator

__all__ = [
    "AbstractVisitorGenerator",
    "CodeWriter",
    "GeneratedSource",
    "SimpleVisitorGenerator",
    "UnitVisitorGenerator",
]
