from dotenv import load_dotenv
import logging
import os
import sys

from visitorgen.hierarchy.models import TypeDeclaration
from visitorgen.observability import make_json_event_logger
from visitorgen.pipeline import generate_sources, run
from visitorgen.settings import GeneratorSettings

def main():
    # Load VISITORGEN_* variables from a .env file if there is one
    load_dotenv()

    events_logger = logging.getLogger("visitorgen.events")
    events_logger.setLevel(logging.INFO)
    events_logger.addHandler(logging.StreamHandler())

    # Generate straight from declarations, without reading any sources
    settings = GeneratorSettings(
        root_type="Expression",
        simple_visitor_name="ExpressionVisitor",
        unit_visitor_name="ExpressionVisitorVoid",
        output_package="calc.visitors",
    )
    declarations = [
        TypeDeclaration("Literal", "Expression", "calc.nodes"),
        TypeDeclaration("BinaryOperation", "Expression", "calc.nodes"),
        TypeDeclaration("Addition", "BinaryOperation", "calc.nodes"),
        TypeDeclaration("Multiplication", "BinaryOperation", "calc.nodes"),
    ]
    for source in generate_sources(declarations, settings):
        print(f"--- {source.filename} ({source.method_count} methods)")
        print(source.text)

    # Or scan a source tree given on the command line
    if len(sys.argv) == 3:
        written = run(
            sys.argv[1],
            sys.argv[2],
            GeneratorSettings.from_env(),
            observer=make_json_event_logger(logger=events_logger),
        )
        for path in written:
            print(f"Wrote {path}")
    else:
        print(f"Set VISITORGEN_ROOT_TYPE and pass <input_root> <output_root> to scan sources ({os.getcwd()})")

if __name__ == "__main__":
    main()
