import argparse
import dataclasses
import logging
import sys
from typing import Sequence

from visitorgen import __version__
from visitorgen.errors import GenerationError
from visitorgen.observability import make_json_event_logger
from visitorgen.pipeline import run
from visitorgen.settings import GeneratorSettings

logger = logging.getLogger("visitorgen")

# Command line flags that map one-to-one onto GeneratorSettings fields.
_SETTING_FLAGS = {
    "--root-type": "root_type",
    "--type-prefix": "type_prefix",
    "--visit-verb": "visit_verb",
    "--unit-verb": "unit_verb",
    "--simple-visitor-name": "simple_visitor_name",
    "--unit-visitor-name": "unit_visitor_name",
    "--output-package": "output_package",
    "--context-parameter": "context_parameter",
    "--root-parameter": "root_parameter",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="visitorgen",
        description="Generate visitor base classes from a tree of node classes.",
    )
    parser.add_argument("input_root", help="directory containing the node class sources")
    parser.add_argument("output_root", help="directory the output package is written below")
    for flag, field_name in _SETTING_FLAGS.items():
        parser.add_argument(flag, dest=field_name, default=None, help=f"override {field_name}")
    parser.add_argument("--env-file", default=None, help="load VISITORGEN_* settings from this .env file")
    parser.add_argument("--json-events", action="store_true", help="log generation events as JSON lines")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def load_settings(args: argparse.Namespace) -> GeneratorSettings:
    settings = GeneratorSettings.from_env(args.env_file)
    overrides = {
        field_name: getattr(args, field_name)
        for field_name in _SETTING_FLAGS.values()
        if getattr(args, field_name) is not None
    }
    return dataclasses.replace(settings, **overrides) if overrides else settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = load_settings(args)
    except ValueError as exc:
        parser.error(str(exc))

    observer = None
    if args.json_events:
        events_logger = logging.getLogger("visitorgen.events")
        events_logger.setLevel(logging.INFO)
        observer = make_json_event_logger(logger=events_logger, level=logging.INFO)

    try:
        written = run(args.input_root, args.output_root, settings, observer=observer)
    except (GenerationError, ValueError) as exc:
        print(f"visitorgen: error: {exc}", file=sys.stderr)
        return 1

    for path in written:
        logger.info("Wrote %s", path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
