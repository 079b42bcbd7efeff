import argparse
import json
import logging
import sys
from pathlib import Path

from panelkit.components.loader import LoadContentInput, MalformedInputError, run_load
from panelkit.components.pipeline import document_to_payload, format_violation, run
from panelkit.rules.loader import RulesValidationError, get_rules
from panelkit.rules.models import Rules

logger = logging.getLogger("panelkit.cli")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_BAD_INPUT = 2


def handle_check(rules: Rules, args: argparse.Namespace) -> int:
    result = run(LoadContentInput(path=args.path), rules=rules)

    for violation in result.violations:
        print(f"{args.path}: {format_violation(violation)}")

    if result.is_valid:
        print(
            f"{args.path}: OK ({len(result.document.panels)} panels, "
            f"{len(result.document.steps)} steps)"
        )
        return EXIT_OK

    print(f"{args.path}: {len(result.violations)} violation(s)")
    return EXIT_VIOLATIONS if args.strict else EXIT_OK


def handle_dump(args: argparse.Namespace) -> int:
    document = run_load(LoadContentInput(path=args.path))
    print(json.dumps(document_to_payload(document), indent=2, ensure_ascii=False))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panelkit", description="Load and validate overview page panels and steps"
    )
    rules_help = "Path to rules file (default: panelkit_rules.yaml)"
    parser.add_argument("--rules", help=rules_help)
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --rules is also accepted after the subcommand; SUPPRESS keeps the
    # top-level value when it is not repeated there.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--rules", default=argparse.SUPPRESS, help=rules_help)

    # check
    check_parser = subparsers.add_parser(
        "check", parents=[common], help="Validate a content document"
    )
    check_parser.add_argument("path", help="TOML or YAML content document")
    check_parser.add_argument(
        "--strict", action="store_true", help="Exit non-zero when violations are found"
    )

    # dump
    dump_parser = subparsers.add_parser(
        "dump",
        parents=[common],
        help="Print a content document as JSON (loads only, does not validate)",
    )
    dump_parser.add_argument("path", help="TOML or YAML content document")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        rules = get_rules(Path(args.rules) if args.rules else None)
    except (FileNotFoundError, RulesValidationError) as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(str(e))
        return EXIT_BAD_INPUT

    logging.basicConfig(level=rules.observability.log_level)

    try:
        if args.command == "check":
            return handle_check(rules, args)
        return handle_dump(args)
    except FileNotFoundError as e:
        logger.error(str(e))
    except MalformedInputError as e:
        logger.error(f"Malformed content document: {e}")
    return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
