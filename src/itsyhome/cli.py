"""
Command-line front end.

    itsyhome --snapshot home.json resolve "Office/Spotlights"
    itsyhome --snapshot home.json run "brightness/40/light.bedroom"
    itsyhome --snapshot home.json run "itsyhome://toggle/Office/Lamp"
"""
import argparse
import json
import logging
import sys
from typing import List, Optional

from .actions import ActionEngine, ActionParser, DryRunExecutor, command_from_url
from .actions.url_scheme import URL_SCHEME
from .config_loader import configure_logging, load_config_from_env
from .exceptions import ActionError, CommandParseError, ConfigurationError, SnapshotLoadError
from .resolution import resolve
from .snapshot_loader import SnapshotLoader
from .snapshot_store import SnapshotStore
from .webhook import error_body, success_body

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itsyhome",
        description="Resolve and run home commands against a snapshot file.",
    )
    parser.add_argument("--snapshot", help="Path to a home snapshot JSON file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command_name", required=True)

    resolve_parser = subparsers.add_parser("resolve", help="Show what a target refers to")
    resolve_parser.add_argument("query", nargs="+", help="Target text, e.g. light.bedroom")

    run_parser = subparsers.add_parser("run", help="Run a command with a dry-run executor")
    run_parser.add_argument("command", help="<action>/<target> or itsyhome://<action>/<target>")

    return parser


def _print_json(payload: dict) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config_from_env()
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return EXIT_USAGE

    if args.verbose:
        config.log_level = "DEBUG"
    configure_logging(config)
    logger = logging.getLogger(__name__)

    snapshot_path = args.snapshot or config.snapshot_path
    if not snapshot_path:
        print("No snapshot given: pass --snapshot or set ITSYHOME_SNAPSHOT_PATH", file=sys.stderr)
        return EXIT_USAGE

    try:
        snapshot, groups = SnapshotLoader(snapshot_path).load()
    except SnapshotLoadError as e:
        print(str(e), file=sys.stderr)
        return EXIT_USAGE

    if args.command_name == "resolve":
        result = resolve(" ".join(args.query), snapshot, groups)
        _print_json(result.to_dict())
        return EXIT_OK if result.is_found else EXIT_FAILED

    try:
        text = args.command
        if text.lower().startswith(f"{URL_SCHEME}://"):
            text = command_from_url(text)
        parsed = ActionParser.parse(text)
    except CommandParseError as e:
        _print_json(error_body(str(e)))
        return EXIT_USAGE

    engine = ActionEngine(
        SnapshotStore(snapshot, groups),
        DryRunExecutor(),
        enable_suggestions=config.enable_suggestions,
        suggestion_limit=config.suggestion_limit,
        suggestion_threshold=config.suggestion_threshold,
    )

    try:
        outcome = engine.execute(parsed)
    except ActionError as e:
        logger.debug(f"Command {args.command!r} failed: {e}")
        _print_json(error_body(e.message))
        return EXIT_FAILED

    if outcome.is_partial:
        _print_json({
            "status": "partial",
            "message": f"{outcome.succeeded} succeeded, {outcome.failed} failed",
        })
    else:
        _print_json(success_body())
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
